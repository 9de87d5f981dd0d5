"""Cache of the wallet's unspent outputs paired with their spend info."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Mapping

from .spend_info import Balances, SpendKind, UnspentEntry, UTXOSpendInfo

log = logging.getLogger(__name__)

Outpoint = tuple[str, int]
CacheEntry = tuple[UnspentEntry, UTXOSpendInfo]
Classifier = Callable[[UnspentEntry], "UTXOSpendInfo | None"]


class UtxoCache:
    """Unspent outputs the wallet can account for, keyed by outpoint."""

    def __init__(self, entries: Mapping[Outpoint, CacheEntry] | None = None) -> None:
        self._entries: dict[Outpoint, CacheEntry] = dict(entries or {})

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, outpoint: object) -> bool:
        return outpoint in self._entries

    def __iter__(self) -> Iterator[Outpoint]:
        return iter(self._entries)

    def __getitem__(self, outpoint: Outpoint) -> CacheEntry:
        return self._entries[outpoint]

    def update(self, utxos: Iterable[UnspentEntry], classify: Classifier) -> None:
        """Sync the cache with the node's current unspent list.

        Outputs no longer reported are dropped. Outputs already cached are
        kept as they are; new ones are passed to ``classify`` and stored only
        when it returns spend info.
        """
        utxos = list(utxos)
        current = {utxo.outpoint() for utxo in utxos}

        for outpoint in [op for op in self._entries if op not in current]:
            del self._entries[outpoint]
            log.debug("[UTXO Cache] Removed UTXO: %s", outpoint)

        new_entries: list[tuple[Outpoint, CacheEntry]] = []
        for utxo in utxos:
            outpoint = utxo.outpoint()
            if outpoint in self._entries:
                continue
            info = classify(utxo)
            if info is not None:
                log.debug("[UTXO Cache] Added UTXO: %s -> %s", outpoint, info)
                new_entries.append((outpoint, (utxo, info)))

        self._entries.update(new_entries)

    def entries(self) -> list[CacheEntry]:
        """Every cached output with its spend info."""
        return list(self._entries.values())

    def _of_kinds(self, *kinds: SpendKind) -> list[CacheEntry]:
        return [entry for entry in self._entries.values() if entry[1].kind in kinds]

    def live_contracts(self) -> list[CacheEntry]:
        """Hashlock and timelock contract outputs."""
        return self._of_kinds(SpendKind.HASHLOCK_CONTRACT, SpendKind.TIMELOCK_CONTRACT)

    def live_timelock_contracts(self) -> list[CacheEntry]:
        """Timelock contract outputs."""
        return self._of_kinds(SpendKind.TIMELOCK_CONTRACT)

    def live_hashlock_contracts(self) -> list[CacheEntry]:
        """Hashlock contract outputs."""
        return self._of_kinds(SpendKind.HASHLOCK_CONTRACT)

    def fidelity(self) -> list[CacheEntry]:
        """Fidelity bond outputs."""
        return self._of_kinds(SpendKind.FIDELITY_BOND_COIN)

    def descriptor(self) -> list[CacheEntry]:
        """Regular single-signature outputs derived from the wallet seed."""
        return self._of_kinds(SpendKind.SEED_COIN)

    def swap_coins(self) -> list[CacheEntry]:
        """Incoming and outgoing swap coin outputs."""
        return self._of_kinds(SpendKind.INCOMING_SWAP_COIN, SpendKind.OUTGOING_SWAP_COIN)

    def incoming_swap_coins(self) -> list[CacheEntry]:
        """Incoming swap coin outputs."""
        return self._of_kinds(SpendKind.INCOMING_SWAP_COIN)

    def balances(self) -> Balances:
        """Totals by category; swap counts incoming swap coins only."""

        def total(entries: list[CacheEntry]) -> int:
            return sum(utxo.amount for utxo, _ in entries)

        return Balances(
            regular=total(self.descriptor()),
            swap=total(self.incoming_swap_coins()),
            contract=total(self.live_timelock_contracts()),
            fidelity=total(self.fidelity()),
        )

    def find_spend_info(self, txid: str, vout: int) -> UTXOSpendInfo | None:
        """Spend info of a seed or swap coin at ``txid:vout``, or None."""
        for utxo, info in self.descriptor() + self.swap_coins():
            if utxo.txid == txid and utxo.vout == vout:
                return info
        return None