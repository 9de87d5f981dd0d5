"""Bookkeeping for swap contracts and HD address indices."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .spend_info import KeychainKind

log = logging.getLogger(__name__)

Outpoint = Tuple[str, int]

# How many addresses of each ranged descriptor are imported into the node.
PRODUCTION_ADDRESS_IMPORT_COUNT = 5000
INTEGRATION_ADDRESS_IMPORT_COUNT = 10


class PrevoutContractCache:
    """Maps a previous output to the contract script pubkey agreed for it."""

    def __init__(self, entries: Mapping[Outpoint, bytes] | None = None) -> None:
        self._entries: dict[Outpoint, bytes] = dict(entries or {})

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, prevout: object) -> bool:
        return prevout in self._entries

    def __iter__(self) -> Iterator[Outpoint]:
        return iter(self._entries)

    def __getitem__(self, prevout: Outpoint) -> bytes:
        return self._entries[prevout]

    def matches(self, prevout: Outpoint, contract_scriptpubkey: bytes) -> bool:
        """Whether ``prevout`` has no cached contract or its cached contract matches.

        A prevout seen for the first time is accepted; one already bound to a
        different contract is rejected.
        """
        cached = self._entries.get(prevout)
        return cached is None or cached == contract_scriptpubkey

    def cache(self, prevout: Outpoint, contract: bytes) -> None:
        """Record ``contract`` for ``prevout``, replacing any earlier contract."""
        previous = self._entries.get(prevout)
        self._entries[prevout] = contract
        if previous is not None:
            log.warning(
                "Prevout to Contract map updated.\nExisting Contract: %s",
                previous.hex(),
            )


def address_import_count(integration: bool = False) -> int:
    """Number of addresses imported per ranged descriptor."""
    if integration:
        return INTEGRATION_ADDRESS_IMPORT_COUNT
    return PRODUCTION_ADDRESS_IMPORT_COUNT


def hd_next_index(
    paths: Iterable[Optional[Tuple[int, int]]], keychain: KeychainKind
) -> int:
    """The first index of ``keychain`` above every index already in use.

    ``paths`` holds the ``(branch, index)`` derivation of each wallet output,
    or None for outputs that are not derived from the wallet seed.
    """
    used = [
        index
        for path in paths
        if path is not None
        for branch, index in (path,)
        if branch == keychain.index_num()
    ]
    return max(used, default=-1) + 1