"""What the wallet knows about each coin it can spend."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Mapping


class KeychainKind(IntEnum):
    """Unhardened keychain branch below the wallet's hardened derivation path."""

    EXTERNAL = 0
    INTERNAL = 1

    def index_num(self) -> int:
        """The derivation index of this branch."""
        return int(self.value)


class DisplayAddressType(Enum):
    """Categories of addresses a user can ask to see."""

    ALL = "all"
    MASTER_KEY = "masterkey"
    SEED = "seed"
    INCOMING_SWAP = "incomingswap"
    OUTGOING_SWAP = "outgoingswap"
    SWAP = "swap"
    INCOMING_CONTRACT = "incomingcontract"
    OUTGOING_CONTRACT = "outgoingcontract"
    CONTRACT = "contract"
    FIDELITY_BOND = "fidelitybond"

    @staticmethod
    def parse(text: str) -> DisplayAddressType:
        """Parse the command-line spelling of an address type."""
        try:
            return DisplayAddressType(text)
        except ValueError:
            raise ValueError("unknown type") from None


class SpendKind(Enum):
    """The kinds of coin the wallet tracks; values are their display names."""

    SEED_COIN = "regular"
    INCOMING_SWAP_COIN = "incoming-swap"
    OUTGOING_SWAP_COIN = "outgoing-swap"
    TIMELOCK_CONTRACT = "timelock-contract"
    HASHLOCK_CONTRACT = "hashlock-contract"
    FIDELITY_BOND_COIN = "fidelity-bond"


_P2WPKH_WITNESS_SIZE = 107
_P2WSH_MULTISIG_2OF2_WITNESS_SIZE = 222
_FIDELITY_BOND_WITNESS_SIZE = 115
_CONTRACT_TX_WITNESS_SIZE = 179

_WITNESS_SIZES = {
    SpendKind.SEED_COIN: _P2WPKH_WITNESS_SIZE,
    SpendKind.INCOMING_SWAP_COIN: _P2WSH_MULTISIG_2OF2_WITNESS_SIZE,
    SpendKind.OUTGOING_SWAP_COIN: _P2WSH_MULTISIG_2OF2_WITNESS_SIZE,
    SpendKind.TIMELOCK_CONTRACT: _CONTRACT_TX_WITNESS_SIZE,
    SpendKind.HASHLOCK_CONTRACT: _CONTRACT_TX_WITNESS_SIZE,
    SpendKind.FIDELITY_BOND_COIN: _FIDELITY_BOND_WITNESS_SIZE,
}

_REQUIRED_FIELDS = {
    SpendKind.SEED_COIN: ("path", "input_value"),
    SpendKind.INCOMING_SWAP_COIN: ("multisig_redeemscript",),
    SpendKind.OUTGOING_SWAP_COIN: ("multisig_redeemscript",),
    SpendKind.TIMELOCK_CONTRACT: ("multisig_redeemscript", "input_value"),
    SpendKind.HASHLOCK_CONTRACT: ("multisig_redeemscript", "input_value"),
    SpendKind.FIDELITY_BOND_COIN: ("index", "input_value"),
}

_ALL_FIELDS = ("path", "input_value", "multisig_redeemscript", "index")


@dataclass(frozen=True)
class UTXOSpendInfo:
    """Data needed, besides the unspent entry itself, to spend a coin.

    For contract kinds ``multisig_redeemscript`` is the redeemscript of the
    swapcoin the contract belongs to.
    """

    kind: SpendKind
    path: str | None = None
    input_value: int | None = None
    multisig_redeemscript: bytes | None = None
    index: int | None = None

    def __post_init__(self) -> None:
        required = _REQUIRED_FIELDS[self.kind]
        for name in _ALL_FIELDS:
            present = getattr(self, name) is not None
            if name in required and not present:
                raise ValueError(f"{self.kind.value} spend info requires {name}")
            if name not in required and present:
                raise ValueError(f"{self.kind.value} spend info takes no {name}")

    @classmethod
    def seed_coin(cls, path: str, input_value: int) -> UTXOSpendInfo:
        return cls(SpendKind.SEED_COIN, path=path, input_value=input_value)

    @classmethod
    def incoming_swap_coin(cls, multisig_redeemscript: bytes) -> UTXOSpendInfo:
        return cls(
            SpendKind.INCOMING_SWAP_COIN, multisig_redeemscript=multisig_redeemscript
        )

    @classmethod
    def outgoing_swap_coin(cls, multisig_redeemscript: bytes) -> UTXOSpendInfo:
        return cls(
            SpendKind.OUTGOING_SWAP_COIN, multisig_redeemscript=multisig_redeemscript
        )

    @classmethod
    def timelock_contract(
        cls, swapcoin_multisig_redeemscript: bytes, input_value: int
    ) -> UTXOSpendInfo:
        return cls(
            SpendKind.TIMELOCK_CONTRACT,
            multisig_redeemscript=swapcoin_multisig_redeemscript,
            input_value=input_value,
        )

    @classmethod
    def hashlock_contract(
        cls, swapcoin_multisig_redeemscript: bytes, input_value: int
    ) -> UTXOSpendInfo:
        return cls(
            SpendKind.HASHLOCK_CONTRACT,
            multisig_redeemscript=swapcoin_multisig_redeemscript,
            input_value=input_value,
        )

    @classmethod
    def fidelity_bond_coin(cls, index: int, input_value: int) -> UTXOSpendInfo:
        return cls(SpendKind.FIDELITY_BOND_COIN, index=index, input_value=input_value)

    @property
    def is_contract(self) -> bool:
        return self.kind in (SpendKind.TIMELOCK_CONTRACT, SpendKind.HASHLOCK_CONTRACT)

    @property
    def is_swap_coin(self) -> bool:
        return self.kind in (
            SpendKind.INCOMING_SWAP_COIN,
            SpendKind.OUTGOING_SWAP_COIN,
        )

    def estimate_witness_size(self) -> int:
        """Estimated witness size in bytes when this coin is spent."""
        return _WITNESS_SIZES[self.kind]

    def __str__(self) -> str:
        return self.kind.value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value}
        for name in _REQUIRED_FIELDS[self.kind]:
            value = getattr(self, name)
            data[name] = value.hex() if isinstance(value, bytes) else value
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> UTXOSpendInfo:
        kind = SpendKind(data["kind"])
        fields: dict[str, Any] = {}
        for name in _REQUIRED_FIELDS[kind]:
            if name not in data:
                raise ValueError(f"{kind.value} spend info requires {name}")
            value = data[name]
            if name == "multisig_redeemscript":
                value = bytes.fromhex(value)
            elif name in ("input_value", "index"):
                value = int(value)
            fields[name] = value
        return UTXOSpendInfo(kind, **fields)


@dataclass(frozen=True)
class UnspentEntry:
    """An unspent output as reported by the node; amounts are in satoshis."""

    txid: str
    vout: int
    amount: int
    script_pub_key: bytes
    descriptor: str | None = None
    witness_script: bytes | None = None
    confirmations: int = 0
    address: str | None = None

    def outpoint(self) -> tuple[str, int]:
        """The ``(txid, vout)`` pair identifying this output."""
        return (self.txid, self.vout)

    def to_dict(self) -> dict[str, Any]:
        return {
            "txid": self.txid,
            "vout": self.vout,
            "amount": self.amount,
            "script_pub_key": self.script_pub_key.hex(),
            "descriptor": self.descriptor,
            "witness_script": (
                None if self.witness_script is None else self.witness_script.hex()
            ),
            "confirmations": self.confirmations,
            "address": self.address,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> UnspentEntry:
        witness = data.get("witness_script")
        return UnspentEntry(
            txid=data["txid"],
            vout=int(data["vout"]),
            amount=int(data["amount"]),
            script_pub_key=bytes.fromhex(data["script_pub_key"]),
            descriptor=data.get("descriptor"),
            witness_script=None if witness is None else bytes.fromhex(witness),
            confirmations=int(data.get("confirmations", 0)),
            address=data.get("address"),
        )


@dataclass(frozen=True)
class Balances:
    """Wallet totals by category, in satoshis."""

    regular: int
    swap: int
    contract: int
    fidelity: int

    @property
    def spendable(self) -> int:
        """Regular plus swap balance."""
        return self.regular + self.swap

    def to_dict(self) -> dict[str, int]:
        return {
            "regular": self.regular,
            "swap": self.swap,
            "contract": self.contract,
            "fidelity": self.fidelity,
            "spendable": self.spendable,
        }