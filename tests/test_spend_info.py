import pytest

from swapwallet.spend_info import (
    Balances,
    DisplayAddressType,
    KeychainKind,
    SpendKind,
    UnspentEntry,
    UTXOSpendInfo,
)

SCRIPT = bytes.fromhex("5221" + "02" * 33 + "21" + "03" * 33 + "52ae")


def all_infos():
    return [
        UTXOSpendInfo.seed_coin("m/0/3", 5000),
        UTXOSpendInfo.incoming_swap_coin(SCRIPT),
        UTXOSpendInfo.outgoing_swap_coin(SCRIPT),
        UTXOSpendInfo.timelock_contract(SCRIPT, 7000),
        UTXOSpendInfo.hashlock_contract(SCRIPT, 8000),
        UTXOSpendInfo.fidelity_bond_coin(2, 9000),
    ]


def test_keychain_index_numbers():
    assert KeychainKind.EXTERNAL.index_num() == 0
    assert KeychainKind.INTERNAL.index_num() == 1


@pytest.mark.parametrize(
    "text,expected",
    [
        ("all", DisplayAddressType.ALL),
        ("masterkey", DisplayAddressType.MASTER_KEY),
        ("seed", DisplayAddressType.SEED),
        ("incomingswap", DisplayAddressType.INCOMING_SWAP),
        ("outgoingswap", DisplayAddressType.OUTGOING_SWAP),
        ("swap", DisplayAddressType.SWAP),
        ("incomingcontract", DisplayAddressType.INCOMING_CONTRACT),
        ("outgoingcontract", DisplayAddressType.OUTGOING_CONTRACT),
        ("contract", DisplayAddressType.CONTRACT),
        ("fidelitybond", DisplayAddressType.FIDELITY_BOND),
    ],
)
def test_display_address_type_parse(text, expected):
    assert DisplayAddressType.parse(text) is expected


def test_display_address_type_unknown():
    with pytest.raises(ValueError, match="unknown type"):
        DisplayAddressType.parse("nonsense")


def test_witness_sizes():
    sizes = [info.estimate_witness_size() for info in all_infos()]
    assert sizes == [107, 222, 222, 179, 179, 115]


def test_display_names():
    names = [str(info) for info in all_infos()]
    assert names == [
        "regular",
        "incoming-swap",
        "outgoing-swap",
        "timelock-contract",
        "hashlock-contract",
        "fidelity-bond",
    ]


@pytest.mark.parametrize("info", all_infos(), ids=lambda i: str(i))
def test_spend_info_round_trip(info):
    assert UTXOSpendInfo.from_dict(info.to_dict()) == info


def test_contract_and_swap_flags():
    flags = [(i.is_contract, i.is_swap_coin) for i in all_infos()]
    assert flags == [
        (False, False),
        (False, True),
        (False, True),
        (True, False),
        (True, False),
        (False, False),
    ]


def test_missing_field_rejected():
    with pytest.raises(ValueError):
        UTXOSpendInfo(SpendKind.SEED_COIN, path="m/0/1")


def test_extra_field_rejected():
    with pytest.raises(ValueError):
        UTXOSpendInfo(SpendKind.INCOMING_SWAP_COIN, multisig_redeemscript=SCRIPT, index=1)


def test_from_dict_missing_field_rejected():
    with pytest.raises(ValueError):
        UTXOSpendInfo.from_dict({"kind": "fidelity-bond", "index": 1})


def test_from_dict_unknown_kind_rejected():
    with pytest.raises(ValueError):
        UTXOSpendInfo.from_dict({"kind": "mystery"})


def test_equality_distinguishes_values():
    assert UTXOSpendInfo.fidelity_bond_coin(1, 100) == UTXOSpendInfo.fidelity_bond_coin(1, 100)
    assert not (
        UTXOSpendInfo.fidelity_bond_coin(1, 100) == UTXOSpendInfo.fidelity_bond_coin(2, 100)
    )


def test_unspent_entry_round_trip_and_outpoint():
    entry = UnspentEntry(
        txid="ab" * 32,
        vout=1,
        amount=123456,
        script_pub_key=bytes.fromhex("0014" + "11" * 20),
        descriptor="wpkh([deadbeef/0/5]02aa)#abcdefgh",
        witness_script=SCRIPT,
        confirmations=3,
    )
    assert entry.outpoint() == ("ab" * 32, 1)
    assert UnspentEntry.from_dict(entry.to_dict()) == entry


def test_unspent_entry_round_trip_without_optional_fields():
    entry = UnspentEntry(txid="cd" * 32, vout=0, amount=1, script_pub_key=b"\x00")
    restored = UnspentEntry.from_dict(entry.to_dict())
    assert restored == entry
    assert restored.witness_script is None


def test_balances_spendable_and_dict():
    balances = Balances(regular=998000, swap=0, contract=0, fidelity=5000000)
    assert balances.spendable == 998000
    assert balances.to_dict() == {
        "regular": 998000,
        "swap": 0,
        "contract": 0,
        "fidelity": 5000000,
        "spendable": 998000,
    }


def test_balances_spendable_includes_swap():
    balances = Balances(regular=10, swap=32, contract=5, fidelity=7)
    assert balances.spendable == balances.regular + balances.swap
    assert balances.to_dict()["spendable"] == balances.spendable