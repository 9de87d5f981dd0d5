# swapwallet

This package does the coin bookkeeping for a coinswap wallet. It records how
each unspent output can be spent. That may be a seed coin, an incoming or
outgoing swap coin, a timelock or hashlock contract, or a fidelity bond. It
keeps a cache of the classified outputs and adds up balances by category. It
also tracks the contracts agreed for previous outputs and works out the next
free HD derivation index.

The package is pure Python and depends on nothing outside the standard
library.

## Install

```
pip install .
```

## Modules

### `swapwallet.spend_info`

- `SpendKind` is the kind of a coin. Each value is also its display name:
  `regular`, `incoming-swap`, `outgoing-swap`, `timelock-contract`,
  `hashlock-contract` and `fidelity-bond`.
- `UTXOSpendInfo` is a frozen record of what is needed to spend a coin.
  - Build one with a constructor for its kind: `seed_coin(path, input_value)`,
    `incoming_swap_coin(...)`, `outgoing_swap_coin(...)`,
    `timelock_contract(...)`, `hashlock_contract(...)` or
    `fidelity_bond_coin(index, input_value)`.
  - A record built with a missing field, or with a field its kind does not
    take, raises `ValueError`.
  - `estimate_witness_size()` gives the witness size in bytes: 107 for a
    seed coin, 222 for a swap coin, 179 for a contract and 115 for a
    fidelity bond.
  - `to_dict()` and `from_dict()` convert the record to and from plain
    data. Scripts are stored as hex.
- `UnspentEntry` is an unspent output as the node reports it, with the amount
  in satoshis. `outpoint()` returns `(txid, vout)`. It also has
  `to_dict()` and `from_dict()`.
- `Balances` holds the totals `regular`, `swap`, `contract` and `fidelity`.
  `spendable` is `regular + swap`. `to_dict()` returns all five values.
- `KeychainKind` is the derivation branch: `EXTERNAL` is 0 and `INTERNAL`
  is 1.
- `DisplayAddressType.parse(text)` reads names such as `all`, `seed`,
  `swap`, `contract` or `fidelitybond`. Any other name raises
  `ValueError("unknown type")`.

### `swapwallet.utxo_cache`

`UtxoCache` maps each outpoint to an `(UnspentEntry, UTXOSpendInfo)` pair.

- `update(utxos, classify)` syncs the cache with the node's current list of
  unspent outputs.
  - Outputs that are no longer reported are dropped.
  - Outputs already in the cache are kept unchanged.
  - Each new output is passed to `classify`. It is stored only when
    `classify` returns spend info.
- `entries()` returns every cached pair.
- These methods return the pairs of one category:
  - `descriptor()`
  - `swap_coins()`
  - `incoming_swap_coins()`
  - `live_contracts()`
  - `live_timelock_contracts()`
  - `live_hashlock_contracts()`
  - `fidelity()`
- `balances()` adds up the amounts by category:
  - `swap` counts incoming swap coins only.
  - `contract` counts timelock contracts only.
- `find_spend_info(txid, vout)` looks up a seed coin or swap coin. It
  returns `None` when there is no match.

### `swapwallet.contracts`

- `PrevoutContractCache` stores the contract agreed for each previous output.
  - `matches(prevout, contract_scriptpubkey)` accepts a prevout that has no
    cached contract, or one whose cached contract is equal to the given one.
  - `cache(prevout, contract)` records a contract. It replaces any earlier
    contract and logs a warning when it does.
- `address_import_count(integration=False)` returns the number of addresses
  imported for each ranged descriptor: 5000, or 10 when `integration` is set.
- `hd_next_index(paths, keychain)` returns the first index on the given
  branch that is above every index in use.
  - `paths` holds one `(branch, index)` pair per output, or `None` for an
    output that is not derived from the wallet seed.
  - When the branch has no index in use, the result is 0.

## Example

```python
from swapwallet.contracts import hd_next_index
from swapwallet.spend_info import KeychainKind, UnspentEntry, UTXOSpendInfo
from swapwallet.utxo_cache import UtxoCache

coin = UnspentEntry(
    txid="aa" * 32,
    vout=0,
    amount=50_000,
    script_pub_key=bytes.fromhex("0014" + "11" * 20),
)

cache = UtxoCache()
cache.update([coin], lambda utxo: UTXOSpendInfo.seed_coin("m/0/0", utxo.amount))
print(cache.balances().to_dict())
# {'regular': 50000, 'swap': 0, 'contract': 0, 'fidelity': 0, 'spendable': 50000}

print(hd_next_index([(0, 3), (1, 7), None], KeychainKind.EXTERNAL))  # 4
```

## What this package does not do

This package only keeps the books. It does not do any of the following:

- It does not talk to a Bitcoin node. You supply the unspent outputs and the
  classifier that decides how each one is spent.
- It does not derive keys, build or sign transactions, or broadcast them.
- It does not create, value or redeem fidelity bonds. Fidelity bond coins
  appear here only as one kind of spend info.
- It does not save wallet state to disk.

## Tests

```
pip install .[test]
pytest
```