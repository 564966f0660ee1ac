# chainlite

A small, self-contained blockchain for learning how blocks, hashes and
Merkle trees fit together. Each block holds up to ten transactions. A
transaction is a line of plain English, such as `Alice sends 50 DA to Bob`.
SHA-256 hashes link the blocks together, and the chain can be checked for
tampering.

## Install

```
pip install .
```

## Interactive console

```
chainlite
```

The command creates a genesis block and opens a menu with these choices:

1. add a transaction to the current block
2. create a new block (refused while the current block is empty)
3. view every block in the chain
4. verify the chain's integrity
5. simulate an attack that doubles a stored amount without rehashing
6. run the automated interaction scenarios
0. exit

The console also stops when its input ends.

## Using it as a library

```python
from chainlite.blockchain import Blockchain

chain = Blockchain()                       # starts with a genesis block
chain.last_block.add_transaction("Alice sends 50 DA to Bob")

block = chain.new_block()                  # linked to the previous block
block.add_transaction("Carol sends 20 DA to Dave")

print(chain.is_valid())       # True
print(chain.chain_hash())     # SHA-256 over every block hash, in order
print(block.render())
```

### Modules

- `chainlite.hashing`: `sha256_hex(text)` returns a lowercase hex digest.
- `chainlite.transaction`: the `Transaction` dataclass (`sender`, `receiver`, `amount`) and `parse_transaction(text)`.
  - Keywords are matched in any case, and names keep the casing they were given.
  - The amount must be positive, otherwise the function raises `TransactionFormatError`.
  - `validate_transaction(text)` is a quick check that the text contains both `sends` and `DA`.
- `chainlite.merkle`: `build_merkle_tree(items)` returns a tree of `MerkleNode`.
  - If there is an odd number of leaves, the last leaf is duplicated.
  - `merkle_root(transactions)` returns the root hash, or 64 zeros when there are no transactions.
- `chainlite.block`: the `Block` dataclass.
  - `add_transaction(text)` raises `TransactionLimitError` once the block holds ten transactions.
  - Other methods are `update_hashes()`, `header_hash()`, `render()` and `copy()`.
- `chainlite.blockchain`: `Blockchain` supports `len`, iteration and indexing.
  - `append`, `new_block`, `copy` and `chain_hash` build and compare chains.
  - `verify()` raises `IntegrityError` on a broken link, a Merkle root mismatch or a hash mismatch. The error carries `block_index`.
  - `is_valid()` returns `True` or `False` instead of raising.
  - `PeerNode(id, replica).replicate()` renders a peer's copy of the chain.
  - `simulate_consensus(block)` is a simplified vote: three peers approve blocks with an even index.
- `chainlite.scenarios`: scripted demonstrations that print to an optional stream.
  - `run_nominal_operations`, `run_update_delete` and `run_malicious_behavior` exercise normal use, corrections and attacks.
  - `run_availability` shows failover between three replicas.
  - `attempt_transaction_modification` tries a single tampering attack.
  - `run_interaction_tests(out)` runs all of them on a fresh chain.
- `chainlite.ui`: `Console(chain, stdin, stdout)` is the interactive menu. `visualize_blockchain(chain)` returns the chain drawn as boxes joined by arrows.

## What it does not do

Chains live only in memory. There is no saving or loading, and no networking
between peers. Replication and consensus are simulated within one process.
There is no proof of work: a block's hash is computed once, with no
difficulty target.

## Tests

```
pip install .[test]
pytest
```