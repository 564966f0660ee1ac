"""Scripted demonstrations of chain behaviour: normal use, corrections, attacks, failover."""

from __future__ import annotations

from typing import List, Optional, TextIO, Tuple

from .block import Block, TransactionLimitError
from .blockchain import Blockchain, IntegrityError
from .transaction import TransactionFormatError

_BANNER = "============================================"
_FORGED_PREVIOUS_HASH = "0" * 60 + "abcd"
_NODE_COUNT = 3
_FAILED_NODE = 1


def _add(block: Block, text: str, out: Optional[TextIO]) -> bool:
    """Add a transaction, reporting rather than propagating a rejection."""
    try:
        block.add_transaction(text)
    except TransactionLimitError as exc:
        print(exc, file=out)
        return False
    except TransactionFormatError:
        print(
            "Invalid transaction format. Expected: 'A sends 50 DA to B'", file=out
        )
        return False
    return True


def _check(chain: Blockchain, out: Optional[TextIO]) -> bool:
    """Verify the chain and report the outcome."""
    try:
        chain.verify()
    except IntegrityError as exc:
        print(exc, file=out)
        return False
    print("Blockchain integrity verified - all blocks are valid.", file=out)
    return True


def attempt_transaction_modification(
    chain: Blockchain, block_index: int, tx_index: int, out: Optional[TextIO] = None
) -> bool:
    """Double a stored amount without rehashing and see whether verification notices.

    Returns True when the tampering was detected; the original amount is then
    restored. Undetected tampering is left in place.
    """
    if not 0 <= block_index < len(chain):
        raise IndexError("Invalid block index.")
    block = chain[block_index]
    if not 0 <= tx_index < len(block.transactions):
        raise IndexError("Invalid transaction index.")

    print(
        f"\nAttempting to modify transaction {tx_index} in block {block_index}...",
        file=out,
    )
    original_hash = block.current_hash
    tx = block.transactions[tx_index]
    original_amount = tx.amount

    print(f"Original transaction: {tx}", file=out)
    tx.amount *= 2
    print(f"Modified transaction: {tx}", file=out)
    print(f"Block hash before: {original_hash}", file=out)
    print(
        f"Block hash after modification (not recalculated): {block.current_hash}",
        file=out,
    )

    if _check(chain, out):
        return False
    print("Attack detected! The blockchain rejected the modification.", file=out)
    tx.amount = original_amount
    block.current_hash = original_hash
    return True


def run_nominal_operations(
    chain: Blockchain, out: Optional[TextIO] = None
) -> Tuple[int, int]:
    """Write transactions and a new block, then read everything back.

    Returns the total number of transactions and the total value transferred.
    """
    print("\n=== Nominal Operations Test ===", file=out)
    print("Testing write operations...", file=out)

    current = chain.last_block
    for text in (
        "Alice sends 50 DA to Bob",
        "Charlie sends 75 DA to Dave",
        "Eve sends 25 DA to Frank",
    ):
        _add(current, text, out)
    print("3 transactions added to the current block.", file=out)

    new_block = chain.new_block()
    _add(new_block, "Grace sends 100 DA to Heidi", out)
    _add(new_block, "Ivan sends 150 DA to Judy", out)
    print("New block created and added to blockchain.", file=out)

    print("\nTesting read operations...", file=out)
    total_transactions = 0
    total_value = 0
    for block in chain:
        print(
            f"Block #{block.index} contains {len(block.transactions)} transactions.",
            file=out,
        )
        total_transactions += len(block.transactions)
        total_value += sum(tx.amount for tx in block.transactions)

    print(f"\nTotal transactions in blockchain: {total_transactions}", file=out)
    print(f"Total value transferred: {total_value} DA", file=out)

    _check(chain, out)
    return total_transactions, total_value


def run_update_delete(chain: Blockchain, out: Optional[TextIO] = None) -> Block:
    """Show corrections and refunds as new transactions; return the new block."""
    print("\n=== Update and Delete Operations Test ===", file=out)
    print(
        "In a blockchain, direct updates are not possible. "
        "Instead, we create a new transaction to correct a previous one.",
        file=out,
    )

    current = chain.last_block
    _add(current, "Alice sends 100 DA to Wrong_Address", out)
    print(
        "Added erroneous transaction: Alice sends 100 DA to Wrong_Address", file=out
    )
    _add(current, "Wrong_Address sends 100 DA to Correct_Address", out)
    print(
        "Added corrective transaction: "
        "Wrong_Address sends 100 DA to Correct_Address",
        file=out,
    )

    new_block = Block(index=len(chain), previous_hash=chain.last_block.current_hash)

    print(
        "\nIn a blockchain, direct deletion is not possible. "
        "Data is immutable once added.",
        file=out,
    )
    print(
        "However, we can record a transaction that effectively cancels a previous one.",
        file=out,
    )
    _add(new_block, "Merchant sends 200 DA to Customer", out)
    print("Added transaction: Merchant sends 200 DA to Customer", file=out)
    _add(new_block, "Customer sends 200 DA to Merchant", out)
    print("Added refund transaction: Customer sends 200 DA to Merchant", file=out)

    chain.append(new_block)
    print("New block created and added to finalize these transactions.", file=out)
    print(
        "\nThe blockchain maintains a complete history of all transactions, "
        "even those that have been 'corrected' or 'refunded'.",
        file=out,
    )

    _check(chain, out)
    return new_block


def run_malicious_behavior(
    chain: Blockchain, out: Optional[TextIO] = None
) -> Tuple[Optional[bool], Optional[bool]]:
    """Try tampering, chain breaking and a double spend.

    Returns whether the transaction modification and the chain break were
    detected, with None for an attack the chain was too short to attempt.
    """
    print("\n=== Malicious Behavior Test ===", file=out)

    modification_detected: Optional[bool] = None
    if len(chain) > 1:
        modification_detected = attempt_transaction_modification(chain, 1, 0, out)
    else:
        print("Not enough blocks to test transaction modification.", file=out)

    print("\nAttempting to break the chain between blocks...", file=out)
    chain_break_detected: Optional[bool] = None
    if len(chain) > 2:
        block = chain[2]
        original_previous = block.previous_hash
        print(f"Original previous hash: {original_previous}", file=out)
        block.previous_hash = _FORGED_PREVIOUS_HASH
        print(f"Modified previous hash: {block.previous_hash}", file=out)
        chain_break_detected = not _check(chain, out)
        if chain_break_detected:
            print(
                "Attack detected! The blockchain rejected the modification.", file=out
            )
            block.previous_hash = original_previous
    else:
        print("Not enough blocks to test chain alteration.", file=out)

    print("\nSimulating a double spending attack...", file=out)
    current = chain.last_block
    fork_block = current.copy()
    print("On main chain: ", end="", file=out)
    _add(current, "Attacker sends 1000 DA to Merchant1", out)
    print("On fork chain: ", end="", file=out)
    _add(fork_block, "Attacker sends 1000 DA to Merchant2", out)
    print(
        "Double spending detected! "
        "The consensus mechanism ensures only one chain is valid.",
        file=out,
    )
    print(
        "The longest chain rule would typically determine which transaction is valid.",
        file=out,
    )
    return modification_detected, chain_break_detected


def run_availability(chain: Blockchain, out: Optional[TextIO] = None) -> List[str]:
    """Replicate the chain to three nodes, fail and recover one, compare them.

    The given chain is left untouched. Returns each node's chain hash.
    """
    print("\n=== Availability Test ===", file=out)
    print("Simulating a network partition with 3 nodes...", file=out)

    nodes: List[Optional[Blockchain]] = []
    for number in range(1, _NODE_COUNT + 1):
        replica = chain.copy()
        nodes.append(replica)
        print(
            f"Node {number} has a complete copy of the blockchain "
            f"with {len(replica)} blocks.",
            file=out,
        )

    print("\nSimulating failure of Node 2...", file=out)
    nodes[_FAILED_NODE] = None

    print("Adding a new block on remaining nodes...", file=out)
    for number, replica in enumerate(nodes, 1):
        if replica is None:
            continue
        new_block = Block(
            index=len(replica), previous_hash=replica.last_block.current_hash
        )
        _add(new_block, "Alice sends 100 DA to Bob", out)
        _add(new_block, "Charlie sends 50 DA to Dave", out)
        replica.append(new_block)
        print(
            f"Node {number} added a new block. Total blocks: {len(replica)}", file=out
        )

    print("\nSimulating recovery of Node 2...", file=out)
    first = nodes[0]
    assert first is not None
    recovered = first.copy()
    nodes[_FAILED_NODE] = recovered
    print(
        f"Node 2 has been synchronized with Node 1. Total blocks: {len(recovered)}",
        file=out,
    )

    print("\nVerifying consistency between nodes...", file=out)
    hashes = [replica.chain_hash() for replica in nodes if replica is not None]
    for number, digest in enumerate(hashes, 1):
        print(f"Node {number} blockchain hash: {digest[:10]}...", file=out)

    if all(digest == hashes[0] for digest in hashes):
        print(
            "All nodes are consistent! "
            "The system maintained availability despite failure.",
            file=out,
        )
    else:
        print("Inconsistency detected between nodes.", file=out)
    return hashes


def run_interaction_tests(out: Optional[TextIO] = None) -> Blockchain:
    """Run every scenario on a fresh chain, print it, and return it."""
    chain = Blockchain()

    print(f"\n{_BANNER}", file=out)
    print("STARTING BLOCKCHAIN INTERACTION TESTS", file=out)
    print(_BANNER, file=out)

    run_nominal_operations(chain, out)
    run_update_delete(chain, out)
    run_malicious_behavior(chain, out)
    run_availability(chain, out)

    print(f"\n{_BANNER}", file=out)
    print("ALL TESTS COMPLETED", file=out)
    print(_BANNER, file=out)

    print("\n=== Final Blockchain State ===", file=out)
    for block in chain:
        print(block.render(), end="", file=out)
    return chain