import io
from unittest import mock

import pytest

from chainlite.blockchain import Blockchain
from chainlite.scenarios import (
    attempt_transaction_modification,
    run_availability,
    run_interaction_tests,
    run_malicious_behavior,
    run_nominal_operations,
    run_update_delete,
)

FIXED_TIME = 1_700_000_000.0


def _chain_with_blocks(extra_blocks):
    chain = Blockchain()
    for _ in range(extra_blocks):
        block = chain.new_block()
        block.add_transaction("Alice sends 50 DA to Bob")
    return chain


def test_modification_detected_and_restored():
    chain = _chain_with_blocks(1)
    out = io.StringIO()
    original_amount = chain[1].transactions[0].amount
    assert attempt_transaction_modification(chain, 1, 0, out) is True
    assert chain[1].transactions[0].amount == original_amount
    assert chain.is_valid()
    text = out.getvalue()
    assert "Merkle root mismatch in block 1!" in text
    assert "Attack detected! The blockchain rejected the modification." in text


def test_modification_of_genesis_goes_unnoticed():
    chain = Blockchain()
    chain[0].add_transaction("Alice sends 5 DA to Bob")
    out = io.StringIO()
    assert attempt_transaction_modification(chain, 0, 1, out) is False
    assert chain[0].transactions[1].amount == 10
    assert "Blockchain integrity verified" in out.getvalue()


@pytest.mark.parametrize("block_index", [-1, 2, 5])
def test_modification_rejects_bad_block_index(block_index):
    chain = _chain_with_blocks(1)
    with pytest.raises(IndexError, match="Invalid block index"):
        attempt_transaction_modification(chain, block_index, 0, io.StringIO())


@pytest.mark.parametrize("tx_index", [-1, 1, 9])
def test_modification_rejects_bad_transaction_index(tx_index):
    chain = _chain_with_blocks(1)
    with pytest.raises(IndexError, match="Invalid transaction index"):
        attempt_transaction_modification(chain, 1, tx_index, io.StringIO())


def test_nominal_operations_totals_match_chain():
    chain = Blockchain()
    out = io.StringIO()
    count, value = run_nominal_operations(chain, out)
    assert len(chain) == 2
    assert count == sum(len(block.transactions) for block in chain)
    assert value == sum(tx.amount for block in chain for tx in block.transactions)
    assert count == 6
    assert [str(tx) for tx in chain[1].transactions] == [
        "Grace sends 100 DA to Heidi",
        "Ivan sends 150 DA to Judy",
    ]
    assert chain[1].previous_hash == chain[0].current_hash
    assert chain.is_valid()
    assert "Blockchain integrity verified - all blocks are valid." in out.getvalue()


def test_update_delete_appends_refund_block():
    chain = _chain_with_blocks(1)
    before = len(chain[1].transactions)
    new_block = run_update_delete(chain, io.StringIO())
    assert len(chain) == 3
    assert chain.last_block is new_block
    assert len(chain[1].transactions) == before + 2
    assert str(chain[1].transactions[-1]) == (
        "Wrong_Address sends 100 DA to Correct_Address"
    )
    assert [str(tx) for tx in new_block.transactions] == [
        "Merchant sends 200 DA to Customer",
        "Customer sends 200 DA to Merchant",
    ]
    assert new_block.previous_hash == chain[1].current_hash
    assert chain.is_valid()


def test_update_delete_reports_full_block():
    chain = Blockchain()
    for _ in range(9):
        chain[0].add_transaction("Alice sends 1 DA to Bob")
    out = io.StringIO()
    run_update_delete(chain, out)
    assert len(chain[0].transactions) == 10
    assert "Transaction limit reached." in out.getvalue()


def test_malicious_behavior_detects_both_attacks():
    chain = _chain_with_blocks(2)
    out = io.StringIO()
    result = run_malicious_behavior(chain, out)
    assert result == (True, True)
    assert chain.is_valid()
    assert str(chain.last_block.transactions[-1]) == (
        "Attacker sends 1000 DA to Merchant1"
    )
    assert all(
        "Merchant2" not in str(tx) for block in chain for tx in block.transactions
    )
    assert "Blockchain integrity compromised at block 2!" in out.getvalue()


def test_malicious_behavior_on_short_chains():
    single = Blockchain()
    out = io.StringIO()
    assert run_malicious_behavior(single, out) == (None, None)
    text = out.getvalue()
    assert "Not enough blocks to test transaction modification." in text
    assert "Not enough blocks to test chain alteration." in text

    pair = _chain_with_blocks(1)
    assert run_malicious_behavior(pair, io.StringIO()) == (True, None)


def test_availability_nodes_agree_and_original_untouched():
    chain = _chain_with_blocks(2)
    original_hash = chain.chain_hash()
    out = io.StringIO()
    with mock.patch("time.time", return_value=FIXED_TIME):
        hashes = run_availability(chain, out)
    assert len(hashes) == 3
    assert hashes[0] == hashes[1] == hashes[2]
    assert hashes[0] != original_hash
    assert len(chain) == 3
    assert chain.chain_hash() == original_hash
    assert "All nodes are consistent!" in out.getvalue()


def test_interaction_tests_produce_valid_final_chain():
    out = io.StringIO()
    with mock.patch("time.time", return_value=FIXED_TIME):
        chain = run_interaction_tests(out)
    assert len(chain) == 3
    assert chain.is_valid()
    text = out.getvalue()
    assert "STARTING BLOCKCHAIN INTERACTION TESTS" in text
    assert "ALL TESTS COMPLETED" in text
    assert text.count("=== BLOCK #") == len(chain)
    assert text.index("ALL TESTS COMPLETED") < text.index("=== Final Blockchain State ===")