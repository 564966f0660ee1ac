import io

from chainlite.blockchain import Blockchain
from chainlite.ui import Console, visualize_blockchain


def make_console(text=""):
    chain = Blockchain()
    out = io.StringIO()
    return Console(chain, io.StringIO(text), out), chain, out


def test_display_menu_lists_options():
    console, _, out = make_console()
    console.display_menu()
    text = out.getvalue()
    assert "1. Add transaction to current block" in text
    assert text.endswith("Enter your choice: ")


def test_add_transaction_appends_to_current_block():
    console, chain, out = make_console("Alice sends 50 DA to Bob\n")
    tx = console.add_transaction()
    assert tx.sender == "Alice"
    assert tx.amount == 50
    assert len(chain.last_block.transactions) == 2
    assert "Transaction added to block #0" in out.getvalue()


def test_add_transaction_rejects_bad_format():
    console, chain, out = make_console("hello world\n")
    assert console.add_transaction() is None
    assert len(chain.last_block.transactions) == 1
    assert "Invalid transaction format" in out.getvalue()


def test_add_transaction_respects_limit():
    lines = "".join("Alice sends 1 DA to Bob\n" for _ in range(10))
    console, chain, out = make_console(lines)
    results = [console.add_transaction() for _ in range(10)]
    assert results[-1] is None
    assert len(chain.last_block.transactions) == 10
    assert "Transaction limit reached." in out.getvalue()


def test_create_block_links_and_refuses_empty():
    console, chain, out = make_console()
    block = console.create_block()
    assert len(chain) == 2
    assert block.previous_hash == chain[0].current_hash
    assert console.create_block() is None
    assert len(chain) == 2
    assert "Cannot create empty block" in out.getvalue()


def test_view_blockchain_shows_every_block():
    console, chain, out = make_console()
    console.create_block()
    console.view_blockchain()
    text = out.getvalue()
    assert "=== BLOCK #0 ===" in text
    assert "=== BLOCK #1 ===" in text


def test_verify_integrity_reports_tampering():
    console, chain, out = make_console("Alice sends 5 DA to Bob\n")
    chain.new_block()
    console.add_transaction()
    assert console.verify_integrity() is True
    chain[1].transactions[0].amount = 500
    assert console.verify_integrity() is False
    assert "Merkle root mismatch in block 1!" in out.getvalue()


def test_simulate_attack_detected_and_restored():
    console, chain, out = make_console("Alice sends 5 DA to Bob\n1\n0\n")
    chain.new_block()
    console.add_transaction()
    original_hash = chain[1].current_hash
    assert console.simulate_attack() is True
    assert chain[1].transactions[0].amount == 5
    assert chain[1].current_hash == original_hash
    assert chain.is_valid()


def test_simulate_attack_rejects_genesis_index():
    console, _, out = make_console("0\n")
    assert console.simulate_attack() is None
    assert "Invalid block index. Try again." in out.getvalue()


def test_simulate_attack_rejects_bad_transaction_index():
    console, chain, out = make_console("1\n7\n")
    chain.new_block()
    assert console.simulate_attack() is None
    assert "Invalid transaction index." in out.getvalue()


def test_run_processes_choices_until_exit():
    console, chain, out = make_console("1\nAlice sends 5 DA to Bob\n2\n3\n9\n0\n")
    console.run()
    text = out.getvalue()
    assert len(chain) == 2
    assert chain[0].transactions[-1].receiver == "Bob"
    assert "Invalid choice. Please try again." in text
    assert text.rstrip().endswith("SimpleBlockChain session terminated successfully.")


def test_run_stops_at_end_of_input():
    console, chain, out = make_console("2\n")
    console.run()
    assert len(chain) == 2
    assert "terminated" not in out.getvalue()


def test_run_automated_tests_leaves_own_chain_alone():
    console, chain, out = make_console("6\n0\n")
    console.run()
    assert "ALL TESTS COMPLETED" in out.getvalue()
    assert len(chain) == 1


def test_visualize_blockchain_draws_blocks_and_links():
    chain = Blockchain()
    chain.new_block()
    chain.new_block()
    text = visualize_blockchain(chain)
    assert text.count("↓") == len(chain) - 1
    assert "│ BLOCK #2" in text
    assert f"│ Hash: {chain[0].current_hash[:10]}...     │" in text