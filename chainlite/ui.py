"""Interactive menu for building, inspecting and attacking a chain."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .block import Block, TransactionLimitError
from .blockchain import Blockchain, IntegrityError
from .scenarios import attempt_transaction_modification, run_interaction_tests
from .transaction import Transaction, TransactionFormatError

_MENU = """
===== BLOCKCHAIN DEMO =====
1. Add transaction to current block
2. Create new block
3. View blockchain
4. Verify blockchain integrity
5. Simulate attack
6. Run automated tests
0. Exit
Enter your choice: """


def _parse_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


class Console:
    """Text menu bound to one chain and a pair of streams."""

    def __init__(
        self,
        chain: Blockchain,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.chain = chain
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def _read_line(self) -> Optional[str]:
        """Read one line without its newline; None at end of input."""
        line = self._in.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def display_menu(self) -> None:
        """Show the menu and the choice prompt."""
        self._say(_MENU, end="")

    def add_transaction(self) -> Optional[Transaction]:
        """Read a transaction line and add it to the current block."""
        self._say(
            "\nEnter transaction (format: 'Sender sends Amount DA to Receiver'): ",
            end="",
        )
        text = self._read_line() or ""
        block = self.chain.last_block
        try:
            tx = block.add_transaction(text)
        except TransactionLimitError as exc:
            self._say(str(exc))
            return None
        except TransactionFormatError:
            self._say("Invalid transaction format. Expected: 'A sends 50 DA to B'")
            return None
        self._say(f"Transaction added to block #{block.index}")
        return tx

    def create_block(self) -> Optional[Block]:
        """Start a new block, refusing while the current one is empty."""
        if not self.chain.last_block.transactions:
            self._say(
                "\nCannot create empty block. Add at least one transaction first."
            )
            return None
        block = self.chain.new_block()
        self._say(f"\nNew block #{block.index} created and added to the blockchain.")
        return block

    def view_blockchain(self) -> None:
        """Print every block of the chain."""
        self._say("\n===== BLOCKCHAIN CONTENTS =====")
        for block in self.chain:
            self._say(block.render(), end="")

    def verify_integrity(self) -> bool:
        """Verify the chain and report the result."""
        self._say("\nVerifying blockchain integrity...")
        try:
            self.chain.verify()
        except IntegrityError as exc:
            self._say(str(exc))
            return False
        self._say("Blockchain integrity verified - all blocks are valid.")
        return True

    def simulate_attack(self) -> Optional[bool]:
        """Tamper with a chosen transaction; True when the tampering was caught."""
        self._say("\n=== EDUCATIONAL ATTACK SIMULATION ===")
        self._say("This demonstrates why blockchains are secure.\n")
        self._say("Enter block index to attack: ", end="")
        block_index = _parse_int(self._read_line())
        if block_index is None or not 0 < block_index < len(self.chain):
            self._say("Invalid block index. Try again.")
            return None
        self._say("Enter transaction index within block: ", end="")
        tx_index = _parse_int(self._read_line())
        if tx_index is None:
            self._say("Invalid transaction index.")
            return None
        try:
            return attempt_transaction_modification(
                self.chain, block_index, tx_index, self._out
            )
        except IndexError as exc:
            self._say(str(exc))
            return None

    def run(self) -> None:
        """Serve menu choices until 0 is chosen or input ends."""
        actions = {
            1: self.add_transaction,
            2: self.create_block,
            3: self.view_blockchain,
            4: self.verify_integrity,
            5: self.simulate_attack,
            6: lambda: run_interaction_tests(self._out),
        }
        while True:
            self.display_menu()
            line = self._read_line()
            if line is None:
                self._say()
                return
            choice = _parse_int(line)
            if choice == 0:
                self._say("SimpleBlockChain session terminated successfully.")
                return
            action = actions.get(choice) if choice is not None else None
            if action is None:
                self._say("Invalid choice. Please try again.")
            else:
                action()


def visualize_blockchain(chain: Blockchain) -> str:
    """Draw the chain as a column of boxes joined by arrows."""
    parts = ["\n=== BLOCKCHAIN VISUALIZATION ===\n\n"]
    for number, block in enumerate(chain):
        parts.append(
            "┌─────────────────────┐\n"
            f"│ BLOCK #{block.index:<12} │\n"
            "├─────────────────────┤\n"
            f"│ TX Count: {len(block.transactions):<9} │\n"
            f"│ Hash: {block.current_hash[:10]}...     │\n"
            "└─────────────────────┘\n"
        )
        if number < len(chain) - 1:
            parts.append("          ↓\n")
    return "".join(parts)