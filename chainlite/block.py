"""Blocks holding up to ten transactions."""

from __future__ import annotations

import copy as _copy
import time
from dataclasses import dataclass, field
from typing import List

from .hashing import sha256_hex
from .merkle import merkle_root
from .transaction import Transaction, parse_transaction

MAX_TRANSACTIONS = 10
_HASH_LEN = 64


class TransactionLimitError(Exception):
    """Raised when a block already holds the maximum number of transactions."""


@dataclass
class Block:
    """A block: index, creation time, transactions and linking hashes."""

    index: int
    previous_hash: str
    timestamp: int = field(default_factory=lambda: int(time.time()))
    transactions: List[Transaction] = field(default_factory=list)
    merkle_root: str = ""
    current_hash: str = ""

    def __post_init__(self) -> None:
        self.previous_hash = self.previous_hash[:_HASH_LEN]

    def header_hash(self) -> str:
        """Hash of index, timestamp, previous hash and stored Merkle root."""
        return sha256_hex(
            f"{self.index}{self.timestamp}{self.previous_hash}{self.merkle_root}"
        )

    def update_hashes(self) -> None:
        """Recompute the Merkle root and then the block hash."""
        self.merkle_root = merkle_root(self.transactions)
        self.current_hash = self.header_hash()

    def add_transaction(self, text: str) -> Transaction:
        """Parse ``text``, append it and rehash; return the new transaction."""
        if len(self.transactions) >= MAX_TRANSACTIONS:
            raise TransactionLimitError("Transaction limit reached.")
        tx = parse_transaction(text)
        self.transactions.append(tx)
        self.update_hashes()
        return tx

    def render(self) -> str:
        """Human-readable description of the block."""
        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self.timestamp))
        lines = [
            "",
            f"=== BLOCK #{self.index} ===",
            f"Timestamp: {stamp}",
            f"Previous Hash: {self.previous_hash}",
            f"Merkle Root: {self.merkle_root}",
            f"Current Hash: {self.current_hash}",
            f"Transactions ({len(self.transactions)}):",
        ]
        lines.extend(f"  {n}. {tx}" for n, tx in enumerate(self.transactions, 1))
        lines.append("================")
        return "\n".join(lines) + "\n"

    def copy(self) -> "Block":
        """Return an independent deep copy."""
        return _copy.deepcopy(self)