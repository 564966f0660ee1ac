"""Merkle tree construction over transaction strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .hashing import sha256_hex
from .transaction import Transaction

EMPTY_ROOT = "0" * 64


@dataclass
class MerkleNode:
    """A node holding a hex hash and optional children."""

    hash: str
    left: Optional["MerkleNode"] = None
    right: Optional["MerkleNode"] = None


def build_merkle_tree(items: Sequence[str]) -> Optional[MerkleNode]:
    """Build a Merkle tree from strings; ``None`` when ``items`` is empty.

    An odd number of leaves is padded with a copy of the last leaf, and any
    odd node left over on a higher level is paired with itself.
    """
    if not items:
        return None
    level = [MerkleNode(sha256_hex(item)) for item in items]
    if len(items) % 2 == 1:
        level.append(MerkleNode(sha256_hex(items[-1])))
    while len(level) > 1:
        pairs = zip(level[0::2], level[1::2] + [level[-1]] * (len(level) % 2))
        level = [
            MerkleNode(sha256_hex(left.hash + right.hash), left, right)
            for left, right in pairs
        ]
    return level[0]


def merkle_root(transactions: Iterable[Transaction]) -> str:
    """Return the Merkle root hash of transactions, or 64 zeros if none."""
    root = build_merkle_tree([str(tx) for tx in transactions])
    return EMPTY_ROOT if root is None else root.hash