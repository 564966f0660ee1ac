"""A chain of blocks with integrity verification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .block import Block
from .hashing import sha256_hex
from .merkle import merkle_root
from .transaction import Transaction

_PEERS = 3


class IntegrityError(Exception):
    """Raised when verification finds a broken or tampered block."""

    def __init__(self, message: str, block_index: int) -> None:
        super().__init__(message)
        self.block_index = block_index


class Blockchain:
    """An ordered list of blocks starting with a genesis block."""

    def __init__(self, blocks: Optional[List[Block]] = None) -> None:
        if blocks is None:
            genesis = Block(index=0, previous_hash="0")
            genesis.transactions.append(Transaction("System", "Network", 0))
            genesis.update_hashes()
            blocks = [genesis]
        self._blocks: List[Block] = blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __getitem__(self, index):
        return self._blocks[index]

    @property
    def last_block(self) -> Block:
        """The most recently added block."""
        return self._blocks[-1]

    def append(self, block: Block) -> None:
        """Add ``block`` to the end of the chain."""
        self._blocks.append(block)

    def new_block(self) -> Block:
        """Create a block linked to the last one, append it and return it."""
        block = Block(index=len(self._blocks), previous_hash=self.last_block.current_hash)
        self.append(block)
        return block

    def copy(self) -> "Blockchain":
        """Return an independent deep copy of the chain."""
        return Blockchain([block.copy() for block in self._blocks])

    def chain_hash(self) -> str:
        """Hash of all block hashes concatenated in order."""
        return sha256_hex("".join(block.current_hash for block in self._blocks))

    def verify(self) -> None:
        """Check links, Merkle roots and block hashes; raise on the first fault."""
        for number, (previous, current) in enumerate(
            zip(self._blocks, self._blocks[1:]), start=1
        ):
            if current.previous_hash != previous.current_hash:
                raise IntegrityError(
                    f"Blockchain integrity compromised at block {number}!", number
                )
            if merkle_root(current.transactions) != current.merkle_root:
                raise IntegrityError(
                    f"Merkle root mismatch in block {number}! "
                    "Transactions have been tampered with.",
                    number,
                )
            if current.header_hash() != current.current_hash:
                raise IntegrityError(
                    f"Hash mismatch in block {number}! "
                    "Block data has been tampered with.",
                    number,
                )

    def is_valid(self) -> bool:
        """True when :meth:`verify` finds no fault."""
        try:
            self.verify()
        except IntegrityError:
            return False
        return True


@dataclass
class PeerNode:
    """A peer holding its own replica of the chain."""

    id: int
    replica: Blockchain

    def replicate(self) -> str:
        """Describe the replication of every block in the replica."""
        header = f"Peer {self.id} is replicating the blockchain...\n"
        return header + "".join(block.render() for block in self.replica)


def simulate_consensus(block: Block) -> bool:
    """Simplified vote: each of three peers approves blocks with an even index."""
    approvals = sum(1 for _ in range(_PEERS) if block.index % 2 == 0)
    return approvals > _PEERS // 2