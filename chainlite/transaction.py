"""Transfer records and parsing of the 'A sends 50 DA to B' format."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAX_INPUT = 255
_MAX_NAME = 63

_PATTERN = re.compile(
    r"\s*(\S+)\s+sends\s*([+-]?\d+)\s*da\s*to\s*(\S+)", re.IGNORECASE
)


class TransactionFormatError(ValueError):
    """Raised when text is not a valid 'Sender sends N DA to Receiver' line."""


@dataclass
class Transaction:
    """A transfer of ``amount`` DA from ``sender`` to ``receiver``."""

    sender: str
    receiver: str
    amount: int

    def __str__(self) -> str:
        return f"{self.sender} sends {self.amount} DA to {self.receiver}"


def parse_transaction(text: str) -> Transaction:
    """Parse a line such as ``'Alice sends 50 DA to Bob'``.

    Keywords are matched without regard to case, names keep their casing,
    and the amount must be positive.
    """
    match = _PATTERN.match(text[:_MAX_INPUT])
    if match is None:
        raise TransactionFormatError(
            "Invalid transaction format. Expected: 'A sends 50 DA to B'"
        )
    sender, amount_text, receiver = match.groups()
    if len(sender) > _MAX_NAME:
        raise TransactionFormatError("Sender name is too long")
    amount = int(amount_text)
    if amount <= 0:
        raise TransactionFormatError("Transaction amount must be positive")
    return Transaction(sender=sender, receiver=receiver[:_MAX_NAME], amount=amount)


def validate_transaction(text: str) -> bool:
    """Quick check that ``text`` mentions both 'sends' and 'DA'."""
    return "sends" in text and "DA" in text