"""UndoEntry model recording one reversible ledger mutation."""

from dataclasses import dataclass

from models.transaction import Transaction

INSERTION = "insertion"
DELETION = "deletion"


@dataclass(frozen=True)
class UndoEntry:
    """A logged mutation with the full transaction snapshot.

    Attributes:
        kind: Either ``"insertion"`` or ``"deletion"``.
        transaction: The transaction as it was when the mutation happened.
    """

    kind: str
    transaction: Transaction
