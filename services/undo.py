"""LIFO log of reversible mutations."""

from typing import List, Optional

from models.transaction import Transaction
from models.undo import DELETION, INSERTION, UndoEntry


class UndoLog:
    """Stack of undo entries, most recent mutation on top."""

    def __init__(self):
        self._entries: List[UndoEntry] = []

    def push_insertion(self, transaction: Transaction) -> None:
        self._entries.append(UndoEntry(kind=INSERTION, transaction=transaction))

    def push_deletion(self, transaction: Transaction) -> None:
        self._entries.append(UndoEntry(kind=DELETION, transaction=transaction))

    def pop(self) -> Optional[UndoEntry]:
        """Remove and return the most recent entry.

        Returns:
            The UndoEntry, or None if the log is empty.
        """
        if not self._entries:
            return None
        return self._entries.pop()

    def __len__(self) -> int:
        return len(self._entries)
