"""Transaction service coordinating the store, category index and undo log."""

from typing import Optional

from models.date import Date
from models.transaction import AmountLike, Transaction, to_amount
from models.undo import INSERTION, UndoEntry
from logger import get_logger

logger = get_logger()


class TransactionService:
    """Service for mutating the ledger.

    Every mutation updates the store and the category index together and
    records (or consumes) exactly one undo entry.
    """

    def __init__(self, store, categories, undo_log):
        """Initialize the transaction service.

        Args:
            store: TransactionStore holding the canonical sequence.
            categories: CategoryIndex mirroring the store.
            undo_log: UndoLog receiving one entry per add/delete.
        """
        self.store = store
        self.categories = categories
        self.undo_log = undo_log

    def add(
        self,
        date: Date,
        category: str,
        amount: AmountLike,
        description: str,
        type: str,
    ) -> int:
        """Record a new transaction.

        Args:
            date: Transaction date.
            category: Category name (case-sensitive).
            amount: Amount; converted to Decimal, sign not checked.
            description: Free-form description.
            type: 'Income' or 'Expense'. Other values are stored but never
                counted in totals.

        Returns:
            The id assigned to the new transaction.

        Raises:
            ValueError: If amount is not a number.
        """
        transaction = self.store.add(
            date, category, to_amount(amount), description, type
        )
        self.categories.on_insert(transaction)
        self.undo_log.push_insertion(transaction)

        logger.debug(
            f"Added transaction {transaction.id} ({transaction.type}, "
            f"{transaction.category}, {transaction.amount})"
        )
        return transaction.id

    def delete(self, transaction_id: int) -> bool:
        """Delete a transaction by id.

        Args:
            transaction_id: Id of the transaction to delete.

        Returns:
            True if the transaction was deleted, False if not found.
        """
        removed = self.store.remove_by_id(transaction_id)
        if removed is None:
            logger.debug(f"Delete skipped, transaction {transaction_id} not found")
            return False

        self.categories.on_remove(removed)
        self.undo_log.push_deletion(removed)

        logger.debug(f"Deleted transaction {transaction_id}")
        return True

    def undo(self) -> Optional[UndoEntry]:
        """Reverse the most recent add or delete.

        Undo consumes the log; it never pushes a new entry.

        Returns:
            The UndoEntry that was reversed, or None if there was nothing
            to undo.
        """
        entry = self.undo_log.pop()
        if entry is None:
            logger.debug("Undo requested with empty undo log")
            return None

        transaction = entry.transaction
        if entry.kind == INSERTION:
            self.store.remove_by_id(transaction.id)
            self.categories.on_remove(transaction)
        else:
            self.store.restore(transaction)
            self.categories.on_insert(transaction)

        logger.debug(f"Undid {entry.kind} of transaction {transaction.id}")
        return entry

    def find(self, transaction_id: int) -> Optional[Transaction]:
        """Get a single transaction by id.

        Returns:
            Transaction object if found, None otherwise.
        """
        return self.store.find(transaction_id)

    @property
    def undo_depth(self) -> int:
        """Number of mutations that can currently be undone."""
        return len(self.undo_log)

    @property
    def can_undo(self) -> bool:
        return self.undo_depth > 0
