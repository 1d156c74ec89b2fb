"""Base services container for dependency injection."""

from config import Config


class Services:
    """Container for one in-memory ledger and the services over it.

    Each instance owns its own store, category index and undo log, so a
    CLI session or a test gets an independent ledger.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
        """
        self.config = config

        # Lazy import to avoid circular dependencies
        from services.store import TransactionStore
        from services.categories import CategoryIndex
        from services.undo import UndoLog
        from services.transactions import TransactionService
        from services.queries import QueryService

        self.store = TransactionStore()
        self.categories = CategoryIndex()
        self.undo_log = UndoLog()

        self.transactions = TransactionService(
            self.store, self.categories, self.undo_log
        )
        self.queries = QueryService(self.store, self.categories)
