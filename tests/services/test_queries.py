from decimal import Decimal

from models.date import Date
from models.transaction import EXPENSE, INCOME


class TestQueryService:
    """Tests for QueryService over the November 2025 sample ledger."""

    def test_all_in_store_order(self, november_services):
        """Test full listing is oldest first."""
        assert [t.id for t in november_services.queries.all()] == [1, 2, 3, 4, 5, 6]

    def test_by_category_includes_all_types(self, services):
        """Test category listing returns income and expenses alike."""
        services.transactions.add(Date(2025, 11, 1), "Gifts", "50", "Given", EXPENSE)
        services.transactions.add(Date(2025, 11, 2), "Gifts", "80", "Received", INCOME)

        assert [t.description for t in services.queries.by_category("Gifts")] == [
            "Given",
            "Received",
        ]

    def test_by_category_unknown(self, november_services):
        """Test unknown category returns an empty list."""
        assert november_services.queries.by_category("Travel") == []

    def test_monthly_total_expenses(self, november_services):
        """Test November expense total excludes the salary."""
        total = november_services.queries.monthly_total(11, 2025, EXPENSE)

        assert total == Decimal("3000.50")

    def test_monthly_total_without_filter(self, november_services):
        """Test that without a type filter every transaction counts."""
        total = november_services.queries.monthly_total(11, 2025)

        assert total == Decimal("23000.50")

    def test_monthly_total_income(self, november_services):
        assert november_services.queries.monthly_total(11, 2025, INCOME) == Decimal(
            "20000"
        )

    def test_monthly_total_requires_matching_year(self, november_services):
        """Test same month in another year is not counted."""
        november_services.transactions.add(
            Date(2024, 11, 3), "Food", "999", "Last year", EXPENSE
        )

        assert november_services.queries.monthly_total(11, 2025, EXPENSE) == Decimal(
            "3000.50"
        )

    def test_monthly_total_empty_is_zero(self, november_services):
        assert november_services.queries.monthly_total(1, 2026) == Decimal("0")

    def test_category_summary_excludes_income(self, november_services):
        """Test expense-by-category totals; Salary has income only."""
        summary = november_services.queries.category_summary()

        assert summary == {
            "Food": Decimal("900.50"),
            "Transport": Decimal("100"),
            "Entertainment": Decimal("500"),
            "Utilities": Decimal("1500"),
            "Salary": Decimal("0"),
        }

    def test_category_summary_mixed_bucket(self, services):
        """Test income inside an expense category is left out of its total."""
        services.transactions.add(Date(2025, 11, 1), "Food", "30", "Meal", EXPENSE)
        services.transactions.add(Date(2025, 11, 2), "Food", "12", "Refund", INCOME)

        assert services.queries.category_summary() == {"Food": Decimal("30")}

    def test_search_by_date_range_inclusive(self, november_services):
        """Test days 5-12 pick the transactions dated 7, 10 and 12."""
        results = november_services.queries.search_by_date_range(
            Date(2025, 11, 5), Date(2025, 11, 12)
        )

        assert [t.date.day for t in results] == [7, 10, 12]

    def test_search_by_date_range_across_months(self, services):
        """Test range checks use year/month/day ordering."""
        for d in [Date(2025, 10, 31), Date(2025, 11, 1), Date(2026, 1, 1)]:
            services.transactions.add(d, "A", "1", "", EXPENSE)

        results = services.queries.search_by_date_range(
            Date(2025, 10, 15), Date(2025, 12, 31)
        )

        assert [t.date for t in results] == [Date(2025, 10, 31), Date(2025, 11, 1)]

    def test_search_by_date_range_reversed_is_empty(self, november_services):
        results = november_services.queries.search_by_date_range(
            Date(2025, 11, 30), Date(2025, 11, 1)
        )

        assert results == []

    def test_search_by_amount_range_inclusive(self, november_services):
        """Test 100-700 includes both boundaries and excludes 1500."""
        results = november_services.queries.search_by_amount_range(
            Decimal("100"), Decimal("700")
        )

        assert [t.amount for t in results] == [
            Decimal("250.50"),
            Decimal("100"),
            Decimal("650"),
            Decimal("500"),
        ]

    def test_search_by_keyword_case_sensitive(self, november_services):
        """Test default keyword search matches case exactly."""
        queries = november_services.queries

        assert [t.id for t in queries.search_by_keyword("Bill")] == [5]
        assert queries.search_by_keyword("bill") == []

    def test_search_by_keyword_ignore_case(self, november_services):
        """Test optional case-insensitive keyword search."""
        results = november_services.queries.search_by_keyword(
            "bill", ignore_case=True
        )

        assert [t.id for t in results] == [5]

    def test_search_by_keyword_matches_description_only(self, november_services):
        """Test that category names are not searched."""
        assert november_services.queries.search_by_keyword("Food") == []

    def test_top_expenses(self, november_services):
        """Test top 3 expenses come back ranked by amount."""
        ranked = november_services.queries.top_expenses(3)

        assert [r.rank for r in ranked] == [1, 2, 3]
        assert [r.transaction.amount for r in ranked] == [
            Decimal("1500"),
            Decimal("650"),
            Decimal("500"),
        ]

    def test_top_expenses_default_and_excludes_income(self, november_services):
        """Test default n=5 and that income never ranks."""
        ranked = november_services.queries.top_expenses()

        assert len(ranked) == 5
        assert all(r.transaction.type == EXPENSE for r in ranked)

    def test_top_expenses_n_larger_than_count(self, november_services):
        assert len(november_services.queries.top_expenses(50)) == 5

    def test_top_expenses_non_positive_n(self, november_services):
        assert november_services.queries.top_expenses(0) == []
        assert november_services.queries.top_expenses(-1) == []

    def test_top_expenses_ties_keep_store_order(self, services):
        """Test equal amounts keep their original relative order."""
        for name in ["first", "second", "third"]:
            services.transactions.add(Date(2025, 11, 1), "A", "10", name, EXPENSE)

        ranked = services.queries.top_expenses(3)

        assert [r.transaction.description for r in ranked] == [
            "first",
            "second",
            "third",
        ]

    def test_totals(self, november_services):
        queries = november_services.queries

        assert queries.total_income() == Decimal("20000")
        assert queries.total_expenses() == Decimal("3000.50")
        assert queries.transaction_count() == 6

    def test_statistics(self, november_services):
        """Test the composite statistics record."""
        stats = november_services.queries.statistics()

        assert stats.transaction_count == 6
        assert stats.total_income == Decimal("20000")
        assert stats.total_expenses == Decimal("3000.50")
        assert stats.net == Decimal("16999.50")
        assert stats.category_count == 5

    def test_statistics_empty(self, services):
        stats = services.queries.statistics()

        assert stats.transaction_count == 0
        assert stats.net == Decimal("0")
        assert stats.category_count == 0

    def test_queries_do_not_touch_undo_log(self, november_services):
        """Test that running reports leaves the undo log alone."""
        services = november_services
        depth = services.transactions.undo_depth

        services.queries.statistics()
        services.queries.top_expenses()
        services.queries.category_summary()
        services.queries.search_by_keyword("a")

        assert services.transactions.undo_depth == depth
