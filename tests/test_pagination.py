"""
Tests for the table paginator.
"""

import pytest


class TestPaginator:
    """Tests for Paginator."""

    def test_page_count_rounds_up(self):
        from app.reporting.pagination import Paginator

        paginator = Paginator(list(range(45)), page_size=20)

        assert paginator.total == 45
        assert paginator.page_count == 3

    def test_pages_partition_the_items(self):
        from app.reporting.pagination import Paginator

        items = list(range(45))
        paginator = Paginator(items, page_size=20)

        assert paginator.page(0) == items[:20]
        assert paginator.page(2) == items[40:]
        assert sum((paginator.page(i) for i in range(paginator.page_count)), []) == items

    def test_default_page_size(self):
        from app.reporting.pagination import DEFAULT_PAGE_SIZE, Paginator

        assert DEFAULT_PAGE_SIZE == 20
        assert Paginator([]).page_size == 20

    def test_empty_input_has_no_pages(self):
        from app.reporting.pagination import Paginator

        paginator = Paginator([])

        assert paginator.page_count == 0
        assert paginator.page(0) == []
        assert paginator.clamp(5) == 0

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_out_of_range_page_is_empty(self, index):
        from app.reporting.pagination import Paginator

        assert Paginator(list(range(45)), page_size=20).page(index) == []

    def test_clamp_and_navigation(self):
        from app.reporting.pagination import Paginator

        paginator = Paginator(list(range(45)), page_size=20)

        assert paginator.clamp(-4) == 0
        assert paginator.clamp(10) == 2
        assert paginator.next_index(2) == 2
        assert paginator.next_index(0) == 1
        assert paginator.previous_index(0) == 0
        assert paginator.previous_index(2) == 1

    def test_invalid_page_size_rejected(self):
        from app.reporting.pagination import Paginator

        with pytest.raises(ValueError):
            Paginator([1, 2], page_size=0)
