import logging

import pytest

from pico_paging import InvalidArgumentError, Page, Pagination, Sort, UNPAGINATED


class CountingSupplier:
    def __init__(self, total: int):
        self.total = total
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.total


@pytest.fixture
def supplier():
    return CountingSupplier(42)


@pytest.mark.parametrize("pagination", [None, UNPAGINATED])
def test_unpaginated_uses_content_size(pagination, supplier):
    page = Page.deferred(["a", "b", "c"], pagination, None, supplier)
    assert page.total_elements == 3
    assert supplier.calls == 0


def test_short_first_page_uses_content_size(supplier):
    page = Page.deferred(["a", "b", "c"], Pagination(0, 10), Sort.by("name"), supplier)
    assert page.total_elements == 3
    assert page.sort == Sort.by("name")
    assert supplier.calls == 0


def test_empty_first_page_uses_content_size(supplier):
    page = Page.deferred([], Pagination(0, 10), None, supplier)
    assert page.total_elements == 0
    assert supplier.calls == 0


def test_empty_page_past_first_asks_supplier(supplier):
    page = Page.deferred([], Pagination(1, 10), None, supplier)
    assert page.total_elements == 42
    assert supplier.calls == 1


def test_short_page_past_first_asks_supplier(supplier):
    page = Page.deferred(["x", "y"], Pagination(4, 10), None, supplier)
    assert page.total_elements == 42
    assert supplier.calls == 1


def test_full_page_asks_supplier_once(supplier):
    page = Page.deferred(list(range(10)), Pagination(0, 10), None, supplier)
    assert page.total_elements == 42
    assert page.total_pages == 5
    assert supplier.calls == 1


def test_supplier_errors_propagate():
    def failing():
        raise ConnectionError("count query failed")

    with pytest.raises(ConnectionError, match="count query failed"):
        Page.deferred([1, 2], Pagination(0, 2), None, failing)


def test_supplier_total_is_still_validated():
    with pytest.raises(ValueError, match="Total elements"):
        Page.deferred([1, 2], Pagination(0, 2), None, lambda: 1)


def test_content_iterator_is_materialized(supplier):
    page = Page.deferred(iter(["a", "b"]), Pagination(0, 5), None, supplier)
    assert page.content == ("a", "b")
    assert page.total_elements == 2


def test_deferred_logs_how_total_was_found(caplog, supplier):
    with caplog.at_level(logging.DEBUG, logger="pico_paging.page"):
        Page.deferred(["a"], Pagination(0, 5), None, supplier)
        Page.deferred(["a"] * 5, Pagination(0, 5), None, supplier)
    assert "Short first page" in caplog.text
    assert "asking supplier" in caplog.text


@pytest.mark.parametrize("total", [None, 10.0, "10"])
def test_supplier_must_return_an_integer(total):
    with pytest.raises(InvalidArgumentError, match="supplier must return an integer"):
        Page.deferred([1, 2], Pagination(3, 2), None, lambda: total)
