import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TypeVar

from .errors import InvalidArgumentError
from .pagination import Pagination, _is_int
from .slice import Slice
from .sort import Sort

log = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Page(Slice[T]):
    """A slice that also knows the total number of elements.

    ``total_elements`` left as ``None`` means the content is the whole
    result set. ``Page(items, total_elements=n)`` describes an
    unpaginated, unsorted page of a larger collection.
    """

    total_elements: Optional[int] = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.total_elements is None:
            object.__setattr__(self, "total_elements", len(self.content))
        elif not _is_int(self.total_elements):
            raise InvalidArgumentError(f"Total elements must be an integer, got {self.total_elements!r}")
        elif self.total_elements < len(self.content):
            raise InvalidArgumentError(
                f"Total elements ({self.total_elements}) must be greater than or equal "
                f"to the size of the content ({len(self.content)})"
            )

    @property
    def total_pages(self) -> int:
        if not self.pagination.is_paginated:
            return 1
        size = self.pagination.size
        if size == 0:
            return 1
        return (self.total_elements + size - 1) // size

    @property
    def is_first(self) -> bool:
        return not self.pagination.is_paginated or self.pagination.number == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        if not self.pagination.is_paginated:
            return False
        return self.pagination.number + 1 < self.total_pages

    def map(self, transform: Callable[[T], R]) -> "Page[R]":
        return Page(
            [transform(item) for item in self.content],
            self.pagination,
            self.sort,
            self.total_elements,
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["total_elements"] = self.total_elements
        data["total_pages"] = self.total_pages
        return data

    @classmethod
    def deferred(
        cls,
        content: Sequence[T],
        pagination: Optional[Pagination],
        sort: Optional[Sort],
        total_elements_supplier: Callable[[], int],
    ) -> "Page[T]":
        """Build a page, calling ``total_elements_supplier`` only when needed.

        The total is taken from the content itself when the request was
        unpaginated, or when the first page came back short. Otherwise the
        supplier is called exactly once. A short page past the first one
        still asks the supplier.
        """
        content = tuple(content)
        if pagination is None or not pagination.is_paginated:
            log.debug(f"Page.deferred: Unpaginated request, total is the content size ({len(content)}).")
            return cls(content, pagination, sort, len(content))

        if pagination.size > len(content):
            if pagination.offset == 0:
                log.debug(
                    f"Page.deferred: Short first page {pagination}, "
                    f"total is the content size ({len(content)})."
                )
                return cls(content, pagination, sort, len(content))
            if content:
                log.debug(f"Page.deferred: Short page {pagination} past the first, asking supplier.")
                return cls(content, pagination, sort, _supplied_total(total_elements_supplier))

        log.debug(f"Page.deferred: Cannot infer total for {pagination}, asking supplier.")
        return cls(content, pagination, sort, _supplied_total(total_elements_supplier))


def _supplied_total(supplier: Callable[[], int]) -> int:
    total = supplier()
    if not _is_int(total):
        raise InvalidArgumentError(f"Total elements supplier must return an integer, got {total!r}")
    return total
