from .errors import PagingError, InvalidArgumentError, UnsupportedOperationError
from .sort import Direction, Order, Sort, UNSORTED
from .pagination import Pagination, UNPAGINATED
from .slice import Slice
from .page import Page

__all__ = [
    "PagingError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "Direction",
    "Order",
    "Sort",
    "UNSORTED",
    "Pagination",
    "UNPAGINATED",
    "Slice",
    "Page",
]
