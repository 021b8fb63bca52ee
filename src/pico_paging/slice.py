from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Sequence, TypeVar

from .errors import InvalidArgumentError
from .pagination import UNPAGINATED, Pagination
from .sort import UNSORTED, Sort

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Slice(Generic[T]):
    """A materialized chunk of a collection, without the collection size.

    ``content`` is copied into a tuple on construction; mutating the
    sequence handed in afterwards has no effect on the slice.
    """

    content: Sequence[T]
    pagination: Optional[Pagination] = None
    sort: Optional[Sort] = None

    def __post_init__(self) -> None:
        if self.content is None:
            raise InvalidArgumentError("Content must not be None")
        object.__setattr__(self, "content", tuple(self.content))
        if self.pagination is None:
            object.__setattr__(self, "pagination", UNPAGINATED)
        if self.sort is None:
            object.__setattr__(self, "sort", UNSORTED)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return not self.content

    def map(self, transform: Callable[[T], R]) -> "Slice[R]":
        return Slice([transform(item) for item in self.content], self.pagination, self.sort)

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": [_encode(item) for item in self.content],
            "pagination": self.pagination.to_dict(),
            "sort": self.sort.to_dict(),
        }


def _encode(item: Any) -> Any:
    if isinstance(item, Mapping):
        return {key: _encode(value) for key, value in item.items()}
    to_dict = getattr(item, "to_dict", None)
    return to_dict() if callable(to_dict) else item
