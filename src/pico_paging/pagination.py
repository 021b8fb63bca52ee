from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgumentError, UnsupportedOperationError


@dataclass(frozen=True)
class Pagination:
    """Zero-based page number and page size, or the unpaginated state.

    A ``Pagination`` built through its constructor is always paginated
    (``number >= 0``, ``size >= 1``). The unpaginated state exists only as
    the module constant ``UNPAGINATED``; it reports ``number`` and ``size``
    as 0 and rejects every navigation operation.
    """

    number: int
    size: int

    def __post_init__(self) -> None:
        if not _is_int(self.number) or self.number < 0:
            raise InvalidArgumentError(f"Page number must not be negative, got {self.number!r}")
        if not _is_int(self.size) or self.size < 1:
            raise InvalidArgumentError(f"Page size must be at least 1, got {self.size!r}")

    @classmethod
    def of(cls, number: int, size: int) -> "Pagination":
        return cls(number, size)

    @classmethod
    def unpaginated(cls) -> "Pagination":
        return UNPAGINATED

    @property
    def is_paginated(self) -> bool:
        return self.size > 0

    @property
    def offset(self) -> int:
        self._require_paginated("Unpaginated instance has no offset")
        return max(0, self.number * self.size)

    @property
    def has_previous(self) -> bool:
        self._require_paginated("Unpaginated instance has no previous page")
        return self.number > 0

    def next(self) -> "Pagination":
        self._require_paginated("Unpaginated instance cannot go to next page")
        return Pagination(self.number + 1, self.size)

    def previous(self) -> "Pagination":
        self._require_paginated("Unpaginated instance cannot go to previous page")
        if self.number <= 0:
            raise UnsupportedOperationError("Cannot go to previous page from the first page")
        return Pagination(self.number - 1, self.size)

    def first(self) -> "Pagination":
        self._require_paginated("Unpaginated instance cannot go to first page")
        return Pagination(0, self.size)

    def _require_paginated(self, message: str) -> None:
        if not self.is_paginated:
            raise UnsupportedOperationError(message)

    def __str__(self) -> str:
        if not self.is_paginated:
            return "Pagination[UNPAGINATED]"
        return f"Pagination[page={self.number}, size={self.size}]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "paginated": self.is_paginated,
            "number": self.number,
            "size": self.size,
        }


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _unpaginated() -> Pagination:
    # bypasses __post_init__: size 0 is the unpaginated marker
    instance = object.__new__(Pagination)
    object.__setattr__(instance, "number", 0)
    object.__setattr__(instance, "size", 0)
    return instance


UNPAGINATED = _unpaginated()
