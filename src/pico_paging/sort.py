from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from .errors import InvalidArgumentError


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Invalid sort direction: {value!r}")


@dataclass(frozen=True)
class Order:
    property: str
    direction: Direction = Direction.ASC

    def __post_init__(self) -> None:
        if not isinstance(self.property, str) or not self.property.strip():
            raise InvalidArgumentError("Property name must not be null or blank")
        object.__setattr__(self, "direction", Direction.parse(self.direction))

    @classmethod
    def asc(cls, property: str) -> "Order":
        return cls(property, Direction.ASC)

    @classmethod
    def desc(cls, property: str) -> "Order":
        return cls(property, Direction.DESC)

    @property
    def is_ascending(self) -> bool:
        return self.direction is Direction.ASC

    def reversed(self) -> "Order":
        flipped = Direction.DESC if self.is_ascending else Direction.ASC
        return Order(self.property, flipped)

    def to_dict(self) -> dict[str, Any]:
        return {"property": self.property, "direction": self.direction.value}


@dataclass(frozen=True)
class Sort:
    """Ordered sort criteria; the first order is the primary key."""

    orders: tuple[Order, ...] = ()

    def __post_init__(self) -> None:
        orders = tuple(self.orders)
        for order in orders:
            if not isinstance(order, Order):
                raise InvalidArgumentError(f"Sort entries must be Order instances, got {order!r}")
        object.__setattr__(self, "orders", orders)

    @classmethod
    def by(cls, *args: Any) -> "Sort":
        """Build a sort from orders, an iterable of orders, or a property name.

        ``Sort.by("name")``, ``Sort.by("name", "DESC")``,
        ``Sort.by(Order.asc("name"), Order.desc("age"))`` and
        ``Sort.by([order, ...])`` are all accepted.
        """
        if len(args) in (1, 2) and isinstance(args[0], str):
            return cls((Order(*args),))
        if len(args) == 1 and not isinstance(args[0], Order):
            return cls(tuple(args[0]))
        return cls(args)

    @classmethod
    def unsorted(cls) -> "Sort":
        return UNSORTED

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def get_order(self, property: str) -> Optional[Order]:
        for order in self.orders:
            if order.property == property:
                return order
        return None

    def and_then(self, other: "Sort | Iterable[Order]") -> "Sort":
        return Sort(self.orders + tuple(other))

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)

    def __str__(self) -> str:
        if not self.orders:
            return "UNSORTED"
        return ", ".join(f"{o.property}: {o.direction.value}" for o in self.orders)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sorted": self.is_sorted,
            "orders": [o.to_dict() for o in self.orders],
        }


UNSORTED = Sort()
