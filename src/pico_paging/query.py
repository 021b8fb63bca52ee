import logging
from typing import Any, Optional, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from .errors import InvalidArgumentError
from .page import Page
from .pagination import Pagination
from .slice import Slice
from .sort import Direction, Sort

log = logging.getLogger(__name__)


def apply_sort(stmt: Select, sort: Optional[Sort]) -> Select:
    """Append ``ORDER BY`` clauses for ``sort`` to ``stmt``.

    Properties are matched by key against the statement's selected columns
    only; anything else is rejected. Keys are those of
    ``Select.selected_columns``, which need not match ORM attribute names.
    A key selected more than once (e.g. ``id`` on both sides
    of a join) is ambiguous and rejected; label the column instead.
    """
    if sort is None or not sort.is_sorted:
        return stmt
    columns: dict[str, Any] = {}
    ambiguous: set[str] = set()
    for key, column in stmt.selected_columns.items():
        if key in columns:
            ambiguous.add(key)
        columns[key] = column
    clauses = []
    for order in sort:
        if order.property in ambiguous:
            raise InvalidArgumentError(f"Ambiguous sort field: {order.property}")
        column = columns.get(order.property)
        if column is None:
            raise InvalidArgumentError(f"Invalid sort field: {order.property}")
        clauses.append(column.desc() if order.direction is Direction.DESC else column.asc())
    return stmt.order_by(*clauses)


def apply_pagination(stmt: Select, pagination: Optional[Pagination]) -> Select:
    if pagination is None or not pagination.is_paginated:
        return stmt
    return stmt.limit(pagination.size).offset(pagination.offset)


def count(session: Session, stmt: Select) -> int:
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    log.debug("count: Running total count query.")
    return session.execute(count_stmt).scalar_one()


def fetch_slice(
    session: Session,
    stmt: Select,
    pagination: Optional[Pagination] = None,
    sort: Optional[Sort] = None,
    *,
    scalars: bool = False,
) -> Slice[Any]:
    content = _fetch_content(session, stmt, pagination, sort, scalars)
    return Slice(content, pagination, sort)


def fetch_page(
    session: Session,
    stmt: Select,
    pagination: Optional[Pagination] = None,
    sort: Optional[Sort] = None,
    *,
    scalars: bool = False,
) -> Page[Any]:
    """Run ``stmt`` for one page and wrap the rows in a :class:`Page`.

    The count query is only issued when the total cannot be told from the
    page itself (see :meth:`Page.deferred`).
    """
    content = _fetch_content(session, stmt, pagination, sort, scalars)
    return Page.deferred(content, pagination, sort, lambda: count(session, stmt))


def _fetch_content(
    session: Session,
    stmt: Select,
    pagination: Optional[Pagination],
    sort: Optional[Sort],
    scalars: bool,
) -> Sequence[Any]:
    paged_stmt = apply_pagination(apply_sort(stmt, sort), pagination)
    log.debug(f"_fetch_content: Fetching {pagination or 'unpaginated'} sorted by {sort or 'nothing'}.")
    if scalars:
        return session.scalars(paged_stmt).all()
    return session.execute(paged_stmt).mappings().all()
