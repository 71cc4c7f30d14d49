"""Scoped Queries — one visibility filter shared by every catalog entity.

Invariants:
    - PUBLIC:           published IS true  AND deleted_at IS NULL
    - UNPUBLISHED:      published IS false AND deleted_at IS NULL
    - DELETED:          deleted_at IS NOT NULL (published ignored)
    - WITH_UNPUBLISHED: deleted_at IS NULL

Design Decisions:
    - Explicit scope → clause dict instead of per-entity query methods: a new entity
      only needs the (published, deleted_at) column pair
"""

from typing import Callable

from sqlalchemy import ColumnElement, Select, and_, select

from catalog_media.core.domain_types import VisibilityScope

_SCOPE_CLAUSES: dict[VisibilityScope, Callable] = {
    VisibilityScope.PUBLIC: lambda published, deleted_at: and_(
        published.is_(True), deleted_at.is_(None),
    ),
    VisibilityScope.UNPUBLISHED: lambda published, deleted_at: and_(
        published.is_(False), deleted_at.is_(None),
    ),
    VisibilityScope.DELETED: lambda published, deleted_at: deleted_at.is_not(None),
    VisibilityScope.WITH_UNPUBLISHED: lambda published, deleted_at: deleted_at.is_(None),
}


def visibility_clause(model, scope: VisibilityScope) -> ColumnElement[bool]:
    """WHERE clause selecting rows of `model` in `scope`."""
    build = _SCOPE_CLAUSES.get(scope)
    if build is None:
        raise ValueError(f"Unsupported visibility scope: {scope!r}")
    return build(model.published, model.deleted_at)


def scoped_select(model, scope: VisibilityScope) -> Select:
    return select(model).where(visibility_clause(model, scope))
