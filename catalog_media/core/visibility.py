"""Visibility Lifecycle — pure state derivation over (published, deleted_at).

Invariants:
    - PUBLIC: published and not deleted; UNPUBLISHED (draft): not published and not deleted;
      DELETED: deleted_at set, published value frozen
    - scope_of is PURE and total: every (published, deleted_at) pair maps to one scope

Design Decisions:
    - State derived from two independent columns, never stored as a third column
"""

from datetime import datetime

from catalog_media.core.domain_types import VisibilityScope


def scope_of(published: bool, deleted_at: datetime | None) -> VisibilityScope:
    """Derive the disjoint visibility scope of a record."""
    if deleted_at is not None:
        return VisibilityScope.DELETED
    if published:
        return VisibilityScope.PUBLIC
    return VisibilityScope.UNPUBLISHED


def in_scope(
    published: bool, deleted_at: datetime | None, scope: VisibilityScope,
) -> bool:
    """True if the record belongs to the given (possibly composite) scope."""
    actual = scope_of(published, deleted_at)
    if scope is VisibilityScope.WITH_UNPUBLISHED:
        return actual is not VisibilityScope.DELETED
    return actual is scope
