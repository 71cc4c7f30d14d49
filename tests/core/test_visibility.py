"""Visibility Lifecycle — verifies scope derivation from (published, deleted_at).

Tests:
    - Draft, published and deleted map to disjoint scopes
    - Deleted wins regardless of the published flag
    - WITH_UNPUBLISHED covers public and draft, never deleted
"""

from datetime import datetime, timezone

from catalog_media.core.domain_types import VisibilityScope
from catalog_media.core.visibility import in_scope, scope_of

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_draft_is_unpublished_scope():
    assert scope_of(False, None) is VisibilityScope.UNPUBLISHED


def test_published_is_public_scope():
    assert scope_of(True, None) is VisibilityScope.PUBLIC


def test_deleted_ignores_published_flag():
    assert scope_of(True, NOW) is VisibilityScope.DELETED
    assert scope_of(False, NOW) is VisibilityScope.DELETED


def test_disjoint_scopes_are_exclusive():
    for published, deleted_at in [(False, None), (True, None), (True, NOW)]:
        matches = [
            s for s in (
                VisibilityScope.PUBLIC, VisibilityScope.UNPUBLISHED,
                VisibilityScope.DELETED,
            )
            if in_scope(published, deleted_at, s)
        ]
        assert len(matches) == 1


def test_with_unpublished_excludes_deleted():
    assert in_scope(True, None, VisibilityScope.WITH_UNPUBLISHED)
    assert in_scope(False, None, VisibilityScope.WITH_UNPUBLISHED)
    assert not in_scope(False, NOW, VisibilityScope.WITH_UNPUBLISHED)
