"""Batch Field Updates — pure validation of per-owner values for a single batched column write.

Invariants:
    - Every FieldUpdate in a batch populates the selected field and no other field
    - collect_field_values is PURE: returns {owner_id: value}, never touches storage
    - Empty input yields an empty mapping (caller treats it as a no-op)

Design Decisions:
    - Heterogeneous batches and unknown selectors raise InvalidArgumentError subclasses
      instead of producing an unspecified statement
"""

from dataclasses import dataclass, fields

from catalog_media.core.domain_types import BatchField
from catalog_media.core.errors import HeterogeneousBatchError, UnknownBatchFieldError


@dataclass(frozen=True)
class FieldUpdate:
    """Target value for one owner. Exactly one value field should be set."""
    owner_id: str
    name: str | None = None
    short_description: str | None = None
    uploaded_image_amount: int | None = None

    def populated_fields(self) -> set[str]:
        return {
            f.name for f in fields(self)
            if f.name != "owner_id" and getattr(self, f.name) is not None
        }


def resolve_batch_field(selector: BatchField | str) -> BatchField:
    """Coerce a selector into a BatchField or raise UnknownBatchFieldError."""
    if isinstance(selector, BatchField):
        return selector
    try:
        return BatchField(selector)
    except ValueError:
        raise UnknownBatchFieldError(selector) from None


def collect_field_values(
    updates: list[FieldUpdate], selector: BatchField | str,
) -> dict[str, object]:
    """Map each owner id to its target value for the selected field."""
    field = resolve_batch_field(selector)
    if not updates:
        return {}
    offending = [
        u.owner_id for u in updates if u.populated_fields() != {field.value}
    ]
    if offending:
        raise HeterogeneousBatchError(field.value, offending)
    return {u.owner_id: getattr(u, field.value) for u in updates}


def counter_updates(counts: dict[str, int], delta: int = 1) -> list[FieldUpdate]:
    """Build uploaded_image_amount updates from current per-owner counts."""
    return [
        FieldUpdate(owner_id=owner_id, uploaded_image_amount=count + delta)
        for owner_id, count in counts.items()
    ]
