"""Media Payload Validation — pure checks for identifiers and asset references.

Invariants:
    - Owner ids and media service ids must be canonical UUID strings
    - url and secure_url must be absolute http(s) URLs; public_id must be non-blank
    - Every failure raises InvalidArgumentError naming the offending field
    - Validation never checks existence (the media service is trusted for that)
"""

from dataclasses import dataclass
from urllib.parse import urlparse
from uuid import UUID

from catalog_media.core.domain_types import MediaServiceId
from catalog_media.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class MediaAsset:
    """Reference to an asset produced by the external media service."""
    media_service_id: MediaServiceId
    url: str
    secure_url: str
    public_id: str


def validate_uuid(value: object, field: str) -> str:
    """Return the canonical string form of a UUID or raise InvalidArgumentError."""
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{field} is required", field=field)
    try:
        return str(UUID(value))
    except ValueError:
        raise InvalidArgumentError(
            f"{field} must be a valid UUID", field=field,
        ) from None


def validate_uuid_list(values: object, field: str) -> list[str]:
    """Validate a non-empty list of UUIDs. Duplicates collapse, order kept."""
    if not isinstance(values, (list, tuple)) or not values:
        raise InvalidArgumentError(f"{field} must be a non-empty list", field=field)
    seen: dict[str, None] = {}
    for i, value in enumerate(values):
        seen[validate_uuid(value, f"{field}[{i}]")] = None
    return list(seen)


def _validate_url(value: object, field: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field} is required", field=field)
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidArgumentError(f"{field} must be a valid URL", field=field)


def validate_asset(asset: MediaAsset) -> MediaAsset:
    """Validate every field of an asset reference."""
    media_service_id = MediaServiceId(
        validate_uuid(asset.media_service_id, "media_service_id"),
    )
    _validate_url(asset.url, "url")
    _validate_url(asset.secure_url, "secure_url")
    if not isinstance(asset.public_id, str) or not asset.public_id.strip():
        raise InvalidArgumentError("public_id is required", field="public_id")
    return MediaAsset(
        media_service_id=media_service_id,
        url=asset.url,
        secure_url=asset.secure_url,
        public_id=asset.public_id.strip(),
    )
