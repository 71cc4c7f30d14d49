"""Media Payload Validation — verifies identifier and asset checks.

Tests:
    - UUIDs are canonicalised; malformed or empty ids raise InvalidArgumentError
    - UUID lists must be non-empty and are de-duplicated in order
    - Asset URLs must be absolute http(s); public_id must be non-blank
"""

from uuid import uuid4

import pytest

from catalog_media.core.errors import InvalidArgumentError
from catalog_media.core.validate_media import (
    MediaAsset, validate_asset, validate_uuid, validate_uuid_list,
)


def _asset(**overrides) -> MediaAsset:
    fields = {
        "media_service_id": str(uuid4()),
        "url": "http://media.example.com/a.png",
        "secure_url": "https://media.example.com/a.png",
        "public_id": "catalog/a",
    }
    fields.update(overrides)
    return MediaAsset(**fields)


def test_uuid_is_canonicalised():
    raw = "A3BB189E-8BF9-3888-9912-ACE4E6543002"
    assert validate_uuid(raw, "owner_id") == raw.lower()


@pytest.mark.parametrize("value", ["", "not-a-uuid", None, 42])
def test_invalid_uuid_names_field(value):
    with pytest.raises(InvalidArgumentError) as exc:
        validate_uuid(value, "owner_id")
    assert exc.value.field == "owner_id"
    assert exc.value.http_status == 400


def test_uuid_list_deduplicates_in_order():
    a, b = str(uuid4()), str(uuid4())
    assert validate_uuid_list([a, b, a], "owner_ids") == [a, b]


def test_empty_uuid_list_rejected():
    with pytest.raises(InvalidArgumentError):
        validate_uuid_list([], "owner_ids")


def test_uuid_list_reports_offending_index():
    with pytest.raises(InvalidArgumentError) as exc:
        validate_uuid_list([str(uuid4()), "bad"], "owner_ids")
    assert exc.value.field == "owner_ids[1]"


def test_valid_asset_strips_public_id():
    asset = validate_asset(_asset(public_id="  catalog/a  "))
    assert asset.public_id == "catalog/a"


@pytest.mark.parametrize("field,value", [
    ("url", "ftp://media.example.com/a.png"),
    ("url", "media.example.com/a.png"),
    ("secure_url", ""),
    ("public_id", "   "),
    ("media_service_id", "abc"),
])
def test_invalid_asset_field(field, value):
    with pytest.raises(InvalidArgumentError) as exc:
        validate_asset(_asset(**{field: value}))
    assert exc.value.field == field
