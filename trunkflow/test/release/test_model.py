from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

from trunkflow.core.result import Err, Ok
from trunkflow.release.model import (
    ReleaseDescriptor,
    ReleaseVersion,
    format_timestamp,
    parse_version,
)


def _descriptor() -> ReleaseDescriptor:
    return ReleaseDescriptor(
        version=ReleaseVersion(2, 1, 0, text="2.1.0"),
        release_date=date(2025, 10, 9),
        description="New payment features",
        branch="release/091025-payments",
        prepared_by="alice",
        prepared_at=datetime(2025, 10, 9, 8, 30, 0, 123456, tzinfo=UTC),
    )


def test_parse_version() -> None:
    parsed = parse_version("2.1.0")
    assert isinstance(parsed, Ok)
    assert (parsed.value.major, parsed.value.minor, parsed.value.patch) == (2, 1, 0)
    assert str(parsed.value) == "2.1.0"


def test_parse_version_rejects_other_shapes() -> None:
    for text in ("2.1", "2.1.0.4", "v2.1.0", "2.1.0-rc.1", " 2.1.0", "2.1.0\n", "a.b.c", ""):
        result = parse_version(text)
        assert isinstance(result, Err), text
        assert result.error.value == text


def test_parse_version_keeps_text_verbatim() -> None:
    parsed = parse_version("2.01.0")
    assert isinstance(parsed, Ok)
    assert str(parsed.value) == "2.01.0"
    assert parsed.value == ReleaseVersion(2, 1, 0)


def test_format_timestamp_is_utc_with_millis() -> None:
    moment = datetime(2025, 10, 9, 10, 30, 0, 987654, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(moment) == "2025-10-09T08:30:00.987Z"


def test_payload_key_order_and_initial_counters() -> None:
    payload = _descriptor().to_payload()
    assert list(payload) == [
        "version",
        "releaseDate",
        "rcBuildCounter",
        "lastRCTag",
        "description",
        "branch",
        "preparedBy",
        "preparedAt",
    ]
    assert payload["rcBuildCounter"] == 0
    assert payload["lastRCTag"] == ""
    assert payload["releaseDate"] == "2025-10-09"
    assert payload["preparedAt"] == "2025-10-09T08:30:00.123Z"


def test_from_payload_restores_descriptor() -> None:
    payload = {**_descriptor().to_payload(), "rcBuildCounter": 3, "lastRCTag": "v2.1.0-rc.3"}

    restored = ReleaseDescriptor.from_payload(payload)

    assert isinstance(restored, Ok)
    d = restored.value
    assert str(d.version) == "2.1.0"
    assert d.rc_build_counter == 3
    assert d.last_rc_tag == "v2.1.0-rc.3"
    assert d.prepared_at == datetime(2025, 10, 9, 8, 30, 0, 123000, tzinfo=UTC)


def test_from_payload_rejects_bad_fields() -> None:
    base = _descriptor().to_payload()
    assert isinstance(ReleaseDescriptor.from_payload({**base, "version": "2.1"}), Err)
    assert isinstance(ReleaseDescriptor.from_payload({**base, "rcBuildCounter": -1}), Err)
    assert isinstance(ReleaseDescriptor.from_payload({**base, "releaseDate": "09/10/25"}), Err)
    missing_branch = {k: v for k, v in base.items() if k != "branch"}
    assert ReleaseDescriptor.from_payload(missing_branch) == Err("missing branch")
