from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from trunkflow.core.result import Err, Ok, Result
from trunkflow.core.structured import get_int, get_raw_str, get_str
from trunkflow.errors import InvalidVersionFormat

DESCRIPTOR_FILENAME = "release.json"
DEFAULT_DESCRIPTION = "Release preparation"

_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, slots=True, order=True)
class ReleaseVersion:
    major: int
    minor: int
    patch: int
    # Validated input, kept verbatim for persistence.
    text: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.text or f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> Result[ReleaseVersion, InvalidVersionFormat]:
    m = _VERSION_RE.fullmatch(text)
    if m is None:
        return Err(InvalidVersionFormat(value=text))
    return Ok(ReleaseVersion(int(m.group(1)), int(m.group(2)), int(m.group(3)), text=text))


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True, slots=True)
class ReleaseDescriptor:
    """Release being prepared, as persisted in release.json.

    ``rc_build_counter`` and ``last_rc_tag`` are advanced by CI after
    preparation; this tool only ever writes their initial values.
    """

    version: ReleaseVersion
    release_date: date
    description: str
    branch: str
    prepared_by: str
    prepared_at: datetime
    rc_build_counter: int = 0
    last_rc_tag: str = ""

    def to_payload(self) -> dict[str, object]:
        # Key order is part of the file format.
        return {
            "version": str(self.version),
            "releaseDate": self.release_date.isoformat(),
            "rcBuildCounter": self.rc_build_counter,
            "lastRCTag": self.last_rc_tag,
            "description": self.description,
            "branch": self.branch,
            "preparedBy": self.prepared_by,
            "preparedAt": format_timestamp(self.prepared_at),
        }

    @classmethod
    def from_payload(cls, data: Mapping[str, object]) -> Result[ReleaseDescriptor, str]:
        raw_version = get_str(data, "version")
        if raw_version is None:
            return Err("missing version")
        version = parse_version(raw_version)
        if isinstance(version, Err):
            return Err(version.error.message)

        counter = get_int(data, "rcBuildCounter")
        if counter is None or counter < 0:
            return Err("rcBuildCounter must be a non-negative integer")

        release_date = get_str(data, "releaseDate")
        prepared_at = get_str(data, "preparedAt")
        if release_date is None or prepared_at is None:
            return Err("missing releaseDate or preparedAt")
        try:
            parsed_date = date.fromisoformat(release_date)
            parsed_at = datetime.fromisoformat(prepared_at)
        except ValueError as e:
            return Err(f"invalid date: {e}")

        branch = get_str(data, "branch")
        if branch is None:
            return Err("missing branch")

        return Ok(
            cls(
                version=version.value,
                release_date=parsed_date,
                description=get_raw_str(data, "description") or DEFAULT_DESCRIPTION,
                branch=branch,
                prepared_by=get_str(data, "preparedBy") or "unknown",
                prepared_at=parsed_at,
                rc_build_counter=counter,
                last_rc_tag=get_raw_str(data, "lastRCTag") or "",
            )
        )
