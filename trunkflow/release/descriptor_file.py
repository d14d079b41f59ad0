from __future__ import annotations

import json
from pathlib import Path

from trunkflow.core.result import Err, Ok, Result
from trunkflow.core.structured import as_str_dict
from trunkflow.errors import DescriptorReadFailed, DescriptorWriteFailed
from trunkflow.platform.files import atomic_write_text
from trunkflow.release.model import ReleaseDescriptor


def render_descriptor(descriptor: ReleaseDescriptor) -> str:
    return json.dumps(descriptor.to_payload(), indent=2, ensure_ascii=False) + "\n"


def write_descriptor(
    *, path: Path, descriptor: ReleaseDescriptor
) -> Result[None, DescriptorWriteFailed]:
    """Write ``descriptor`` to ``path``, replacing whatever is there."""
    try:
        atomic_write_text(path, render_descriptor(descriptor), encoding="utf-8")
    except OSError as e:
        return Err(DescriptorWriteFailed(path=path, detail=str(e)))

    return Ok(None)


def read_descriptor(*, path: Path) -> Result[ReleaseDescriptor, DescriptorReadFailed]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(DescriptorReadFailed(path=path, detail="file not found"))
    except OSError as e:
        return Err(DescriptorReadFailed(path=path, detail=str(e)))

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(DescriptorReadFailed(path=path, detail=f"invalid JSON: {e}"))

    data = as_str_dict(obj)
    if data is None:
        return Err(DescriptorReadFailed(path=path, detail="root must be a JSON object"))

    parsed = ReleaseDescriptor.from_payload(data)
    if isinstance(parsed, Err):
        return Err(DescriptorReadFailed(path=path, detail=parsed.error))

    return Ok(parsed.value)
