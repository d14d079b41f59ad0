from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from trunkflow.core.config import ReleaseContext
from trunkflow.git.repository import Repository, VersionControl
from trunkflow.output.console import ConsoleProtocol, RichConsole
from trunkflow.release.preparer import Clock, utc_now


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    console: ConsoleProtocol
    vcs: VersionControl
    release: ReleaseContext
    clock: Clock = field(default=utc_now)


def build_context() -> CLIContext:
    root = Path.cwd()
    return CLIContext(
        root=root,
        console=RichConsole(),
        vcs=Repository(root),
        release=ReleaseContext.from_env(os.environ),
    )
