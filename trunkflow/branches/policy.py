"""Merge-direction policy per branch class.

The table is advisory documentation. Nothing here inspects history or
rejects a merge; ``validate-branch`` prints it so people know where their
branch is expected to go.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from trunkflow.branches.taxonomy import BranchClass

__all__ = [
    "MERGE_POLICIES",
    "MergePolicy",
    "MergeQualifier",
    "MergeRoute",
    "describe_policy",
    "merge_policy",
]


class MergeQualifier(Enum):
    ALWAYS = "always"
    CONDITIONAL = "conditional"
    CHERRY_PICK = "cherry-pick only"


@dataclass(frozen=True, slots=True)
class MergeRoute:
    """A permitted merge direction towards or from ``branch``."""

    branch: BranchClass
    qualifier: MergeQualifier = MergeQualifier.ALWAYS
    note: str | None = None

    def describe(self, *, show_always: bool) -> str:
        if self.note:
            return f"{self.branch.glob} ({self.note})"
        if self.qualifier is MergeQualifier.ALWAYS and not show_always:
            return self.branch.glob
        return f"{self.branch.glob} ({self.qualifier.value})"


@dataclass(frozen=True, slots=True)
class MergePolicy:
    """Merge guidance for one branch class.

    Attributes:
        branch_class: Class the policy applies to
        summary: One-line role of the branch, if any
        merge_targets: Where this branch may merge, in preferred order
        receives_from: Which branches may merge into this one
        creation_source: Where new branches of this class are cut from (advisory)
        caveats: Extra rules that don't fit a route
    """

    branch_class: BranchClass
    summary: str | None = None
    merge_targets: tuple[MergeRoute, ...] = ()
    receives_from: tuple[MergeRoute, ...] = ()
    creation_source: BranchClass | None = None
    caveats: tuple[str, ...] = ()


_A = MergeQualifier.ALWAYS
_C = MergeQualifier.CONDITIONAL
_P = MergeQualifier.CHERRY_PICK

MERGE_POLICIES: dict[BranchClass, MergePolicy] = {
    BranchClass.MAIN: MergePolicy(
        BranchClass.MAIN,
        summary="Protected branch",
        receives_from=(
            MergeRoute(BranchClass.RELEASE),
            MergeRoute(BranchClass.HOTFIX),
            MergeRoute(BranchClass.FIX),
        ),
        caveats=("Requires PR approval",),
    ),
    BranchClass.DEV: MergePolicy(
        BranchClass.DEV,
        summary="Integration branch",
        receives_from=(
            MergeRoute(BranchClass.FEATURE),
            MergeRoute(BranchClass.FIX),
            MergeRoute(BranchClass.REFACT),
        ),
        caveats=("Never merges to release branches",),
    ),
    BranchClass.FEATURE: MergePolicy(
        BranchClass.FEATURE,
        merge_targets=(
            MergeRoute(BranchClass.DEV, _A),
            MergeRoute(BranchClass.RELEASE, _C, "if targeted"),
        ),
        creation_source=BranchClass.MAIN,
    ),
    BranchClass.RELEASE: MergePolicy(
        BranchClass.RELEASE,
        merge_targets=(MergeRoute(BranchClass.MAIN, _C, "when ready"),),
        receives_from=(
            MergeRoute(BranchClass.FEATURE, _P),
            MergeRoute(BranchClass.FIX, _P),
        ),
        creation_source=BranchClass.MAIN,
        caveats=(
            "Never receives merges from dev",
            "Remember to create/update release.json",
        ),
    ),
    BranchClass.HOTFIX: MergePolicy(
        BranchClass.HOTFIX,
        summary="Emergency fix branch",
        merge_targets=(
            MergeRoute(BranchClass.MAIN, _A, "direct"),
            MergeRoute(BranchClass.DEV, _P, "backport"),
            MergeRoute(BranchClass.RELEASE, _P, "backport to active releases"),
        ),
        creation_source=BranchClass.MAIN,
    ),
    BranchClass.FIX: MergePolicy(
        BranchClass.FIX,
        summary="Bug fix branch",
        merge_targets=(
            MergeRoute(BranchClass.DEV, _C),
            MergeRoute(BranchClass.RELEASE, _C),
            MergeRoute(BranchClass.MAIN, _C),
        ),
        creation_source=BranchClass.DEV,
        caveats=("Pick the target based on urgency",),
    ),
    BranchClass.REFACT: MergePolicy(
        BranchClass.REFACT,
        summary="Code refactoring branch",
        merge_targets=(
            MergeRoute(BranchClass.DEV, _A, "standard"),
            MergeRoute(BranchClass.RELEASE, _C, "if needed"),
        ),
        creation_source=BranchClass.DEV,
    ),
    BranchClass.UNRECOGNIZED: MergePolicy(
        BranchClass.UNRECOGNIZED,
        caveats=("Rename the branch to match one of the valid patterns",),
    ),
}


def merge_policy(branch_class: BranchClass) -> MergePolicy:
    return MERGE_POLICIES[branch_class]


def describe_policy(policy: MergePolicy) -> tuple[str, ...]:
    """Render a policy as display lines, one rule per line."""
    lines: list[str] = []
    if policy.summary:
        lines.append(policy.summary)
    if policy.receives_from:
        sources = ", ".join(r.describe(show_always=False) for r in policy.receives_from)
        lines.append(f"Can receive merges from: {sources}")
    if policy.merge_targets:
        targets = ", ".join(r.describe(show_always=True) for r in policy.merge_targets)
        lines.append(f"Merges to: {targets}")
    if policy.creation_source is not None:
        lines.append(f"Created from: {policy.creation_source.glob}")
    lines.extend(policy.caveats)
    return tuple(lines)
