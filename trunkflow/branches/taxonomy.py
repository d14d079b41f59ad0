"""Branch naming taxonomy.

Branch names are checked against an ordered rule table; the first rule
whose pattern matches the whole name decides the class. Names matching no
rule are ``UNRECOGNIZED``, which is a normal return value.

``hotfix/``, ``fix/`` and ``refact/`` share the same token-hyphen-token
shape. Only the literal prefix tells them apart, and every pattern is
anchored on its prefix.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "BRANCH_RULES",
    "BranchClass",
    "BranchRule",
    "classify",
    "is_release_branch",
]


class BranchClass(StrEnum):
    """Taxonomy bucket a branch name falls into."""

    MAIN = "main"
    DEV = "dev"
    FEATURE = "feature"
    RELEASE = "release"
    HOTFIX = "hotfix"
    FIX = "fix"
    REFACT = "refact"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_recognized(self) -> bool:
        return self is not BranchClass.UNRECOGNIZED

    @property
    def glob(self) -> str:
        """How branches of this class are referred to in merge rules."""
        if self in (BranchClass.MAIN, BranchClass.DEV):
            return self.value
        return f"{self.value}/*"


@dataclass(frozen=True, slots=True)
class BranchRule:
    """One row of the taxonomy.

    Attributes:
        branch_class: Class assigned on match
        pattern: Whole-name pattern
        usage: Human-readable shape shown when a name is rejected
        example: Sample conforming name, if worth showing
    """

    branch_class: BranchClass
    pattern: re.Pattern[str]
    usage: str
    example: str | None = None

    def matches(self, name: str) -> bool:
        return self.pattern.fullmatch(name) is not None


# Priority order: first match wins.
BRANCH_RULES: tuple[BranchRule, ...] = (
    BranchRule(BranchClass.MAIN, re.compile(r"main"), "main (protected)"),
    BranchRule(BranchClass.DEV, re.compile(r"dev"), "dev (integration)"),
    BranchRule(
        BranchClass.FEATURE,
        re.compile(r"feature/[a-z0-9-]+"),
        "feature/ticket-description",
        "feature/add-payment-gateway",
    ),
    BranchRule(
        BranchClass.RELEASE,
        # DDMMYY, optional same-day sequence number, then a slug
        re.compile(r"release/[0-9]{6}(-[0-9]+)?-[a-z0-9-]+"),
        "release/DDMMYY[-n]-description",
        "release/091025-v2-payments",
    ),
    BranchRule(
        BranchClass.HOTFIX,
        re.compile(r"hotfix/[a-z0-9]+-[a-z0-9-]+"),
        "hotfix/ticket-critical-description",
        "hotfix/fix-123-critical-auth-bug",
    ),
    BranchRule(
        BranchClass.FIX,
        re.compile(r"fix/[a-z0-9]+-[a-z0-9-]+"),
        "fix/ticket-description",
        "fix/bug-456-validation-error",
    ),
    BranchRule(
        BranchClass.REFACT,
        re.compile(r"refact/[a-z0-9-]+-[a-z0-9-]+"),
        "refact/component-description",
        "refact/auth-service-cleanup",
    ),
)


def classify(name: str) -> BranchClass:
    """Return the class of ``name``. Never raises."""
    for rule in BRANCH_RULES:
        if rule.matches(name):
            return rule.branch_class
    return BranchClass.UNRECOGNIZED


def is_release_branch(name: str) -> bool:
    return classify(name) is BranchClass.RELEASE
