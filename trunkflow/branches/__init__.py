"""Branch classification and merge guidance."""

from trunkflow.branches.policy import (
    MergePolicy,
    MergeQualifier,
    MergeRoute,
    describe_policy,
    merge_policy,
)
from trunkflow.branches.taxonomy import (
    BRANCH_RULES,
    BranchClass,
    BranchRule,
    classify,
    is_release_branch,
)

__all__ = [
    # taxonomy
    "BRANCH_RULES",
    "BranchClass",
    "BranchRule",
    "classify",
    "is_release_branch",
    # policy
    "MergePolicy",
    "MergeQualifier",
    "MergeRoute",
    "describe_policy",
    "merge_policy",
]
