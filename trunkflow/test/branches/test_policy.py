"""Tests for the merge-policy table."""

from __future__ import annotations

from trunkflow.branches.policy import (
    MERGE_POLICIES,
    MergeQualifier,
    MergeRoute,
    describe_policy,
    merge_policy,
)
from trunkflow.branches.taxonomy import BranchClass


def test_every_class_has_a_policy() -> None:
    for branch_class in BranchClass:
        assert merge_policy(branch_class).branch_class is branch_class
    assert set(MERGE_POLICIES) == set(BranchClass)


def test_main_policy() -> None:
    assert describe_policy(merge_policy(BranchClass.MAIN)) == (
        "Protected branch",
        "Can receive merges from: release/*, hotfix/*, fix/*",
        "Requires PR approval",
    )


def test_dev_never_feeds_release() -> None:
    lines = describe_policy(merge_policy(BranchClass.DEV))
    assert "Never merges to release branches" in lines
    release = merge_policy(BranchClass.RELEASE)
    assert BranchClass.DEV not in {r.branch for r in release.receives_from}
    assert "Never receives merges from dev" in release.caveats


def test_feature_policy() -> None:
    assert describe_policy(merge_policy(BranchClass.FEATURE)) == (
        "Merges to: dev (always), release/* (if targeted)",
        "Created from: main",
    )


def test_release_receives_cherry_picks_only() -> None:
    policy = merge_policy(BranchClass.RELEASE)
    assert all(r.qualifier is MergeQualifier.CHERRY_PICK for r in policy.receives_from)
    lines = describe_policy(policy)
    assert lines[0] == "Can receive merges from: feature/* (cherry-pick only), fix/* (cherry-pick only)"
    assert lines[1] == "Merges to: main (when ready)"
    assert "Remember to create/update release.json" in lines


def test_hotfix_goes_to_main_first() -> None:
    policy = merge_policy(BranchClass.HOTFIX)
    assert policy.merge_targets[0] == MergeRoute(BranchClass.MAIN, MergeQualifier.ALWAYS, "direct")
    assert policy.summary == "Emergency fix branch"


def test_unrecognized_policy_has_no_routes() -> None:
    policy = merge_policy(BranchClass.UNRECOGNIZED)
    assert policy.merge_targets == ()
    assert policy.receives_from == ()
    assert describe_policy(policy) == ("Rename the branch to match one of the valid patterns",)


def test_route_description() -> None:
    route = MergeRoute(BranchClass.DEV, MergeQualifier.CONDITIONAL)
    assert route.describe(show_always=False) == "dev (conditional)"
    plain = MergeRoute(BranchClass.FIX)
    assert plain.describe(show_always=False) == "fix/*"
    assert plain.describe(show_always=True) == "fix/* (always)"
