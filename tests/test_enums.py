import pytest

from sailhub.enums import (
    IssueState,
    LockReason,
    MergeStateStatus,
    PullRequestMergeMethod,
    PullRequestState,
    RepositoryLockReason,
    RepositoryPermission,
    SubscriptionState,
)


@pytest.mark.parametrize(
    "cls, text, expected",
    [
        (IssueState, "CLOSED", IssueState.CLOSED),
        (IssueState, "OPEN", IssueState.OPEN),
        (LockReason, "OFF_TOPIC", LockReason.OFF_TOPIC),
        (LockReason, "TOO_HEATED", LockReason.TOO_HEATED),
        (MergeStateStatus, "HAS_HOOKS", MergeStateStatus.HAS_HOOKS),
        (MergeStateStatus, "UNKNOWN", MergeStateStatus.UNKNOWN),
        (PullRequestMergeMethod, "SQUASH", PullRequestMergeMethod.SQUASH),
        (PullRequestState, "MERGED", PullRequestState.MERGED),
        (RepositoryLockReason, "MIGRATING", RepositoryLockReason.MIGRATING),
        (RepositoryPermission, "TRIAGE", RepositoryPermission.TRIAGE),
        (SubscriptionState, "UNSUBSCRIBED", SubscriptionState.UNSUBSCRIBED),
    ],
)
def test_from_string_known(cls, text, expected):
    assert cls.from_string(text) is expected


@pytest.mark.parametrize("text", ["", "open", "Closed", "BOGUS"])
def test_from_string_unknown(text):
    assert IssueState.from_string(text) is IssueState.UNKNOWN
    assert LockReason.from_string(text) is LockReason.UNKNOWN
    assert MergeStateStatus.from_string(text) is MergeStateStatus.UNKNOWN
    assert PullRequestMergeMethod.from_string(text) is PullRequestMergeMethod.UNKNOWN
    assert PullRequestState.from_string(text) is PullRequestState.UNKNOWN
    assert RepositoryLockReason.from_string(text) is RepositoryLockReason.UNKNOWN
    assert RepositoryPermission.from_string(text) is RepositoryPermission.UNKNOWN
    assert SubscriptionState.from_string(text) is SubscriptionState.UNKNOWN


@pytest.mark.parametrize("text", ["CLOSED", "OPEN"])
def test_issue_state_round_trip(text):
    assert IssueState.to_string(IssueState.from_string(text)) == text


@pytest.mark.parametrize("text", ["OFF_TOPIC", "RESOLVED", "SPAM", "TOO_HEATED"])
def test_lock_reason_round_trip(text):
    assert LockReason.to_string(LockReason.from_string(text)) == text


@pytest.mark.parametrize(
    "text",
    ["UNKNOWN", "BEHIND", "BLOCKED", "CLEAN", "DIRTY", "DRAFT", "HAS_HOOKS", "UNSTABLE"],
)
def test_merge_state_status_round_trip(text):
    assert MergeStateStatus.to_string(MergeStateStatus.from_string(text)) == text


@pytest.mark.parametrize("text", ["MERGE", "REBASE", "SQUASH"])
def test_merge_method_round_trip(text):
    assert PullRequestMergeMethod.to_string(PullRequestMergeMethod.from_string(text)) == text


@pytest.mark.parametrize("text", ["CLOSED", "MERGED", "OPEN"])
def test_pull_request_state_round_trip(text):
    assert PullRequestState.to_string(PullRequestState.from_string(text)) == text


@pytest.mark.parametrize("text", ["BILLING", "MIGRATING", "MOVING", "RENAME"])
def test_repository_lock_reason_round_trip(text):
    assert RepositoryLockReason.to_string(RepositoryLockReason.from_string(text)) == text


@pytest.mark.parametrize("text", ["ADMIN", "MAINTAIN", "READ", "TRIAGE", "WRITE"])
def test_repository_permission_round_trip(text):
    assert RepositoryPermission.to_string(RepositoryPermission.from_string(text)) == text


@pytest.mark.parametrize("text", ["IGNORED", "SUBSCRIBED", "UNSUBSCRIBED"])
def test_subscription_state_round_trip(text):
    assert SubscriptionState.to_string(SubscriptionState.from_string(text)) == text


def test_to_string_accepts_plain_ints():
    assert IssueState.to_string(2) == "OPEN"
    assert LockReason.to_string(4) == "TOO_HEATED"
    assert PullRequestState.to_string(4) == "OPEN"
    assert RepositoryPermission.to_string(5) == "WRITE"
    assert SubscriptionState.to_string(1) == "IGNORED"


def test_unknown_encodes_empty():
    assert IssueState.to_string(IssueState.UNKNOWN) == ""
    assert LockReason.to_string(LockReason.UNKNOWN) == ""
    assert PullRequestMergeMethod.to_string(PullRequestMergeMethod.UNKNOWN) == ""
    assert PullRequestState.to_string(PullRequestState.UNKNOWN) == ""
    assert RepositoryLockReason.to_string(RepositoryLockReason.UNKNOWN) == ""
    assert RepositoryPermission.to_string(RepositoryPermission.UNKNOWN) == ""
    assert SubscriptionState.to_string(SubscriptionState.UNKNOWN) == ""


def test_merge_state_status_unknown_encodes():
    assert MergeStateStatus.to_string(MergeStateStatus.UNKNOWN) == "UNKNOWN"


def test_out_of_range_encodes_empty():
    assert IssueState.to_string(200) == ""
    assert LockReason.to_string(200) == ""
    assert MergeStateStatus.to_string(200) == ""
    assert PullRequestMergeMethod.to_string(200) == ""
    assert PullRequestState.to_string(200) == ""
    assert RepositoryLockReason.to_string(200) == ""
    assert RepositoryPermission.to_string(200) == ""
    assert SubscriptionState.to_string(200) == ""


def test_flag_values_match_source():
    assert IssueState.from_string("CLOSED") == 0x1
    assert IssueState.from_string("OPEN") == 0x2
    assert PullRequestState.from_string("OPEN") == 0x4
    assert PullRequestState.from_string("MERGED") == 0x2


def test_combined_flags_have_no_wire_form():
    combined = PullRequestState.OPEN | PullRequestState.CLOSED
    assert PullRequestState.OPEN in combined
    assert PullRequestState.MERGED not in combined
    assert PullRequestState.to_string(combined) == ""
    assert IssueState.to_string(IssueState.OPEN | IssueState.CLOSED) == ""


def test_enum_ordering_follows_declaration():
    admin = RepositoryPermission.from_string("ADMIN")
    write = RepositoryPermission.from_string("WRITE")
    assert RepositoryPermission.from_string("nothing") == 0 < admin < write
    assert LockReason.from_string("nothing") == 0
    assert LockReason.from_string("OFF_TOPIC") < LockReason.from_string("TOO_HEATED")