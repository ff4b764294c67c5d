"""State and reason enumerations used by the GitHub GraphQL API.

Every enumeration maps its members to and from the upper-case wire strings
the API sends. Unrecognised strings decode to ``UNKNOWN``; values without a
wire form encode to an empty string.
"""

from __future__ import annotations

import enum

__all__ = [
    "IssueState",
    "LockReason",
    "MergeStateStatus",
    "PullRequestMergeMethod",
    "PullRequestState",
    "RepositoryLockReason",
    "RepositoryPermission",
    "SubscriptionState",
]


def _decode(cls, text):
    """Return the member of ``cls`` named ``text``, or ``cls.UNKNOWN``."""
    return cls.__members__.get(text, cls.UNKNOWN)


def _encode(cls, value, *, unknown_has_name=False):
    """Return the member name whose value equals ``value``, or ``""``."""
    for member in cls.__members__.values():
        if member.name == "UNKNOWN" and not unknown_has_name:
            continue
        if member.value == value:
            return member.name
    return ""


class IssueState(enum.IntFlag):
    """State of an issue; values may be combined as filter flags."""

    UNKNOWN = 0x0
    CLOSED = 0x1
    OPEN = 0x2

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)


class LockReason(enum.IntEnum):
    """Reason an issue, pull request or discussion was locked."""

    UNKNOWN = 0
    OFF_TOPIC = 1
    RESOLVED = 2
    SPAM = 3
    TOO_HEATED = 4

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)


class MergeStateStatus(enum.IntEnum):
    """Merge state of a pull request."""

    UNKNOWN = 0
    BEHIND = 1
    BLOCKED = 2
    CLEAN = 3
    DIRTY = 4
    DRAFT = 5
    HAS_HOOKS = 6
    UNSTABLE = 7

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none.

        Unlike the other enumerations, ``UNKNOWN`` is a real API value here.
        """
        return _encode(cls, value, unknown_has_name=True)


class PullRequestMergeMethod(enum.IntEnum):
    """Method used to merge a pull request."""

    UNKNOWN = 0
    MERGE = 1
    REBASE = 2
    SQUASH = 3

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)


class PullRequestState(enum.IntFlag):
    """State of a pull request; values may be combined as filter flags."""

    UNKNOWN = 0x0
    CLOSED = 0x1
    MERGED = 0x2
    OPEN = 0x4

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)


class RepositoryLockReason(enum.IntEnum):
    """Reason a repository was locked."""

    UNKNOWN = 0
    BILLING = 1
    MIGRATING = 2
    MOVING = 3
    RENAME = 4

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)


class RepositoryPermission(enum.IntEnum):
    """Permission the viewer holds on a repository."""

    UNKNOWN = 0
    ADMIN = 1
    MAINTAIN = 2
    READ = 3
    TRIAGE = 4
    WRITE = 5

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)


class SubscriptionState(enum.IntEnum):
    """Subscription state of the viewer for a subscribable item."""

    UNKNOWN = 0
    IGNORED = 1
    SUBSCRIBED = 2
    UNSUBSCRIBED = 3

    @classmethod
    def from_string(cls, text):
        """Return the member named by ``text``, or ``UNKNOWN``."""
        return _decode(cls, text)

    @classmethod
    def to_string(cls, value):
        """Return the wire string for ``value``, or ``""`` if it has none."""
        return _encode(cls, value)