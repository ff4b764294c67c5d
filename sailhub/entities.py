"""Small value types shared by the API client and its models."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

__all__ = [
    "Ability",
    "Language",
    "RateLimit",
    "ReactionListItem",
    "ReactionType",
    "TreeItemListItem",
    "TreeItemType",
]


class ReactionType(enum.IntFlag):
    """Reaction emoji; values are single bits so sets can be combined."""

    NONE = 0x00
    THUMBS_UP = 0x01
    THUMBS_DOWN = 0x02
    LAUGH = 0x04
    HOORAY = 0x08
    CONFUSED = 0x10
    HEART = 0x20
    ROCKET = 0x40
    EYES = 0x80

    @classmethod
    def content(cls, value):
        """Return the API reaction content string, or ``""`` if none."""
        for member in cls.__members__.values():
            if member is not cls.NONE and member.value == value:
                return member.name
        return ""


@dataclass
class ReactionListItem:
    """A reaction with its count and whether the viewer gave it."""

    count: int = 0
    type: ReactionType = ReactionType.NONE
    viewer_reacted: bool = False


class Ability(enum.IntFlag):
    """Things the viewer is allowed to do with an item."""

    CAN_NONE = 0x0000
    CAN_ADMINISTER = 0x0001
    CAN_APPLY_SUGGESTION = 0x0002
    CAN_CREATE_PROJECTS = 0x0004
    CAN_DELETE = 0x0008
    CAN_DELETE_HEAD_REF = 0x0010
    CAN_DISABLE_AUTO_MERGE = 0x0020
    CAN_ENABLE_AUTO_MERGE = 0x0040
    CAN_REACT = 0x0080
    CAN_SUBSCRIBE = 0x0100
    CAN_UPDATE = 0x0200
    CAN_UPDATE_TOPICS = 0x0400
    CAN_MARK_AS_ANSWER = 0x0800
    CAN_MINIMIZE = 0x1000
    CAN_UNMARK_AS_ANSWER = 0x2000


class TreeItemType(enum.IntEnum):
    """Kind of a git tree entry."""

    UNDEFINED = 0
    BLOB = 1
    TREE = 2


@dataclass
class TreeItemListItem:
    """An entry of a git tree listing."""

    extension: str = ""
    file_type: int = 0
    name: str = ""
    path: str = ""
    type: TreeItemType = TreeItemType.UNDEFINED


@dataclass
class Language:
    """A programming language with its display colour."""

    color: str = ""
    name: str = ""


@dataclass
class RateLimit:
    """API rate limit state."""

    limit: int = 0
    remaining: int = 0
    reset: Optional[datetime] = None