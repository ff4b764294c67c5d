"""Listing of the files in a git tree, from a commit or a repository branch."""

from __future__ import annotations

import enum
import re
from typing import Any, Iterator, List

from .entities import TreeItemListItem, TreeItemType
from .graphql import GraphQLQuery, simplified

__all__ = [
    "GET_COMMIT_FILES",
    "GET_REPOSITORY_FILES",
    "FileType",
    "TreeModel",
    "TreeModelType",
    "sort_items",
]

GET_COMMIT_FILES = simplified(
    "query($nodeId: ID!) {"
    "    rateLimit {"
    "        remaining"
    "        resetAt"
    "    }"
    "    node(id: $nodeId) {"
    "        ... on Commit {"
    "            id"
    "            tree {"
    "                entries {"
    "                    extension"
    "                    name"
    "                    path"
    "                    type"
    "                    object {"
    "                        ... on Blob {"
    "                            isBinary"
    "                        }"
    "                    }"
    "                }"
    "            }"
    "        }"
    "    }"
    "}"
)

GET_REPOSITORY_FILES = simplified(
    "query($nodeId: ID!, $branch: String!, $path: String!) {"
    "    rateLimit {"
    "        remaining"
    "        resetAt"
    "    }"
    "    node(id: $nodeId) {"
    "        ... on Repository {"
    "            id"
    "            ref(qualifiedName: $branch) {"
    "                target {"
    "                    ... on Commit {"
    "                        file(path: $path) {"
    "                            object {"
    "                                ... on Tree {"
    "                                    entries {"
    "                                        extension"
    "                                        name"
    "                                        path"
    "                                        type"
    "                                        object {"
    "                                            ... on Blob {"
    "                                                isBinary"
    "                                            }"
    "                                        }"
    "                                    }"
    "                                }"
    "                            }"
    "                        }"
    "                    }"
    "                }"
    "            }"
    "        }"
    "    }"
    "}"
)

_IMAGE_EXTENSION = re.compile(r".(jpg|png|gif|jpeg|ico|bmp)", re.DOTALL)
_SVG_EXTENSION = re.compile(r".(svg)", re.DOTALL)
_MARKDOWN_EXTENSION = re.compile(r".(md)", re.DOTALL)

_COMMIT_ENTRIES_PATH = ("node", "tree", "entries")
_REPOSITORY_ENTRIES_PATH = ("node", "ref", "target", "file", "object", "entries")


class FileType(enum.IntEnum):
    """How the content of a blob is to be shown."""

    UNDEFINED = 0
    BINARY = 1
    IMAGE = 2
    MARKDOWN = 3
    TEXT = 4


class TreeModelType(enum.IntEnum):
    """Where the tree listing comes from."""

    UNDEFINED = 0
    COMMIT = 1
    REPOSITORY = 2


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _entries(data: Any, keys) -> list:
    node: Any = data
    for key in keys:
        node = _as_dict(node).get(key)
    return node if isinstance(node, list) else []


def _blob_file_type(extension: str, is_binary: bool) -> FileType:
    if is_binary:
        if _IMAGE_EXTENSION.fullmatch(extension):
            return FileType.IMAGE
        return FileType.BINARY
    if _SVG_EXTENSION.fullmatch(extension):
        return FileType.IMAGE
    if _MARKDOWN_EXTENSION.fullmatch(extension):
        return FileType.MARKDOWN
    return FileType.TEXT


def _parse_entry(entry: Any) -> TreeItemListItem:
    obj = _as_dict(entry)
    item = TreeItemListItem(
        name=_as_str(obj.get("name")),
        path=_as_str(obj.get("path")),
        extension=_as_str(obj.get("extension")),
    )
    kind = _as_str(obj.get("type"))
    if kind == "tree":
        item.type = TreeItemType.TREE
    elif kind == "blob":
        item.type = TreeItemType.BLOB
        is_binary = _as_dict(obj.get("object")).get("isBinary") is True
        item.file_type = _blob_file_type(item.extension, is_binary)
    return item


def sort_items(items) -> List[TreeItemListItem]:
    """Return ``items`` with trees first, then blobs, then anything else.

    Items of the same kind keep their relative order.
    """
    return sorted(items, key=lambda item: -int(item.type))


class TreeModel:
    """The entries of one directory of a commit or repository tree."""

    def __init__(
        self,
        identifier: str = "",
        model_type: TreeModelType = TreeModelType.UNDEFINED,
        branch: str = "master",
        path: str = "/",
    ) -> None:
        self.identifier = identifier
        self.model_type = model_type
        self.branch = branch
        self.path = path
        self.loading = False
        self._items: List[TreeItemListItem] = []

    @property
    def items(self) -> List[TreeItemListItem]:
        """A copy of the current entries."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TreeItemListItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> TreeItemListItem:
        return self._items[index]

    def set_items(self, items) -> None:
        """Replace all entries and mark loading as finished."""
        self._items = list(items)
        self.loading = False

    def clear(self) -> None:
        """Remove all entries."""
        self._items = []

    def parse_query_result(self, data) -> None:
        """Take the entries from the ``data`` part of a query response."""
        if self.model_type == TreeModelType.COMMIT:
            entries = _entries(data, _COMMIT_ENTRIES_PATH)
        else:
            entries = _entries(data, _REPOSITORY_ENTRIES_PATH)
        self.set_items(_parse_entry(entry) for entry in entries)

    def query(self) -> GraphQLQuery:
        """Build the query that fetches this tree."""
        if self.model_type == TreeModelType.COMMIT:
            result = GraphQLQuery(query=GET_COMMIT_FILES)
        else:
            result = GraphQLQuery(
                query=GET_REPOSITORY_FILES,
                variables={"branch": self.branch, "path": self.path},
            )
        result.variables["nodeId"] = self.identifier
        return result