"""GraphQL query documents for single objects.

Every query also asks for the current rate limit. Queries whose selection
set is fixed are complete. ``GET_REPOSITORY``, ``GET_REPOSITORY_BY_NAME``,
``GET_USER`` and ``GET_USER_BY_LOGIN`` are templates: they keep a ``%1``
marker for the selection set, to be filled in with :func:`sailhub.graphql.fill`.
"""

from __future__ import annotations

from . import query_items
from .graphql import simplified

__all__ = [
    "GET_COMMIT",
    "GET_DISCUSSION",
    "GET_GIST",
    "GET_ISSUE",
    "GET_ORGANIZATION",
    "GET_PROFILE_STATUS",
    "GET_PULL_REQUEST",
    "GET_RELEASE",
    "GET_REPOSITORY",
    "GET_REPOSITORY_BY_NAME",
    "GET_REPOSITORY_FILE_CONTENT",
    "GET_USER",
    "GET_USER_BY_LOGIN",
    "GET_VIEWER_PROFILE",
]

_MARKER = "%1"

_RATE_LIMIT = "rateLimit { remaining resetAt }"

_REACTION_GROUPS = (
    "reactionGroups { ... on ReactionGroup { "
    "content users { totalCount } viewerHasReacted } }"
)


def _query(head, body):
    """Build a query with ``head`` as operation line, asking for the rate limit."""
    return simplified(f"{head} {{ {_RATE_LIMIT} {body} }}")


def _on_node(type_name, selection, variables="$nodeId: ID!"):
    """Build a query selecting ``selection`` on the node of type ``type_name``."""
    return _query(
        f"query({variables})",
        f"node(id: $nodeId) {{ ... on {type_name} {{ {selection} }} }}",
    )


_DISCUSSION_FIELDS = f"""
    id activeLockReason answerChosenAt
    answerChosenBy {{ login avatarUrl }}
    author {{ login avatarUrl }}
    body
    category {{ id name emojiHTML }}
    comments {{ totalCount }}
    createdAt createdViaEmail
    editor {{ login avatarUrl }}
    lastEditedAt locked number publishedAt
    {_REACTION_GROUPS}
    repository {{ id nameWithOwner }}
    title updatedAt
    viewerCanDelete viewerCanReact viewerCanSubscribe viewerCanUpdate
    viewerDidAuthor viewerSubscription
"""

_GIST_FIELDS = """
    id
    comments { totalCount }
    createdAt description
    forks { totalCount }
    isFork isPublic name
    owner { id avatarUrl login }
    pushedAt stargazerCount updatedAt viewerHasStarred
"""

# Fields shared by issues and pull requests, up to their viewer abilities.
_THREAD_FIELDS = f"""
    id
    assignees {{ totalCount }}
    author {{ avatarUrl login }}
    body
    comments {{ totalCount }}
    createdAt
    labels {{ totalCount }}
    locked number
    participants {{ totalCount }}
    {_REACTION_GROUPS}
    repository {{ id nameWithOwner viewerPermission }}
    title state updatedAt
"""

_ISSUE_FIELDS = (
    _THREAD_FIELDS
    + """
    viewerCanReact viewerCanSubscribe viewerCanUpdate
    viewerDidAuthor viewerSubscription
"""
)

# canBeRebased and mergeStateStatus are preview fields and not requested.
_PULL_REQUEST_FIELDS = (
    _THREAD_FIELDS
    + """
    viewerCanApplySuggestion viewerCanDeleteHeadRef
    viewerCanDisableAutoMerge viewerCanEnableAutoMerge
    viewerCanReact viewerCanSubscribe viewerCanUpdate
    viewerDidAuthor viewerSubscription
    additions baseRefName changedFiles
    commits { totalCount }
    deletions headRefName isCrossRepository
    maintainerCanModify mergeable merged mergedAt
    mergedBy { avatarUrl login }
"""
)

_PROFILE_STATUS_FIELDS = """
    createdAt emoji emojiHTML expiresAt id
    indicatesLimitedAvailability message
    organization { avatarUrl id login }
    updatedAt
"""

_RELEASE_FIELDS = """
    id
    author { avatarUrl login }
    createdAt description isDraft isLatest isPrerelease name publishedAt
    releaseAssets { totalCount }
    repository { nameWithOwner }
    tagCommit { abbreviatedOid }
    tagName
"""

_BLOB_CONTENT_FIELDS = """
    id
    object(expression: $branch) {
        ... on Blob { byteSize isBinary text }
    }
"""

GET_COMMIT = _on_node("Commit", query_items.COMMIT)

GET_DISCUSSION = _on_node("Discussion", _DISCUSSION_FIELDS)

GET_GIST = _on_node("Gist", _GIST_FIELDS)

GET_ISSUE = _on_node("Issue", _ISSUE_FIELDS)

GET_ORGANIZATION = _on_node("Organization", query_items.ORGANIZATION)

GET_PROFILE_STATUS = _query("query", f"viewer {{ status {{ {_PROFILE_STATUS_FIELDS} }} }}")

GET_PULL_REQUEST = _on_node("PullRequest", _PULL_REQUEST_FIELDS)

GET_VIEWER_PROFILE = _query("query", f"viewer {{ {query_items.USER} }}")

GET_RELEASE = _on_node("Release", _RELEASE_FIELDS)

GET_REPOSITORY = _on_node("Repository", _MARKER)

GET_REPOSITORY_BY_NAME = _query(
    "query($owner: String!, $name: String!)",
    f"repository(owner: $owner, name: $name) {{ {_MARKER} }}",
)

GET_REPOSITORY_FILE_CONTENT = _on_node(
    "Repository", _BLOB_CONTENT_FIELDS, variables="$nodeId: ID!, $branch: String!"
)

GET_USER = _on_node("User", _MARKER)

GET_USER_BY_LOGIN = _query(
    "query($userLogin: String!)",
    f"user(login: $userLogin) {{ ... on User {{ {_MARKER} }} }}",
)