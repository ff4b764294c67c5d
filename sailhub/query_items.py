"""Selection sets for GraphQL objects, shared by the queries.

Each constant is the field selection of one object type. Whitespace is
collapsed so the text can go straight into a query document.
"""

from __future__ import annotations

from .graphql import simplified

__all__ = [
    "COMMENT",
    "COMMIT",
    "COMMIT_LIST_ITEM",
    "DISCUSSION_CATEGORY_LIST_ITEM",
    "DISCUSSION_COMMENT",
    "DISCUSSION_LIST_ITEM",
    "GIST_LIST_ITEM",
    "ISSUE_LIST_ITEM",
    "LABEL_LIST_ITEM",
    "ORGANIZATION",
    "ORGANIZATION_LIST_ITEM",
    "PAGE_INFO",
    "PULL_REQUEST_LIST_ITEM",
    "RELEASE_ASSET_LIST_ITEM",
    "RELEASE_LIST_ITEM",
    "REPO",
    "REPO_LIST_ITEM",
    "USER",
    "USER_LIST_ITEM",
]

_REACTION_GROUPS = (
    "    reactionGroups {"
    "        ... on ReactionGroup {"
    "            content"
    "            users {"
    "                totalCount"
    "            }"
    "            viewerHasReacted"
    "        }"
    "    }"
)

COMMIT_LIST_ITEM = simplified(
    "    id"
    "    author {"
    "        date"
    "        user {"
    "            avatarUrl"
    "            login"
    "        }"
    "    }"
    "    committer {"
    "        date"
    "        user {"
    "            avatarUrl"
    "            login"
    "        }"
    "    }"
    "    messageHeadline"
    "    signature {"
    "        isValid"
    "        state"
    "    }"
)

DISCUSSION_LIST_ITEM = simplified(
    "    id"
    "    activeLockReason"
    "    author {"
    "        avatarUrl"
    "        login"
    "    }"
    "    category {"
    "        emoji"
    "        emojiHTML"
    "        name"
    "    }"
    "    comments {"
    "        totalCount"
    "    }"
    "    createdAt"
    "    locked"
    "    title"
    "    updatedAt"
    "    viewerCanDelete"
)

DISCUSSION_COMMENT = simplified(
    "    id"
    "    author {"
    "        avatarUrl"
    "        login"
    "    }"
    "    body"
    "    createdAt"
    "    createdViaEmail"
    "    deletedAt"
    "    discussion {"
    "        id"
    "    }"
    "    editor {"
    "        avatarUrl"
    "        login"
    "    }"
    "    includesCreatedEdit"
    "    isAnswer"
    "    isMinimized"
    "    lastEditedAt"
    "    minimizedReason"
    "    publishedAt"
    + _REACTION_GROUPS
    + "    replies {"
    "        totalCount"
    "    }"
    "    replyTo {"
    "        id"
    "    }"
    "    updatedAt"
    "    viewerCanDelete"
    "    viewerCanMarkAsAnswer"
    "    viewerCanMinimize"
    "    viewerCanReact"
    "    viewerCanUnmarkAsAnswer"
    "    viewerCanUpdate"
    "    viewerDidAuthor"
)

DISCUSSION_CATEGORY_LIST_ITEM = simplified(
    "    id"
    "    description"
    "    emojiHTML"
    "    name"
)

GIST_LIST_ITEM = simplified(
    "    id"
    "    comments {"
    "        totalCount"
    "    }"
    "    createdAt"
    "    description"
    "    forks {"
    "        totalCount"
    "    }"
    "    isPublic"
    "    owner {"
    "        avatarUrl"
    "        login"
    "    }"
    "    pushedAt"
    "    stargazerCount"
    "    updatedAt"
)

COMMENT = simplified(
    "    id"
    "    author {"
    "        avatarUrl"
    "        login"
    "    }"
    "    body"
    "    bodyText"
    "    createdAt"
    "    lastEditedAt"
    + _REACTION_GROUPS
    + "    viewerCanDelete"
    "    viewerCanReact"
    "    viewerCanUpdate"
    "    viewerDidAuthor"
)

COMMIT = simplified(
    "    id"
    "    abbreviatedOid"
    "    additions"
    "    author {"
    "        avatarUrl"
    "        user {"
    "            id"
    "            login"
    "        }"
    "    }"
    "    authoredByCommitter"
    "    authors {"
    "        totalCount"
    "    }"
    "    changedFiles"
    "    comments {"
    "        totalCount"
    "    }"
    "    committedDate"
    "    committer {"
    "        avatarUrl"
    "        user {"
    "            id"
    "            login"
    "        }"
    "    }"
    "    deletions"
    "    message"
    "    messageHeadline"
    "    parents {"
    "        totalCount"
    "    }"
    "    pushedDate"
    "    signature {"
    "        isValid"
    "        state"
    "    }"
)

ISSUE_LIST_ITEM = simplified(
    "    id"
    "    closed"
    "    comments {"
    "        totalCount"
    "    }"
    "    createdAt"
    "    number"
    "    repository {"
    "        nameWithOwner"
    "    }"
    "    state"
    "    title"
    "    updatedAt"
)

LABEL_LIST_ITEM = simplified(
    "    color"
    "    createdAt"
    "    name"
)

ORGANIZATION = simplified(
    "    id"
    "    avatarUrl"
    "    description"
    "    email"
    "    location"
    "    login"
    "    membersWithRole {"
    "        totalCount"
    "    }"
    "    name"
    "    projects {"
    "        totalCount"
    "    }"
    "    repositories {"
    "        totalCount"
    "    }"
    "    teams {"
    "        totalCount"
    "    }"
    "    twitterUsername"
    "    viewerIsAMember"
    "    viewerIsSponsoring"
    "    websiteUrl"
)

ORGANIZATION_LIST_ITEM = simplified(
    "    id"
    "    avatarUrl"
    "    description"
    "    login"
    "    name"
)

PAGE_INFO = simplified(
    "    pageInfo {"
    "        hasNextPage"
    "        endCursor"
    "    }"
)

PULL_REQUEST_LIST_ITEM = simplified(
    "    id"
    "    comments {"
    "        totalCount"
    "    }"
    "    createdAt"
    "    number"
    "    repository {"
    "        nameWithOwner"
    "    }"
    "    state"
    "    title"
    "    updatedAt"
)

RELEASE_ASSET_LIST_ITEM = simplified(
    "    id"
    "    contentType"
    "    createdAt"
    "    downloadCount"
    "    downloadUrl"
    "    name"
    "    size"
    "    updatedAt"
)

RELEASE_LIST_ITEM = simplified(
    "    id"
    "    createdAt"
    "    isDraft"
    "    isLatest"
    "    isPrerelease"
    "    name"
)

REPO = simplified(
    "    id"
    "    defaultBranchRef {"
    "        id"
    "        name"
    "    }"
    "    description"
    "    discussions {"
    "        totalCount"
    "    }"
    "    forkCount"
    "    fundingLinks {"
    "        platform"
    "    }"
    "    hasIssuesEnabled"
    "    hasProjectsEnabled"
    "    hasWikiEnabled"
    "    homepageUrl"
    "    isArchived"
    "    isDisabled"
    "    isEmpty"
    "    isFork"
    "    isInOrganization"
    "    isLocked"
    "    isMirror"
    "    isPrivate"
    "    issues(states: [OPEN]) {"
    "        totalCount"
    "    }"
    "    labels {"
    "        totalCount"
    "    }"
    "    licenseInfo {"
    "        spdxId"
    "        url"
    "    }"
    "    lockReason"
    "    mentionableUsers {"
    "        totalCount"
    "    }"
    "    name"
    "    owner {"
    "        id"
    "        login"
    "        avatarUrl"
    "    }"
    "    parent {"
    "        id"
    "        nameWithOwner"
    "    }"
    "    projects {"
    "        totalCount"
    "    }"
    "    pullRequests(states: [OPEN]) {"
    "        totalCount"
    "    }"
    '    refs(first: 100, refPrefix: "refs/heads/") {'
    "        totalCount"
    "        nodes {"
    "            id"
    "            name"
    "        }"
    "    }"
    "    releases {"
    "        totalCount"
    "    }"
    "    stargazerCount"
    "    viewerCanSubscribe"
    "    viewerHasStarred"
    "    viewerPermission"
    "    viewerSubscription"
    "    vulnerabilityAlerts {"
    "        totalCount"
    "    }"
    "    watchers {"
    "        totalCount"
    "    }"
)

REPO_LIST_ITEM = simplified(
    "    id"
    "    createdAt"
    "    isArchived"
    "    isDisabled"
    "    isFork"
    "    isLocked"
    "    isPrivate"
    "    lockReason"
    "    shortDescriptionHTML"
    "    primaryLanguage {"
    "        color"
    "        name"
    "    }"
    "    pushedAt"
    "    name"
    "    owner {"
    "        avatarUrl"
    "        login"
    "    }"
    "    stargazerCount"
    "    updatedAt"
)

USER = simplified(
    "    id"
    "    avatarUrl"
    "    bio"
    "    company"
    "    email"
    "    followers {"
    "        totalCount"
    "    }"
    "    following {"
    "        totalCount"
    "    }"
    "    gists ( privacy: ALL ) {"
    "        totalCount"
    "    }"
    "    location"
    "    login"
    "    isViewer"
    "    name"
    "    organizations {"
    "        totalCount"
    "    }"
    "    projects {"
    "        totalCount"
    "    }"
    "    repositories {"
    "        totalCount"
    "    }"
    "    starredRepositories {"
    "        totalCount"
    "    }"
    "    status {"
    "        emojiHTML"
    "        message"
    "    }"
    "    twitterUsername"
    "    viewerIsFollowing"
    "    websiteUrl"
)

USER_LIST_ITEM = simplified(
    "    id"
    "    avatarUrl"
    "    login"
    "    name"
)