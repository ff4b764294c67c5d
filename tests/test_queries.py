from itertools import accumulate

import pytest

from sailhub import queries, query_items
from sailhub.graphql import fill, simplified

COMPLETE = [
    queries.GET_COMMIT,
    queries.GET_DISCUSSION,
    queries.GET_GIST,
    queries.GET_ISSUE,
    queries.GET_ORGANIZATION,
    queries.GET_PROFILE_STATUS,
    queries.GET_PULL_REQUEST,
    queries.GET_VIEWER_PROFILE,
    queries.GET_RELEASE,
    queries.GET_REPOSITORY_FILE_CONTENT,
]

TEMPLATES = [
    queries.GET_REPOSITORY,
    queries.GET_REPOSITORY_BY_NAME,
    queries.GET_USER,
    queries.GET_USER_BY_LOGIN,
]

ALL = COMPLETE + TEMPLATES


def _brace_depths(text):
    steps = (1 if char == "{" else -1 if char == "}" else 0 for char in text)
    return list(accumulate(steps))


@pytest.mark.parametrize("query", ALL)
def test_queries_are_simplified(query):
    assert simplified(query) == query


@pytest.mark.parametrize("query", ALL)
def test_braces_balance(query):
    text = simplified(query)
    assert text.count("{") == text.count("}")
    assert min(_brace_depths(text), default=0) >= 0


@pytest.mark.parametrize("query", ALL)
def test_every_query_asks_for_rate_limit(query):
    text = simplified(query)
    assert text.startswith("query")
    assert "rateLimit { remaining resetAt }" in text


@pytest.mark.parametrize("query", COMPLETE)
def test_complete_queries_have_no_marker(query):
    assert "%1" not in query
    with pytest.raises(ValueError):
        fill(query, "id")


@pytest.mark.parametrize("query", TEMPLATES)
def test_templates_keep_one_marker(query):
    filled = fill(query, "SELECTION_MARKER")
    assert filled.count("SELECTION_MARKER") == 1
    assert "%1" not in filled


def test_commit_query_embeds_commit_selection():
    assert "... on Commit { " + query_items.COMMIT + " }" in queries.GET_COMMIT
    assert queries.GET_COMMIT.startswith("query($nodeId: ID!) {")


def test_organization_query_embeds_organization_selection():
    expected = "... on Organization { " + query_items.ORGANIZATION + " }"
    assert expected in simplified(queries.GET_ORGANIZATION)


def test_viewer_profile_embeds_user_selection():
    assert "viewer { " + query_items.USER + " }" in queries.GET_VIEWER_PROFILE
    assert queries.GET_VIEWER_PROFILE.startswith("query {")


def test_repository_template_filled():
    query = fill(queries.GET_REPOSITORY, query_items.REPO)
    assert "... on Repository { " + query_items.REPO + " }" in query
    assert "%1" not in query


def test_repository_by_name_template_filled():
    query = fill(queries.GET_REPOSITORY_BY_NAME, query_items.REPO)
    assert "repository(owner: $owner, name: $name) { " + query_items.REPO + " }" in query


def test_user_by_login_template_filled():
    query = fill(queries.GET_USER_BY_LOGIN, query_items.USER)
    assert "user(login: $userLogin) { ... on User { " + query_items.USER + " } }" in query


def test_pull_request_skips_preview_fields():
    text = simplified(queries.GET_PULL_REQUEST)
    assert "canBeRebased" not in text
    assert "mergeStateStatus" not in text
    assert "maintainerCanModify mergeable merged mergedAt" in text


def test_reaction_groups_in_commentable_queries():
    groups = (
        "reactionGroups { ... on ReactionGroup { content users { totalCount } "
        "viewerHasReacted } }"
    )
    for query in (queries.GET_ISSUE, queries.GET_PULL_REQUEST, queries.GET_DISCUSSION):
        assert groups in simplified(query)


def test_file_content_query_variables():
    query = queries.GET_REPOSITORY_FILE_CONTENT
    assert query.startswith("query($nodeId: ID!, $branch: String!) {")
    assert "object(expression: $branch) { ... on Blob { byteSize isBinary text } }" in query


def test_profile_status_query_head():
    assert queries.GET_PROFILE_STATUS.startswith(
        "query { rateLimit { remaining resetAt } viewer { status {"
    )