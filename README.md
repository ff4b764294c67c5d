# sailhub

Building blocks for a GitHub GraphQL client. It uses only the standard library.

## Modules

- `sailhub.enums` holds the GitHub enumerations `IssueState`, `LockReason`,
  `MergeStateStatus`, `PullRequestMergeMethod`, `PullRequestState`,
  `RepositoryLockReason`, `RepositoryPermission` and `SubscriptionState`.
  - Each one has `from_string(text)`, which returns the member with that
    upper-case API name. Any other string gives `UNKNOWN`.
  - Each one has `to_string(value)`, which returns the API name, or `""` when
    the value has none.
  - For `MergeStateStatus`, `UNKNOWN` is a real API value, so
    `to_string(0)` returns `"UNKNOWN"`.
  - `IssueState` and `PullRequestState` are flag enums, so their members can
    be combined.
- `sailhub.entities` holds small value types:
  - `ReactionType` is a flag enum. `ReactionType.content(value)` returns the
    API content string, such as `"THUMBS_UP"`, or `""` for `NONE` or an
    unknown value.
  - `Ability` holds the viewer-permission flags.
  - `TreeItemType` is one of `UNDEFINED`, `BLOB` or `TREE`.
  - The dataclasses are `ReactionListItem`, `TreeItemListItem`, `Language`
    and `RateLimit`.
- `sailhub.graphql` holds `GraphQLQuery`, a dataclass with the query text
  and a `variables` dict, and two helpers:
  - `simplified(text)` trims the text and turns every run of whitespace into
    one space.
  - `fill(template, *args)` replaces the `%1` … `%99` markers. The lowest
    marker gets the first argument, the next one the second, and so on.
    Markers without an argument are left as they are. It raises `ValueError`
    when there are more arguments than distinct markers.
- `sailhub.query_items` holds the selection sets for object types. Examples
  are `COMMIT`, `REPO`, `USER`, `ISSUE_LIST_ITEM` and `PAGE_INFO`.
- `sailhub.queries` holds the query documents for single objects, such as
  `GET_COMMIT`, `GET_ISSUE` and `GET_PULL_REQUEST`. Every query also asks for
  the rate limit.
  - `GET_REPOSITORY`, `GET_REPOSITORY_BY_NAME`, `GET_USER` and
    `GET_USER_BY_LOGIN` are templates with a `%1` marker. Fill the marker
    with `fill`.
- `sailhub.tree` lists the entries of a git tree.
  - `TreeModel` builds its query with `query()`. The query is for a commit
    when `model_type` is `TreeModelType.COMMIT`. Otherwise it is for a
    repository branch and path. The defaults are `"master"` and `"/"`.
  - `parse_query_result(data)` reads the entries from the response's `data`
    object. Blobs get a `FileType`:
    - `IMAGE` for binary jpg, png, gif, jpeg, ico or bmp files, and for svg
      files.
    - `BINARY` for other binary files.
    - `MARKDOWN` for `.md` files.
    - `TEXT` for everything else.
  - `sort_items(items)` puts trees first, then blobs, then the rest. Items of
    the same kind keep their order.
- `sailhub.settings` holds the persistent client settings.
  - `Settings` is a dataclass with `pagination` (default 20), `notify`,
    `notification_update_interval` (an `UpdateInterval`, default
    `FIFTEEN_MINUTES`) and `access_token`.
  - The `frequency` property turns the interval into a `timedelta`. An
    interval it does not know gives 15 minutes.
  - `Settings.load(config_dir)` reads `org.nubecula/sailhub/sailhub.conf`
    under the directory. If that file is missing, it reads
    `harbour-sailhub/harbour-sailhub.conf` instead.
  - `save(config_dir)` writes the `[APP]` group of the first file and returns
    its path. Other groups and keys already in the file are kept.
  - `default_config_dir()` returns `$XDG_CONFIG_HOME`, or `~/.config` when
    that is unset.

## Example

```python
from sailhub.enums import IssueState
from sailhub.tree import TreeModel, TreeModelType, sort_items

IssueState.from_string("OPEN")         # IssueState.OPEN
IssueState.to_string(IssueState.OPEN)  # "OPEN"

model = TreeModel(identifier="R_node", model_type=TreeModelType.REPOSITORY)
query = model.query()
# query.variables == {"branch": "master", "path": "/", "nodeId": "R_node"}

data = {"node": {"ref": {"target": {"file": {"object": {"entries": [
    {"name": "README.md", "path": "README.md", "extension": ".md",
     "type": "blob", "object": {"isBinary": False}},
    {"name": "src", "path": "src", "extension": "", "type": "tree"},
]}}}}}}
model.parse_query_result(data)
for item in sort_items(model.items):
    print(item.name, item.type.name, item.file_type)
```

```python
from sailhub.settings import Settings

settings = Settings.load("/tmp/config")
settings.access_token = "token"
settings.save("/tmp/config")
```

## What it does not do

The package builds query texts and reads responses, but it does not talk to
GitHub itself. It has no HTTP client and no notification polling. It has no
desktop notifications and no command-line program. Sending a `GraphQLQuery`
and passing the response's `data` object to a model is up to the caller.

## Running the tests

```
pip install .[test]
pytest
```