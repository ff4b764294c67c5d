"""GraphQL request payloads and helpers for building query text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict

__all__ = ["GraphQLQuery", "fill", "simplified"]

_MARKER = re.compile(r"%(\d{1,2})")


@dataclass
class GraphQLQuery:
    """A GraphQL query document with its variables."""

    query: str = ""
    variables: Dict[str, Any] = field(default_factory=dict)


def simplified(text):
    """Trim ``text`` and collapse every whitespace run to one space."""
    return " ".join(text.split())


def fill(template, *args):
    """Substitute ``args`` for the place markers ``%1`` .. ``%99``.

    The lowest-numbered marker takes the first argument, the next lowest the
    second, and so on; every occurrence of a marker is replaced. Markers not
    reached by an argument are left alone.

    Raises:
        ValueError: if there are more arguments than distinct markers.
    """
    numbers = sorted({int(n) for n in _MARKER.findall(template) if int(n) > 0})
    if len(args) > len(numbers):
        raise ValueError(
            f"{len(args)} arguments given but template has {len(numbers)} place markers"
        )
    replacements = {n: str(arg) for n, arg in zip(numbers, args)}

    def substitute(match):
        return replacements.get(int(match.group(1)), match.group(0))

    return _MARKER.sub(substitute, template)