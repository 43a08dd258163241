from __future__ import annotations
"""Hierarchy builder for dot-delimited field names.

In PDF, partial form field names are joined with periods to give the full field name.
burst_dots(flat) takes a mapping keyed by full names and returns the equivalent tree.
"""
from typing import Any, Mapping

from .schema import FIELD_NAME_DELIMITER, FieldBranch, FieldLeaf


class _Pending(dict):
    """Sub-mapping still waiting to be burst; never confused with a caller's dict value."""


def burst_dots(flat: Mapping[Any, Any]) -> FieldBranch:
    staged: dict = {}

    for key, value in flat.items():
        head, sep, rest = str(key).partition(FIELD_NAME_DELIMITER)
        existing = staged.get(head)

        if sep:
            if head not in staged:
                staged[head] = _Pending()
            elif not isinstance(existing, _Pending):
                # name collides with a plain value; keep it under the empty key
                staged[head] = _Pending({"": existing})
            staged[head][rest] = value
        elif isinstance(existing, _Pending):
            # plain value collides with a parent; same empty-key rule
            existing[""] = value
        elif isinstance(value, Mapping):
            # already nested by the caller
            staged[head] = _Pending((str(k), v) for k, v in value.items())
        else:
            staged[head] = value

    tree = FieldBranch()
    for key, value in staged.items():
        tree.children[key] = burst_dots(value) if isinstance(value, _Pending) else FieldLeaf(value)
    return tree
