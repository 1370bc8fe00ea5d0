"""
Field-level diffs between consecutive revisions of a need.

Revisions arrive newest first.  Each one gets a ``changes`` mapping of
``field -> [previous_value, current_value]`` for every field whose value
differs from the next-older revision.  The oldest revision is compared
against an empty document, so all of its fields show up as changes.
"""

from typing import Any, Dict, List, Mapping

IGNORED_KEYS = frozenset({"user_facing_version", "changes"})


def changed_keys(previous: Mapping[str, Any], current: Mapping[str, Any]) -> List[str]:
    """Keys present in either document whose values differ.

    Keys from *current* come first, in their own order, followed by keys
    only found in *previous*.  A key missing on one side counts as None.
    """
    keys = list(current.keys())
    keys.extend(k for k in previous.keys() if k not in current)
    return [
        k for k in keys
        if k not in IGNORED_KEYS and current.get(k) != previous.get(k)
    ]


def changes_between(previous: Mapping[str, Any], current: Mapping[str, Any]) -> Dict[str, list]:
    """``{field: [previous_value, current_value]}`` for every changed field."""
    return {
        key: [previous.get(key), current.get(key)]
        for key in changed_keys(previous, current)
    }


def compute_changes(revisions: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Attach a ``changes`` mapping to every revision (newest first).

    All diffs are computed before any revision is annotated, so the
    ``changes`` key never takes part in a comparison.  Returns the same
    list for convenience.
    """
    diffs = []
    for index, current in enumerate(revisions):
        previous = revisions[index + 1] if index + 1 < len(revisions) else {}
        diffs.append(changes_between(previous, current))

    for revision, diff in zip(revisions, diffs):
        revision["changes"] = diff
    return revisions
