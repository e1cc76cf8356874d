from __future__ import annotations

from typing import Mapping, Sequence

from valdn.config import PATH_SEPARATOR, WILDCARD


def join_path(parent: str, name: str | int) -> str:
    """
    Build the path of a direct child.

    The root path is empty, so top-level children are addressed by their bare
    name (`email`), nested ones by dotted names (`user.email`, `tags.0`).
    """
    name = str(name)
    if not parent:
        return name
    return f"{parent}{PATH_SEPARATOR}{name}"


def parent_path(path: str) -> str:
    """Strip the final segment: `a.b.c` -> `a.b`, `a` -> ``."""
    head, sep, _ = path.rpartition(PATH_SEPARATOR)
    return head if sep else ""


def wildcard_path(path: str) -> str:
    """Wildcard key that covers `path` and all its siblings: `a.b` -> `a.*`, `a` -> `*`."""
    return join_path(parent_path(path), WILDCARD)


def is_wildcard_path(path: str) -> bool:
    return path == WILDCARD or path.endswith(f"{PATH_SEPARATOR}{WILDCARD}")


def resolve_rules(rules: Mapping[str, Sequence[str]], path: str) -> Sequence[str]:
    """
    Find the rule spec governing `path`.

    An exact entry always wins. Otherwise the wildcard of the immediate parent is
    used (`tags.*` for `tags.3`). The root path has no wildcard fallback.
    Deeper wildcard patterns such as `a.*.*` are never consulted.
    """
    if path in rules:
        return rules[path]
    if path:
        return rules.get(wildcard_path(path), [])
    return []
