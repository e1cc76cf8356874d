from __future__ import annotations

import logging
from typing import Any, Dict, List

from valdn.config import ValidationConfig
from valdn.core.shapes import shape_of
from valdn.core.values import ValueKind, classify, iter_children
from valdn.exceptions.common_exceptions import UnsupportedTypeException
from valdn.utils.path_resolver import join_path


def merge_annotations(rules: Dict[str, List[str]], value: Any, path: str, config: ValidationConfig) -> int:
    """
    Add rules declared on record fields to `rules`, in place.

    A field annotation is only used when `rules` has no entry at that exact path,
    so explicitly supplied rules always win. Map entries and collection elements
    are only known at runtime: the merger walks the ones actually present and
    picks up annotations of the records found inside them.

    Returns:
        Number of entries added.
    """
    try:
        kind = classify(value, path)
    except UnsupportedTypeException:
        # Reported by the traversal, and only if the value is reached.
        return 0
    if not kind.is_composite:
        return 0

    added = 0
    if kind is ValueKind.RECORD:
        for field in shape_of(type(value), config.tag_name).fields:
            field_path = join_path(path, field.name)
            if field.annotation and field_path not in rules:
                rules[field_path] = config.split_rules(field.annotation)
                added += 1

    for name, child in iter_children(value, kind, config):
        if child is None:
            continue
        added += merge_annotations(rules, child, join_path(path, name), config)

    if added and not path:
        logging.debug(f"[VALDN] Merged {added} annotated rule(s)")
    return added
