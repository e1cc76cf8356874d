from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Optional, Set, Union

from valdn.config import ValidationConfig, load_config
from valdn.core.annotations import merge_annotations
from valdn.core.evaluator import evaluate, split_rule
from valdn.core.messages import get_error_message
from valdn.core.registry import RuleRegistry, get_registry
from valdn.core.values import ValueKind, classify, iter_children
from valdn.exceptions.common_exceptions import InvalidConfigException
from valdn.utils.path_resolver import is_wildcard_path, join_path, parent_path, resolve_rules

Rules = Dict[str, List[str]]
RulesInput = Mapping[str, Union[Sequence[str], str]]
Errors = Dict[str, str]

REQUIRED_RULE = "required"


def copy_rules(rules: Optional[RulesInput], config: ValidationConfig) -> Rules:
    """
    Copy a rule table so that merging annotations never touches the caller's table.

    A rule spec may be given as a list (`["required", "min:3"]`) or as a single
    annotation-style string (`"required|min:3"`).

    Raises:
        InvalidConfigException: If a key or a rule spec has the wrong type.
    """
    copied: Rules = {}
    for path, spec in (rules or {}).items():
        if not isinstance(path, str):
            raise InvalidConfigException(f"Rule table keys must be strings, got `{path!r}`")
        if isinstance(spec, str):
            copied[path] = config.split_rules(spec)
        elif isinstance(spec, Sequence) and all(isinstance(expr, str) for expr in spec):
            copied[path] = list(spec)
        else:
            raise InvalidConfigException(f"Rules for `{path}` must be a list of rule expressions")
    return copied


class ValidationSession:
    """
    State of a single validation call.

    Owns a private copy of the rule table, the collected errors and the set of
    paths met while walking the value. A session runs once and is discarded.

    Usage:
        errors = ValidationSession({"user.name": ["required"]}).run(payload)
    """

    def __init__(
        self,
        rules: Optional[RulesInput] = None,
        *,
        registry: Optional[RuleRegistry] = None,
        config: Optional[ValidationConfig] = None,
    ):
        self.config = config or load_config()
        self.registry = registry if registry is not None else get_registry()
        self.rules: Rules = copy_rules(rules, self.config)
        self.errors: Errors = {}
        self.visited: Set[str] = set()
        self._done = False

    def run(self, value: Any) -> Errors:
        """
        Validate `value` and return the errors keyed by path (empty when valid).

        Raises:
            ConfigurationException: On unknown rules or unsupported value shapes.
        """
        if self._done:
            raise RuntimeError("A validation session can only run once")
        self._done = True

        merge_annotations(self.rules, value, "", self.config)
        logging.debug(f"[VALDN] Validating with {len(self.rules)} rule entr(ies)")

        self.visited.add("")
        self._validate_by_kind("", value)
        self._validate_missing_required_fields()

        if self.errors:
            logging.debug(f"[VALDN] Validation failed at {len(self.errors)} path(s): {sorted(self.errors)}")
        return self.errors

    def _add_error(self, path: str, message: str) -> None:
        self.errors.setdefault(path, message)

    def _validate_by_kind(self, path: str, value: Any) -> None:
        kind = classify(value, path)
        if kind.is_composite:
            self._validate_composite(path, value, kind)
        else:
            self._validate_scalar(path, value)

    def _validate_scalar(self, path: str, value: Any) -> None:
        message = evaluate(path, value, resolve_rules(self.rules, path), registry=self.registry)
        if message is not None:
            self._add_error(path, message)

    def _validate_composite(self, path: str, value: Any, kind: ValueKind) -> None:
        # The container is checked as a whole first; children of an invalid
        # container are neither validated nor marked as visited.
        message = evaluate(path, value, resolve_rules(self.rules, path), registry=self.registry)
        if message is not None:
            self._add_error(path, message)
            return

        for name, child in iter_children(value, kind, self.config):
            child_path = join_path(path, name)
            self.visited.add(child_path)
            self._validate_by_kind(child_path, child)

    @staticmethod
    def _has_failed_ancestor(path: str, failed: Set[str]) -> bool:
        while path:
            path = parent_path(path)
            if path in failed:
                return True
        return False

    def _validate_missing_required_fields(self) -> None:
        # Only containers that failed during traversal hide their fields.
        failed = set(self.errors)
        for path in self.rules:
            if is_wildcard_path(path) or path in self.visited or path in self.errors:
                continue
            if self._has_failed_ancestor(path, failed):
                continue
            for expression in self.rules[path]:
                rule_name, param = split_rule(expression)
                if rule_name == REQUIRED_RULE:
                    self._add_error(path, self._missing_message(path, expression, param))
                    break

    def _missing_message(self, path: str, expression: str, param: str) -> str:
        if self.registry.has(REQUIRED_RULE):
            message = evaluate(path, None, [expression], registry=self.registry)
            if message is not None:
                return message
        return get_error_message(REQUIRED_RULE, param, path)
