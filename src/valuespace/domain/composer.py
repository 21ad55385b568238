"""Rule composer: expands a rule and its prerequisites into a chain.

The prerequisite graph is walked once at construction. Unknown edges and
cycles are rejected there, so ``build`` itself can never fail.

INVARIANT: in every chain, a prerequisite's checks precede the checks of
the rule that depends on it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from valuespace.domain.checks import Check
from valuespace.domain.datatypes import DatatypeFamily, ValueKind, family_for
from valuespace.domain.errors import RuleGraphError
from valuespace.domain.rules import RULES, ConstraintRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationChain:
    """Ordered, prerequisite-expanded checks for one datatype identifier.

    An unconstrained identifier yields an empty chain with ``kind`` None.
    """

    identifier: str
    checks: tuple[Check, ...] = ()
    family: DatatypeFamily | None = None
    kind: ValueKind | None = None

    def __len__(self) -> int:
        return len(self.checks)

    def __iter__(self) -> Iterator[Check]:
        return iter(self.checks)

    @property
    def messages(self) -> list[str]:
        return [check.message for check in self.checks]


class RuleComposer:
    """Resolve identifiers to validation chains over a rule table."""

    def __init__(self, rules: Mapping[DatatypeFamily, ConstraintRule] = RULES) -> None:
        self._rules = rules
        expanded: dict[DatatypeFamily, tuple[Check, ...]] = {}
        for family in rules:
            expanded[family] = self._expand(family, ())
        self._expanded = MappingProxyType(expanded)
        logger.debug("Composed %d validation chains", len(expanded))

    def _expand(self, family: DatatypeFamily, path: tuple[str, ...]) -> tuple[Check, ...]:
        if family in path:
            cycle = (*path, family)
            msg = f"Prerequisite cycle: {' -> '.join(cycle)}"
            raise RuleGraphError(msg, cycle)
        rule = self._rules.get(family)
        if rule is None:
            msg = f"Unknown prerequisite rule '{family}' (required by {path[-1]})"
            raise RuleGraphError(msg, (*path, family))
        if rule.prerequisite is None:
            return rule.checks
        return self._expand(rule.prerequisite, (*path, family)) + rule.checks

    def build(self, identifier: str) -> ValidationChain:
        """Return the chain for *identifier*; empty when it is not constrained."""
        family = family_for(identifier)
        if family is None or family not in self._expanded:
            return ValidationChain(identifier)
        return ValidationChain(
            identifier,
            self._expanded[family],
            family=family,
            kind=self._rules[family].kind,
        )
