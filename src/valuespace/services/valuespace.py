"""ValueSpaceService: engine operations and RDF literal validation.

Wraps :class:`~valuespace.domain.engine.ValidationEngine` in the
ServiceResult contract used by the CLI, and adds validation of typed
literals parsed by rdflib.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import rdflib
from rdflib import Graph, Literal

from valuespace.config.settings import ValueSpaceSettings
from valuespace.domain.datatypes import CONSTRAINED_IDENTIFIERS, family_for
from valuespace.domain.emitter import emit_guards, required_imports
from valuespace.domain.engine import ValidationEngine, ValidationOutcome
from valuespace.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

VIOLATION = "VALUE_SPACE_VIOLATION"
NOT_FOUND = "NOT_FOUND"
PARSE_ERROR = "PARSE_ERROR"
INVALID_ARGUMENT = "INVALID_ARGUMENT"


@contextmanager
def raw_literals() -> Iterator[None]:
    """Keep the lexical form of typed literals exactly as written while parsing.

    rdflib otherwise rewrites ``xsd:token``, ``xsd:normalizedString`` and other
    literals into canonical form, which hides the violations being checked.
    """
    previous = rdflib.NORMALIZE_LITERALS
    rdflib.NORMALIZE_LITERALS = False
    try:
        yield
    finally:
        rdflib.NORMALIZE_LITERALS = previous


class ValueSpaceService:
    """Service-layer facade over the validation engine.

    Usage::

        svc = ValueSpaceService(settings)
        result = svc.validate_value(XSD_NS + "token", " padded")
        result.error.message  # first violated constraint
    """

    def __init__(
        self,
        settings: ValueSpaceSettings | None = None,
        engine: ValidationEngine | None = None,
    ) -> None:
        self._settings = settings or ValueSpaceSettings()
        self._engine = engine or ValidationEngine(
            coerce_lexical=self._settings.validation.coerce_lexical
        )

    # ── Datatype inspection ───────────────────────────────────────────

    def list_types(self) -> ServiceResult:
        """List every constrained datatype identifier with its family."""
        items = [
            {"identifier": identifier, "family": str(family_for(identifier))}
            for identifier in CONSTRAINED_IDENTIFIERS
        ]
        return ServiceResult(ok=True, op="list_types", data={"items": items, "count": len(items)})

    def inspect_type(self, identifier: str) -> ServiceResult:
        """Report whether *identifier* is constrained, with its description and checks."""
        chain = self._engine.checks_for(identifier)
        family = chain.family
        return ServiceResult(
            ok=True,
            op="inspect_type",
            data={
                "identifier": identifier,
                "constrained": self._engine.is_constrained(identifier),
                "family": str(family) if family is not None else None,
                "kind": str(chain.kind) if chain.kind is not None else None,
                "description": self._engine.describe(identifier),
                "checks": chain.messages,
            },
        )

    # ── Validation ────────────────────────────────────────────────────

    def validate_value(
        self, identifier: str, value: Any, *, lexical: bool | None = None
    ) -> ServiceResult:
        """Validate a single value. A violation is a failed result.

        Pass ``lexical=True`` when *value* is a lexical form read from text
        (command line, payload); otherwise the ``[validation]`` setting applies.
        """
        outcome = self._engine.validate(identifier, value, lexical=lexical)
        return self._outcome_result("validate", outcome, value)

    def validate_literal(self, literal: Literal) -> ServiceResult:
        """Validate an rdflib typed literal by its datatype and lexical form.

        Plain and language-tagged literals have no datatype and are always
        valid here. Build literals with ``normalize=False`` (or inside
        :func:`raw_literals`); a normalized literal has already had its
        whitespace rewritten and can no longer show a textual violation.
        """
        if literal.datatype is None:
            return ServiceResult(
                ok=True,
                op="validate_literal",
                data={"identifier": None, "value": str(literal), "valid": True},
            )
        outcome = self._engine.validate(str(literal.datatype), str(literal), lexical=True)
        return self._outcome_result("validate_literal", outcome, str(literal))

    def validate_graph(self, path: Path, fmt: str | None = None) -> ServiceResult:
        """Parse an RDF document and validate every typed literal object.

        Args:
            path: File to parse.
            fmt: rdflib format name; guessed from the file extension if None.
        """
        op = "validate_graph"
        if not path.is_file():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=NOT_FOUND, message=f"No such file: {path}"),
            )

        graph = Graph()
        try:
            with raw_literals():
                graph.parse(source=str(path), format=fmt)
        except Exception as exc:
            logger.debug("Failed to parse %s", path, exc_info=True)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=PARSE_ERROR,
                    message=f"Could not parse {path}: {exc}",
                    detail={"path": str(path), "format": fmt},
                ),
            )

        checked = 0
        violations: list[dict[str, Any]] = []
        for subject, predicate, obj in graph:
            if not isinstance(obj, Literal) or obj.datatype is None:
                continue
            identifier = str(obj.datatype)
            if not self._engine.is_constrained(identifier):
                continue
            checked += 1
            outcome = self._engine.validate(identifier, str(obj), lexical=True)
            if not outcome.valid:
                violations.append(
                    {
                        "subject": str(subject),
                        "predicate": str(predicate),
                        "datatype": identifier,
                        "value": str(obj),
                        "message": outcome.violation,
                    }
                )

        violations.sort(key=lambda v: (v["subject"], v["predicate"], v["value"]))
        data = {
            "path": str(path),
            "triples": len(graph),
            "checked": checked,
            "violation_count": len(violations),
        }
        logger.debug("Validated %d constrained literals in %s", checked, path)
        if violations:
            noun = "literal" if len(violations) == 1 else "literals"
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code=VIOLATION,
                    message=f"{len(violations)} {noun} outside their value space",
                    detail={"violations": violations},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)

    # ── Code generation ───────────────────────────────────────────────

    def emit_guard(self, identifier: str, variable: str | None = None) -> ServiceResult:
        """Render the validation chain for *identifier* as Python guard source."""
        emit = self._settings.emit
        chain = self._engine.checks_for(identifier)
        try:
            source = emit_guards(
                chain,
                variable=variable or emit.variable,
                exception=emit.exception,
                indent=emit.indent,
            )
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op="emit_guard",
                error=ServiceError(code=INVALID_ARGUMENT, message=str(exc)),
            )
        warnings: list[str] = []
        if not chain:
            warnings.append(f"{identifier} is not constrained; no guards emitted")
        return ServiceResult(
            ok=True,
            op="emit_guard",
            data={
                "identifier": identifier,
                "imports": required_imports(chain),
                "source": source,
                "check_count": len(chain),
            },
            warnings=warnings,
        )

    # ── Helpers ───────────────────────────────────────────────────────

    @staticmethod
    def _outcome_result(op: str, outcome: ValidationOutcome, value: Any) -> ServiceResult:
        data = {"identifier": outcome.identifier, "value": value, "valid": outcome.valid}
        if outcome.valid:
            return ServiceResult(ok=True, op=op, data=data)
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            error=ServiceError(
                code=VIOLATION,
                message=outcome.violation or "Value is outside its value space",
                detail={"identifier": outcome.identifier, "value": value},
            ),
        )
