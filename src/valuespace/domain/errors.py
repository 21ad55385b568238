"""Configuration errors for the fixed rule tables.

Bad input never raises: an unknown identifier or an out-of-space value is a
normal result. These exceptions signal a defect in the rule definitions
themselves and are raised only while the tables are being built.
"""

from __future__ import annotations


class ValueSpaceError(Exception):
    """Base class for valuespace errors."""


class RuleTableError(ValueSpaceError):
    """A rule or description table does not cover exactly the known families."""


class RuleGraphError(RuleTableError):
    """The prerequisite graph references an unknown rule or contains a cycle."""

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.path = path
