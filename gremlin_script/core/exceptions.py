"""
Custom exceptions for gremlin-script.

Every failure raised while building a script is a contract violation on the
caller's side. A single exception type carries an explicit ErrorKind so
callers (and the HTTP layer) can tell the failure kinds apart without
catching a hierarchy of classes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Kinds of failure raised by the compiler, assembler and container."""

    UNSUPPORTED_OPERATOR = "unsupported_operator"
    UNSUPPORTED_SCOPE = "unsupported_scope"
    TYPE_MISMATCH = "type_mismatch"
    UNSUPPORTED_VALUE = "unsupported_value"
    MALFORMED_CRITERIA = "malformed_criteria"


class GremlinScriptError(Exception):
    """Raised when a criteria tree, entity or element cannot be handled."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with failure kind, message and optional detail.

        Args:
            kind: Which contract was violated
            message: Human-readable error description
            detail: Offending values (operator tag, value type, ...)
        """
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detail = detail or {}

    def __repr__(self) -> str:
        return f"GremlinScriptError({self.kind.name}, {self.message!r})"
