# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   The few failures that callers must be able to tell apart
#   from a successful DDL result.
#
# CLASSES:
# --------
# - JsonDDLError            → base class for everything raised here
# - MalformedJsonError      → document is not valid JSON (alias: ParseError)
# - MissingTableNameError   → no table name could be resolved for a record
#
# Classification and identifier cleaning never raise: every value
# ends in a concrete column type and every name in some string.
#
# ==============================================


class JsonDDLError(Exception):
    """Base class for jsonddl errors."""


class MalformedJsonError(JsonDDLError, ValueError):
    """
    Raised when the input text cannot be parsed as JSON.

    The underlying json.JSONDecodeError is kept as __cause__.
    """

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


ParseError = MalformedJsonError


class MissingTableNameError(JsonDDLError):
    """Raised when neither a table name nor a filename is available."""
