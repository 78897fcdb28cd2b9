# ==============================================
# IdentifierCleaner
# ==============================================
#
# PURPOSE:
#   Turn a raw JSON key into something usable as an unquoted
#   SQL column name.
#
# WHY THIS CLASS EXISTS:
#   JSON keys can contain anything: "user.name:1", "123abc",
#   "@timestamp". Those names would break the CREATE TABLE
#   statement, so every key goes through clean() first.
#
# CLASS: IdentifierCleaner
# ------------------------
#   Stateless utility class. Takes a raw field name, returns a clean one.
#
#   Methods:
#   --------
#   - clean(raw_name) -> str
#       Apply the cleaning steps in order. Never raises.
#
# RULES (applied in this order):
# ------------------------------
#   1. Strip the leading run of non-letters, once   ("123abc" → "abc")
#   2. Drop anything not a letter, digit or "_"     ("a-b c"  → "abc")
#   3. Drop residual ":" and "."                    (already gone after 2)
#
#   No letters at all → "" (accepted, not an error).
#   Only ASCII letters count as letters.
#
# ==============================================

import logging
import re
from typing import Any, List, Pattern, Tuple

logger = logging.getLogger(__name__)


class IdentifierCleaner:
    """
    Sanitizes JSON field names into SQL identifiers.

    clean() is total: odd input (None, numbers) is logged and
    yields an empty name instead of an exception.
    """

    LEADING_NON_LETTERS = re.compile(r"^[^A-Za-z]+")
    NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")
    RESIDUAL_SEPARATORS = re.compile(r"[:.]")

    STEPS: List[Tuple[Pattern, int]] = [
        (LEADING_NON_LETTERS, 1),
        (NON_IDENTIFIER_CHARS, 0),
        (RESIDUAL_SEPARATORS, 0),
    ]

    def clean(self, raw_name: Any) -> str:
        """
        Convert a raw field name to a SQL identifier.

        Args:
            raw_name: Key from the JSON document (e.g., "user.name:1")

        Returns:
            Cleaned name (e.g., "username1"), possibly empty
        """
        if not isinstance(raw_name, str):
            logger.warning(
                "Cannot clean non-string field name %r, using empty name",
                raw_name
            )
            return ""

        cleaned = raw_name
        for pattern, count in self.STEPS:
            cleaned = pattern.sub("", cleaned, count=count)

        if not cleaned and raw_name:
            logger.debug("Field name %r has no letters, cleaned to empty", raw_name)

        return cleaned


_default_cleaner = IdentifierCleaner()


def clean_name(raw_name: Any) -> str:
    """Shortcut for IdentifierCleaner().clean(raw_name)."""
    return _default_cleaner.clean(raw_name)
