# ==============================================
# TypeDetector
# ==============================================
#
# PURPOSE:
#   Decide the SQL column type of one JSON value.
#
# HOW:
#   An ordered list of ClassificationRule(name, predicate, result).
#   Rules are evaluated top to bottom, the first match wins:
#
#     1. null                        → VARCHAR(null_width)
#     2. number fitting 32 bits      → INT
#     3. number fitting 64 bits      → LONG
#     4. text length <= 1            → CHAR(1)
#     5. "true"/"false", any case    → BOOLEAN
#     6. strict SQL date literal     → DATE
#     7. common date/time formats    → DATETIME
#     8. lenient RFC 822 date-time   → DATETIME
#     9. lenient mm/dd/yyyy HH:MM:SS → DATETIME
#    10. lenient yyyy-MM-dd          → DATE
#    11. anything else               → VARCHAR(len(text) + padding_factor)
#
#   Numbers come before text checks because every number also has a
#   text form. BOOLEAN comes before the date checks.
#
# "TEXT" OF A VALUE:
# ------------------
#   str          → itself
#   bool         → "true" / "false"
#   int / float  → JSON number text
#   dict / list  → compact JSON text
#
# VARCHAR width comes from the single value seen here; there is no
# widening across records.
#
# ==============================================

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from jsonddl.analysis.column_type import ColumnType, InferredType, SchemaField
from jsonddl.config import InferenceConfig
from .date_matchers import (
    LENIENT_DATE_MATCHER,
    RFC822_MATCHER,
    SLASH_DATETIME_MATCHER,
    is_sql_date,
    matches_any_format,
)
from .identifier_cleaner import IdentifierCleaner

logger = logging.getLogger(__name__)

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1

BOOLEAN_TEXTS = {"true", "false"}


@dataclass(frozen=True)
class ClassificationRule:
    """
    One step of the classification cascade.

    predicate(value, text) decides whether the rule applies;
    result(value, text) builds the InferredType when it does.
    """
    name: str
    predicate: Callable[[Any, str], bool]
    result: Callable[[Any, str], InferredType]


def _fixed(column_type: ColumnType) -> Callable[[Any, str], InferredType]:
    inferred = InferredType(column_type)
    return lambda value, text: inferred


def as_integer(value: Any) -> Optional[int]:
    """
    Integer value of a JSON number, if it has one without loss.

    Booleans and strings are never numbers here; floats count only
    when they are whole (2.0 → 2, 2.5 → None).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def as_text(value: Any) -> str:
    """Textual rendering used by every text-based rule."""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(value)


class TypeDetector:
    """
    Classifies JSON values into SQL column types.

    Holds no per-document state; one instance can serve any number
    of documents.
    """

    def __init__(
        self,
        config: Optional[InferenceConfig] = None,
        cleaner: Optional[IdentifierCleaner] = None
    ):
        """
        Initialize the detector and build its rule cascade.

        Args:
            config: Padding factor, null width and date formats.
                    Defaults to InferenceConfig().
            cleaner: Cleaner used by classify_field()
        """
        self.config = config or InferenceConfig()
        self.cleaner = cleaner or IdentifierCleaner()
        self.rules: List[ClassificationRule] = self._build_rules()

    def _build_rules(self) -> List[ClassificationRule]:
        null_type = InferredType.varchar(self.config.null_width)
        formats = tuple(self.config.datetime_formats)

        return [
            ClassificationRule(
                "null",
                lambda value, text: value is None,
                lambda value, text: null_type,
            ),
            ClassificationRule(
                "int32",
                lambda value, text: self._fits(value, INT32_MIN, INT32_MAX),
                _fixed(ColumnType.INT),
            ),
            ClassificationRule(
                "int64",
                lambda value, text: self._fits(value, INT64_MIN, INT64_MAX),
                _fixed(ColumnType.LONG),
            ),
            ClassificationRule(
                "single_char",
                lambda value, text: len(text) <= 1,
                _fixed(ColumnType.CHAR1),
            ),
            ClassificationRule(
                "boolean",
                lambda value, text: text.lower() in BOOLEAN_TEXTS,
                _fixed(ColumnType.BOOLEAN),
            ),
            ClassificationRule(
                "sql_date",
                lambda value, text: is_sql_date(text),
                _fixed(ColumnType.DATE),
            ),
            ClassificationRule(
                "common_datetime",
                lambda value, text: matches_any_format(text, formats),
                _fixed(ColumnType.DATETIME),
            ),
            ClassificationRule(
                "rfc822_datetime",
                lambda value, text: RFC822_MATCHER.matches(text),
                _fixed(ColumnType.DATETIME),
            ),
            ClassificationRule(
                "slash_datetime",
                lambda value, text: SLASH_DATETIME_MATCHER.matches(text),
                _fixed(ColumnType.DATETIME),
            ),
            ClassificationRule(
                "lenient_date",
                lambda value, text: LENIENT_DATE_MATCHER.matches(text),
                _fixed(ColumnType.DATE),
            ),
            ClassificationRule(
                "varchar",
                lambda value, text: True,
                lambda value, text: InferredType.varchar(len(text) + self.config.padding_factor),
            ),
        ]

    @staticmethod
    def _fits(value: Any, low: int, high: int) -> bool:
        number = as_integer(value)
        return number is not None and low <= number <= high

    def match_rule(self, value: Any) -> ClassificationRule:
        """
        Find the first rule that applies to a value.

        Args:
            value: Any JSON value (None, bool, int, float, str, dict, list)

        Returns:
            The winning ClassificationRule
        """
        return self._match(value, self._text_of(value))

    @staticmethod
    def _text_of(value: Any) -> str:
        return "" if value is None else as_text(value)

    def _match(self, value: Any, text: str) -> ClassificationRule:
        for rule in self.rules:
            if rule.predicate(value, text):
                return rule
        # The last rule always matches
        return self.rules[-1]

    def classify(self, value: Any) -> InferredType:
        """
        Infer the SQL column type of a JSON value.

        Args:
            value: Any JSON value

        Returns:
            InferredType, e.g. INT or VARCHAR(15)
        """
        text = self._text_of(value)
        return self._match(value, text).result(value, text)

    def classify_field(self, raw_name: str, value: Any) -> SchemaField:
        """
        Clean a field name and classify its value.

        Args:
            raw_name: Key as found in the JSON document
            value: The field's value

        Returns:
            SchemaField with clean name and inferred type
        """
        schema_field = SchemaField(
            raw_name=raw_name,
            clean_name=self.cleaner.clean(raw_name),
            inferred_type=self.classify(value),
        )
        logger.debug(
            "Field %r → %s %s",
            raw_name, schema_field.clean_name, schema_field.inferred_type.sql
        )
        return schema_field
