# ==============================================
# DDLGenerator
# ==============================================
#
# PURPOSE:
#   Parse one JSON document, classify each top-level field and
#   render a CREATE TABLE statement.
#
# CLASS: DDLGenerator
# -------------------
#   Stateless apart from its TypeDetector. Same input → same output.
#
#   Methods:
#   --------
#   - generate(table_name, json_text, table_type="") -> str
#       Parse + infer + render. Raises MalformedJsonError on bad JSON.
#
#   - infer_schema(json_text) -> list[SchemaField]
#       Parse + infer only, fields in document order.
#
#   - render(table_name, fields) -> str
#       Render only.
#
# OUTPUT FORMAT:
# --------------
#   "CREATE TABLE people ( id INT, name VARCHAR(15), active BOOLEAN  ) "
#   "CREATE TABLE empty (  ) "            ← no fields
#
#   Each column is written as "<name> <type>, ". After the last column
#   only the comma is dropped, so a space stays in front of " ) ".
#
# table_type is accepted but not used for type mapping yet: every
# target gets the same type vocabulary.
#
# ==============================================

import json
import logging
from typing import Any, Dict, List, Optional

from jsonddl.analysis.column_type import SchemaField
from jsonddl.config import InferenceConfig
from jsonddl.errors import MalformedJsonError
from jsonddl.normalization.type_detector import TypeDetector

logger = logging.getLogger(__name__)

CREATE_TABLE = "CREATE TABLE "
COLUMN_SEPARATOR = ", "


class DDLGenerator:
    """
    Builds CREATE TABLE DDL from a sample JSON document.

    Only top-level fields become columns; nested objects and arrays
    are typed by their JSON text like any other value.
    """

    def __init__(
        self,
        config: Optional[InferenceConfig] = None,
        type_detector: Optional[TypeDetector] = None
    ):
        """
        Initialize the generator.

        Args:
            config: Inference settings, used when no detector is given
            type_detector: Pre-built detector to reuse
        """
        self.type_detector = type_detector or TypeDetector(config)

    def parse_document(self, json_text: str) -> Dict[str, Any]:
        """
        Parse JSON text into its top-level fields.

        Args:
            json_text: The document

        Returns:
            Field name → value, in document order. Empty if the top
            level is not an object.

        Raises:
            MalformedJsonError: If json_text is not valid JSON
        """
        try:
            document = json.loads(json_text)
        # Oversized integer literals raise a plain ValueError, deep nesting a RecursionError
        except (ValueError, TypeError, RecursionError) as e:
            position = getattr(e, "pos", -1)
            raise MalformedJsonError(f"Unable to parse JSON: {e}", position) from e

        if not isinstance(document, dict):
            logger.warning(
                "Top-level JSON value is %s, not an object; no columns inferred",
                type(document).__name__
            )
            return {}
        return document

    def infer_schema(self, json_text: str) -> List[SchemaField]:
        """
        Infer one SchemaField per top-level field.

        Args:
            json_text: The document

        Returns:
            Fields in the order they appear in the document

        Raises:
            MalformedJsonError: If json_text is not valid JSON
        """
        document = self.parse_document(json_text)
        return [
            self.type_detector.classify_field(name, value)
            for name, value in document.items()
        ]

    def render(self, table_name: str, fields: List[SchemaField]) -> str:
        """
        Render the CREATE TABLE statement for already inferred fields.

        Args:
            table_name: Table name, used as given
            fields: Inferred fields

        Returns:
            The DDL text
        """
        columns = "".join(
            f"{schema_field.column_definition}{COLUMN_SEPARATOR}"
            for schema_field in fields
        )
        if columns:
            # Drop the last comma, keep its trailing space
            columns = columns[:-len(COLUMN_SEPARATOR)] + " "
        return f"{CREATE_TABLE}{table_name} ( {columns} ) "

    def generate(self, table_name: str, json_text: str, table_type: str = "") -> str:
        """
        Build the CREATE TABLE statement for a JSON document.

        Args:
            table_name: Table name, used as given
            json_text: The document
            table_type: Target database label (hive, mysql, ...). Recorded
                        only; the type vocabulary is the same for all.

        Returns:
            The DDL text

        Raises:
            MalformedJsonError: If json_text is not valid JSON
        """
        fields = self.infer_schema(json_text)
        ddl = self.render(table_name, fields)
        logger.info(
            "Generated DDL for table %s (%d columns, table type %r)",
            table_name, len(fields), table_type
        )
        return ddl


def generate_ddl(table_name: str, json_text: str, table_type: str = "") -> str:
    """Shortcut for DDLGenerator().generate(...)."""
    return DDLGenerator().generate(table_name, json_text, table_type)
