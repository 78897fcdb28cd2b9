# ==============================================
# Column Types (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of classification:
#   which SQL type a JSON field gets, and the field it belongs to.
#
# WHY THIS FILE EXISTS:
#   Separating data classes from logic keeps the TypeDetector clean.
#   The DDLGenerator only needs these classes to render columns.
#
# ENUMS:
# ------
# - ColumnType(Enum): INT, LONG, CHAR1, BOOLEAN, DATE, DATETIME, VARCHAR
#     Closed vocabulary. Only VARCHAR carries a width.
#
# CLASSES:
# --------
# - InferredType (frozen dataclass)
#     column_type: ColumnType
#     width: int | None          → only for VARCHAR
#     sql -> str                 → "INT", "CHAR(1)", "VARCHAR(15)", ...
#
# - SchemaField (frozen dataclass)
#     raw_name: str              → key as it appears in the JSON document
#     clean_name: str            → sanitized SQL identifier
#     inferred_type: InferredType
#     column_definition -> str   → "<clean_name> <sql>"
#
# ==============================================

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Dict, Any


class ColumnType(Enum):
    """
    Enumeration of the SQL column types the classifier can emit.

    The value is the SQL keyword; VARCHAR gets its width appended
    by InferredType.sql.
    """
    INT = "INT"
    LONG = "LONG"
    CHAR1 = "CHAR(1)"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATETIME = "DATETIME"
    VARCHAR = "VARCHAR"


@dataclass(frozen=True)
class InferredType:
    """
    A column type together with its width.

    Exactly one InferredType is produced per field.
    """

    column_type: ColumnType
    width: Optional[int] = None

    def __post_init__(self):
        if self.column_type is ColumnType.VARCHAR and self.width is None:
            raise ValueError("VARCHAR requires a width")
        if self.column_type is not ColumnType.VARCHAR and self.width is not None:
            raise ValueError(f"{self.column_type.name} does not take a width")

    @classmethod
    def varchar(cls, width: int) -> "InferredType":
        return cls(ColumnType.VARCHAR, width)

    @property
    def sql(self) -> str:
        """SQL text for this type, e.g. "VARCHAR(15)"."""
        if self.column_type is ColumnType.VARCHAR:
            return f"VARCHAR({self.width})"
        return self.column_type.value

    def __str__(self) -> str:
        return self.sql


@dataclass(frozen=True)
class SchemaField:
    """
    One top-level JSON field mapped to a SQL column.

    Created by TypeDetector.classify_field and consumed right away by
    the DDLGenerator; never stored.
    """

    raw_name: str
    clean_name: str
    inferred_type: InferredType

    @property
    def column_definition(self) -> str:
        return f"{self.clean_name} {self.inferred_type.sql}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the field for logging or JSON output.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "raw_name": self.raw_name,
            "clean_name": self.clean_name,
            "column_type": self.inferred_type.column_type.name,
            "width": self.inferred_type.width,
            "sql_type": self.inferred_type.sql,
        }
