# ==============================================
# jsonddl — CREATE TABLE statements from JSON
# ==============================================
#
# Package Structure:
#
# jsonddl/
# ├── normalization/    # JSON keys → identifiers, JSON values → column types
# ├── analysis/         # ColumnType / InferredType / SchemaField data classes
# ├── ddl/              # CREATE TABLE assembly
# ├── processor.py      # Host adapter: record in → success / failure
# ├── config.py         # Configuration management
# ├── errors.py         # Exception hierarchy
# ├── logging_config.py # Logging setup
# └── cli.py            # Command line entry point
#
# ==============================================

from jsonddl.analysis.column_type import ColumnType, InferredType, SchemaField
from jsonddl.ddl.ddl_generator import DDLGenerator, generate_ddl
from jsonddl.errors import JsonDDLError, MalformedJsonError, MissingTableNameError, ParseError
from jsonddl.normalization.identifier_cleaner import IdentifierCleaner, clean_name
from jsonddl.normalization.type_detector import TypeDetector
from jsonddl.processor import FlowRecord, JsonToDDLProcessor, ProcessResult, Relationship

__version__ = "0.1.0"

__all__ = [
    "ColumnType",
    "InferredType",
    "SchemaField",
    "DDLGenerator",
    "generate_ddl",
    "JsonDDLError",
    "MalformedJsonError",
    "MissingTableNameError",
    "ParseError",
    "IdentifierCleaner",
    "clean_name",
    "TypeDetector",
    "FlowRecord",
    "JsonToDDLProcessor",
    "ProcessResult",
    "Relationship",
]
