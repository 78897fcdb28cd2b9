# ==============================================
# ANALYSIS: column types
# ==============================================
#
# Data classes shared by the classifier and the DDL generator.
#
# Modules:
# --------
# - column_type.py → ColumnType, InferredType, SchemaField
#
# ==============================================

from .column_type import ColumnType, InferredType, SchemaField

__all__ = ["ColumnType", "InferredType", "SchemaField"]
