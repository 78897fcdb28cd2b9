# ==============================================
# Tests for Column Type data classes
# ==============================================

import pytest

from jsonddl.analysis.column_type import ColumnType, InferredType, SchemaField


class TestInferredType:
    """SQL rendering and width rules."""

    @pytest.mark.parametrize("column_type, sql", [
        (ColumnType.INT, "INT"),
        (ColumnType.LONG, "LONG"),
        (ColumnType.CHAR1, "CHAR(1)"),
        (ColumnType.BOOLEAN, "BOOLEAN"),
        (ColumnType.DATE, "DATE"),
        (ColumnType.DATETIME, "DATETIME"),
    ])
    def test_fixed_types(self, column_type, sql):
        assert InferredType(column_type).sql == sql

    def test_varchar_width(self):
        assert InferredType.varchar(15).sql == "VARCHAR(15)"
        assert str(InferredType.varchar(50)) == "VARCHAR(50)"

    def test_varchar_requires_width(self):
        with pytest.raises(ValueError):
            InferredType(ColumnType.VARCHAR)

    def test_fixed_type_rejects_width(self):
        with pytest.raises(ValueError):
            InferredType(ColumnType.INT, 4)


class TestSchemaField:
    def test_column_definition_and_dict(self):
        schema_field = SchemaField("user.name", "username", InferredType.varchar(15))
        assert schema_field.column_definition == "username VARCHAR(15)"
        assert schema_field.to_dict() == {
            "raw_name": "user.name",
            "clean_name": "username",
            "column_type": "VARCHAR",
            "width": 15,
            "sql_type": "VARCHAR(15)",
        }
