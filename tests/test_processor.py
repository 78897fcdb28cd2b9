# ==============================================
# Tests for JsonToDDLProcessor
# ==============================================
#
# Routing is an explicit branch: a record that did not get DDL is
# never routed to SUCCESS.
# ==============================================

import pytest

from jsonddl.config import AppConfig, InferenceConfig, ProcessorConfig
from jsonddl.processor import (
    ERROR_ATTRIBUTE,
    FlowRecord,
    JsonToDDLProcessor,
    Relationship,
)


@pytest.fixture
def processor():
    return JsonToDDLProcessor(ProcessorConfig(table_type="hive"))


class TestRouting:
    """SUCCESS vs FAILURE."""

    def test_success_sets_ddl_attribute(self, processor, sample_document):
        record = FlowRecord(sample_document, {"filename": "people.json"})
        result = processor.process(record, table_name="people")

        assert result.relationship is Relationship.SUCCESS
        assert result.succeeded
        assert result.error is None
        assert result.record.attributes["generatedddl"] == result.ddl
        assert result.ddl.startswith("CREATE TABLE people (")
        assert result.record.attributes["filename"] == "people.json"

    def test_input_record_not_modified(self, processor, sample_document):
        record = FlowRecord(sample_document, {"filename": "people.json"})
        processor.process(record, table_name="people")
        assert record.attributes == {"filename": "people.json"}

    def test_malformed_json_routes_to_failure(self, processor):
        record = FlowRecord("{not json", {"filename": "broken.json"})
        result = processor.process(record)

        assert result.relationship is Relationship.FAILURE
        assert not result.succeeded
        assert result.ddl is None
        assert "generatedddl" not in result.record.attributes
        assert "Unable to parse JSON" in result.record.attributes[ERROR_ATTRIBUTE]
        assert result.error == result.record.attributes[ERROR_ATTRIBUTE]

    @pytest.mark.parametrize("content", [
        '{"n": 1' + "0" * 5000 + "}",
        '{"a": ' + "[" * 100000 + "]" * 100000 + "}",
    ])
    def test_unparseable_numbers_and_nesting_route_to_failure(self, processor, content):
        result = processor.process(FlowRecord(content, {"filename": "odd.json"}))
        assert result.relationship is Relationship.FAILURE
        assert "Unable to parse JSON" in result.record.attributes[ERROR_ATTRIBUTE]

    def test_invalid_utf8_routes_to_failure(self, processor):
        result = processor.process(FlowRecord(b"\xff\xfe{", {"filename": "x.json"}))
        assert result.relationship is Relationship.FAILURE

    def test_bytes_content_decoded(self, processor):
        result = processor.process(FlowRecord('{"city": "Zürich"}'.encode("utf-8")), table_name="c")
        assert result.ddl == "CREATE TABLE c ( city VARCHAR(18)  ) "

    def test_custom_ddl_attribute(self, sample_document):
        processor = JsonToDDLProcessor(ProcessorConfig(table_name="people", ddl_attribute="ddl"))
        result = processor.process(FlowRecord(sample_document))
        assert "ddl" in result.record.attributes


class TestTableName:
    """Name resolution order: argument, config, filename."""

    def test_argument_is_trimmed(self, processor, sample_document):
        result = processor.process(FlowRecord(sample_document), table_name="  people  ")
        assert result.ddl.startswith("CREATE TABLE people ( ")

    def test_config_name_used(self, sample_document):
        processor = JsonToDDLProcessor(ProcessorConfig(table_name=" simple "))
        result = processor.process(FlowRecord(sample_document, {"filename": "other.json"}))
        assert result.ddl.startswith("CREATE TABLE simple ( ")

    def test_falls_back_to_filename(self, processor, sample_document):
        result = processor.process(FlowRecord(sample_document, {"filename": "simple.json"}))
        assert result.ddl.startswith("CREATE TABLE simple.json ( ")

    def test_blank_name_falls_back_to_filename(self, processor, sample_document):
        result = processor.process(FlowRecord(sample_document, {"filename": "f"}), table_name="   ")
        assert result.ddl.startswith("CREATE TABLE f ( ")

    def test_no_name_routes_to_failure(self, processor, sample_document):
        result = processor.process(FlowRecord(sample_document))
        assert result.relationship is Relationship.FAILURE
        assert "No table name" in result.error


class TestConfigWiring:
    """Processor built from AppConfig."""

    def test_from_app_config(self, sample_document):
        app_config = AppConfig(
            inference=InferenceConfig(padding_factor=0),
            processor=ProcessorConfig(table_name="people"),
        )
        processor = JsonToDDLProcessor.from_app_config(app_config)
        result = processor.process(FlowRecord(sample_document))
        assert "name VARCHAR(3)" in result.ddl

    def test_batch_keeps_going_after_failure(self, processor, fixtures_dir):
        records = [
            FlowRecord((fixtures_dir / name).read_bytes(), {"filename": name})
            for name in ["simple.json", "not_json.txt", "weather.json"]
        ]
        results = processor.process_batch(records)
        assert [r.relationship for r in results] == [
            Relationship.SUCCESS, Relationship.FAILURE, Relationship.SUCCESS
        ]
