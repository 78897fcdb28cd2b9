# ==============================================
# JsonToDDLProcessor — record in, routed record out
# ==============================================
#
# PURPOSE:
#   The seam between a host data-flow framework and the DDL
#   generator. A host hands over a record (content + attributes),
#   gets back the record routed to SUCCESS or FAILURE.
#
# FLOW:
#
#   FlowRecord ──▶ resolve table name / table type
#                   │
#                   ▼
#                 decode content (UTF-8)
#                   │
#                   ▼
#                 DDLGenerator.generate()
#                   │
#          ┌────────┴─────────┐
#          ▼                  ▼
#      SUCCESS             FAILURE
#   attributes[ddl]     attributes["ddl.error"]
#
# TABLE NAME:
# -----------
#   1. table_name argument
#   2. ProcessorConfig.table_name        (both trimmed)
#   3. record.attributes["filename"]
#   none of these → FAILURE
#
# A record whose DDL could not be built is never routed to SUCCESS.
#
# DATA CLASSES:
# -------------
# - FlowRecord:    content, attributes
# - ProcessResult: relationship, record, ddl, error
#
# ==============================================

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Union

from jsonddl.config import AppConfig, InferenceConfig, ProcessorConfig
from jsonddl.ddl.ddl_generator import DDLGenerator
from jsonddl.errors import MalformedJsonError, MissingTableNameError

logger = logging.getLogger(__name__)

FILENAME_ATTRIBUTE = "filename"
ERROR_ATTRIBUTE = "ddl.error"


class Relationship(Enum):
    """Where a processed record goes next."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class FlowRecord:
    content: Union[str, bytes]
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass
class ProcessResult:
    relationship: Relationship
    record: FlowRecord
    ddl: Optional[str] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.relationship is Relationship.SUCCESS


class JsonToDDLProcessor:
    """
    Generates DDL for incoming records and routes them.

    Configuration is passed in; the processor keeps nothing
    between records.
    """

    def __init__(
        self,
        config: Optional[ProcessorConfig] = None,
        inference: Optional[InferenceConfig] = None,
        generator: Optional[DDLGenerator] = None
    ):
        """
        Initialize the processor.

        Args:
            config: Table name / type defaults and the DDL attribute name
            inference: Classifier settings for the default generator
            generator: Pre-built generator (overrides inference)
        """
        self.config = config or ProcessorConfig()
        self.generator = generator or DDLGenerator(inference)

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "JsonToDDLProcessor":
        return cls(config=app_config.processor, inference=app_config.inference)

    def resolve_table_name(
        self,
        record: FlowRecord,
        table_name: Optional[str] = None
    ) -> str:
        """
        Pick the table name for a record.

        Raises:
            MissingTableNameError: If no name can be found
        """
        for candidate in (table_name, self.config.table_name):
            if candidate is not None and candidate.strip():
                return candidate.strip()

        filename = record.attributes.get(FILENAME_ATTRIBUTE)
        if filename:
            return filename
        raise MissingTableNameError("No table name configured and record has no filename")

    def process(
        self,
        record: FlowRecord,
        table_name: Optional[str] = None,
        table_type: Optional[str] = None
    ) -> ProcessResult:
        """
        Generate DDL for one record and route it.

        Args:
            record: Incoming record; its content is the JSON document
            table_name: Overrides the configured table name
            table_type: Overrides the configured table type

        Returns:
            ProcessResult with a copy of the record carrying either the
            DDL attribute (SUCCESS) or the error attribute (FAILURE)
        """
        resolved_type = table_type if table_type is not None else self.config.table_type

        try:
            resolved_name = self.resolve_table_name(record, table_name)
            content = record.content
            if isinstance(content, bytes):
                content = content.decode("utf-8")
            ddl = self.generator.generate(resolved_name, content, resolved_type)
        except (MalformedJsonError, MissingTableNameError, UnicodeDecodeError) as e:
            logger.error("Unable to generate DDL for record %s: %s",
                         record.attributes.get(FILENAME_ATTRIBUTE, "<unnamed>"), e)
            failed = replace(record, attributes={**record.attributes, ERROR_ATTRIBUTE: str(e)})
            return ProcessResult(Relationship.FAILURE, failed, error=str(e))

        routed = replace(record, attributes={**record.attributes, self.config.ddl_attribute: ddl})
        return ProcessResult(Relationship.SUCCESS, routed, ddl=ddl)

    def process_batch(self, records: List[FlowRecord]) -> List[ProcessResult]:
        """Process records one by one; a failure does not stop the batch."""
        results = [self.process(record) for record in records]
        failures = sum(1 for result in results if not result.succeeded)
        logger.info("Processed %d records (%d failed)", len(results), failures)
        return results
