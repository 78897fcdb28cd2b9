# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - fixtures_dir      → path of tests/fixtures
# - inference_config  → default InferenceConfig
# - detector          → TypeDetector with default config
# - generator         → DDLGenerator with default config
# - sample_document   → the small people document as text
# - clean_config      → forgets the cached AppConfig and JSONDDL_* env vars
# - reset_logging     → (autouse) removes the handler setup_logging adds
#
# ==============================================

import json
import logging
from pathlib import Path

import pytest

from jsonddl.config import InferenceConfig, reset_config
from jsonddl.ddl.ddl_generator import DDLGenerator
from jsonddl.normalization.type_detector import TypeDetector

FIXTURES_DIR = Path(__file__).parent / "fixtures"

CONFIG_ENV_VARS = [
    "JSONDDL_PADDING_FACTOR",
    "JSONDDL_NULL_WIDTH",
    "JSONDDL_DATETIME_FORMATS",
    "JSONDDL_TABLE_NAME",
    "JSONDDL_TABLE_TYPE",
    "JSONDDL_DDL_ATTRIBUTE",
    "JSONDDL_LOG_LEVEL",
    "JSONDDL_REQUEST_TIMEOUT",
]


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def inference_config() -> InferenceConfig:
    return InferenceConfig()


@pytest.fixture
def detector(inference_config) -> TypeDetector:
    return TypeDetector(inference_config)


@pytest.fixture
def generator(inference_config) -> DDLGenerator:
    return DDLGenerator(inference_config)


@pytest.fixture
def sample_document() -> str:
    """The people record used throughout the docs."""
    return json.dumps({"id": 1, "name": "Bob", "active": "true"})


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so handlers never outlive a captured stream."""
    yield
    logger = logging.getLogger("jsonddl")
    for handler in list(logger.handlers):
        if handler.get_name() == "jsonddl-stream":
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_config(monkeypatch):
    """Start from an empty JSONDDL_* environment and no cached config."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
