# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file
#   and hand typed config objects to the generator, processor and CLI.
#   Nothing in the inference core reads this module directly: config
#   objects are always passed in explicitly.
#
# CLASSES:
# --------
# - InferenceConfig (dataclass)
#     padding_factor: int            (default 12)  → extra VARCHAR headroom
#     null_width: int                (default 50)  → VARCHAR width for nulls
#     datetime_formats: tuple[str]   (default DEFAULT_DATETIME_FORMATS)
#
# - ProcessorConfig (dataclass)
#     table_name: str | None         (default None → use record filename)
#     table_type: str                (default "")
#     ddl_attribute: str             (default "generatedddl")
#
# - AppConfig (dataclass)
#     inference: InferenceConfig
#     processor: ProcessorConfig
#     log_level: str                 (default "INFO")
#     request_timeout: float         (default 10.0)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the cached singleton (tests, reloading .env).
#
# USAGE:
# ------
#   from jsonddl.config import get_config
#   config = get_config()
#   print(config.inference.padding_factor)
#   print(config.processor.ddl_attribute)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Formats probed by the "common date/time" pass of the classifier
DEFAULT_DATETIME_FORMATS: Tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%d/%m/%Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%m-%d-%Y",
    "%a, %d %b %Y %H:%M:%S %z",
)


@dataclass
class InferenceConfig:
    """Knobs for the value classifier."""
    padding_factor: int = 12
    null_width: int = 50
    datetime_formats: Tuple[str, ...] = DEFAULT_DATETIME_FORMATS


@dataclass
class ProcessorConfig:
    """Properties of the record processor."""
    table_name: Optional[str] = None
    table_type: str = ""
    ddl_attribute: str = "generatedddl"


@dataclass
class AppConfig:
    """Main application configuration."""
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    processor: ProcessorConfig = field(default_factory=ProcessorConfig)
    log_level: str = "INFO"
    request_timeout: float = 10.0


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _parse_formats(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_DATETIME_FORMATS
    formats = tuple(part.strip() for part in raw.split(";") if part.strip())
    return formats or DEFAULT_DATETIME_FORMATS


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    inference_config = InferenceConfig(
        padding_factor=int(os.getenv("JSONDDL_PADDING_FACTOR", "12")),
        null_width=int(os.getenv("JSONDDL_NULL_WIDTH", "50")),
        datetime_formats=_parse_formats(os.getenv("JSONDDL_DATETIME_FORMATS")),
    )

    processor_config = ProcessorConfig(
        table_name=os.getenv("JSONDDL_TABLE_NAME") or None,
        table_type=os.getenv("JSONDDL_TABLE_TYPE", ""),
        ddl_attribute=os.getenv("JSONDDL_DDL_ATTRIBUTE", "generatedddl"),
    )

    _config_instance = AppConfig(
        inference=inference_config,
        processor=processor_config,
        log_level=os.getenv("JSONDDL_LOG_LEVEL", "INFO"),
        request_timeout=float(os.getenv("JSONDDL_REQUEST_TIMEOUT", "10.0")),
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
