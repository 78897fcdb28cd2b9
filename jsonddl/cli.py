# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Generate DDL from a JSON file or from a JSON document served
#   over HTTP.
#
# COMMANDS:
# ---------
# 1. From a file (table name defaults to the file name):
#    python -m jsonddl.cli convert data/weather.json --table-name weather
#    python -m jsonddl.cli convert data/weather.json --output weather.sql
#
# 2. From a URL (table name defaults to the last path segment):
#    python -m jsonddl.cli fetch http://127.0.0.1:8000/record --table-type mysql
#
# 3. Global options:
#    --log-level DEBUG
#
# EXIT CODES:
# -----------
#   0 → DDL produced
#   1 → malformed JSON, no table name, unreadable file, HTTP error
#
# ==============================================

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

import requests

from jsonddl.config import AppConfig, get_config
from jsonddl.logging_config import setup_logging
from jsonddl.processor import FILENAME_ATTRIBUTE, FlowRecord, JsonToDDLProcessor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonddl",
        description="Create a SQL CREATE TABLE statement from a JSON document"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Read the JSON document from a file")
    convert.add_argument("path", help="Path to the JSON file")

    fetch = subparsers.add_parser("fetch", help="Download the JSON document from a URL")
    fetch.add_argument("url", help="URL returning a JSON document")
    fetch.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")

    for sub in (convert, fetch):
        sub.add_argument("--table-name", default=None, help="Table name (default: file or URL name)")
        sub.add_argument("--table-type", default=None, help="Target database: hive, mysql, oracle, ...")
        sub.add_argument("--output", default=None, help="Write the DDL here instead of stdout")

    return parser


def read_file(path: str) -> FlowRecord:
    file_path = Path(path)
    return FlowRecord(
        content=file_path.read_bytes(),
        attributes={FILENAME_ATTRIBUTE: file_path.name}
    )


def fetch_url(url: str, timeout: float) -> FlowRecord:
    """
    Download a JSON document.

    Args:
        url: The endpoint URL
        timeout: Request timeout in seconds

    Returns:
        FlowRecord with the response body; filename is the last
        path segment of the URL (may be empty)

    Raises:
        requests.RequestException: On connection or HTTP errors
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    filename = urlparse(url).path.rstrip("/").rsplit("/", 1)[-1]
    return FlowRecord(content=response.content, attributes={FILENAME_ATTRIBUTE: filename})


def main(argv: Optional[List[str]] = None, config: Optional[AppConfig] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config or get_config()
    setup_logging(args.log_level or config.log_level)

    target = args.path if args.command == "convert" else args.url
    try:
        if args.command == "convert":
            record = read_file(args.path)
        else:
            timeout = args.timeout if args.timeout is not None else config.request_timeout
            record = fetch_url(args.url, timeout)
    except (requests.RequestException, OSError) as e:
        logger.error("Cannot load %s: %s", target, e)
        return 1


    processor = JsonToDDLProcessor.from_app_config(config)
    result = processor.process(record, table_name=args.table_name, table_type=args.table_type)
    if not result.succeeded:
        return 1

    if args.output:
        Path(args.output).write_text(result.ddl + "\n", encoding="utf-8")
        logger.info("DDL written to %s", args.output)
    else:
        print(result.ddl)
    return 0


if __name__ == "__main__":
    sys.exit(main())
