# ==============================================
# NORMALIZATION: names and values
# ==============================================
#
# This package turns raw JSON keys and values into SQL-ready
# pieces: clean identifiers and inferred column types.
#
# Modules:
# --------
# - identifier_cleaner.py → JSON key → SQL identifier
# - date_matchers.py      → strict, format-list and lenient date checks
# - type_detector.py      → JSON value → column type (ordered rules)
#
# ==============================================

from .identifier_cleaner import IdentifierCleaner, clean_name
from .type_detector import TypeDetector, ClassificationRule

__all__ = ["IdentifierCleaner", "clean_name", "TypeDetector", "ClassificationRule"]
