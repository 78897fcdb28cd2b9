# ==============================================
# Date Matchers
# ==============================================
#
# PURPOSE:
#   Decide whether a piece of text looks like a date or a date-time.
#   Used by the TypeDetector to tell DATE / DATETIME columns apart
#   from plain VARCHAR text.
#
# THREE KINDS OF MATCHER:
# -----------------------
#   1. is_sql_date(text)
#        Strict SQL date literal: yyyy-[m]m-[d]d, month 1-12, day 1-31.
#        No surrounding whitespace, no trailing text.
#
#   2. parse_with_formats(text, formats) / matches_any_format(...)
#        Try a list of strptime formats in turn (the common shapes
#        seen in JSON payloads). The list is configurable.
#
#   3. LenientDatePattern(pattern)
#        Pattern letters:  y year   M month   d day   H hour
#                          m minute s second  S millisecond
#                          E day name         Z zone
#        - numeric fields accept any number of digits
#        - out-of-range values roll over (month 13 → January next year,
#          day 32 of January → February 1st)
#        - only a prefix of the text has to match; trailing text is ignored
#        - MMM / EEE accept short or full English names, any case
#        - Z accepts +hhmm, +hh:mm, GMT+h:mm or a known zone
#          abbreviation of up to four letters (PST, CET, IST, AEST, ...)
#        A rolled-over result outside years 1-9999 is not a match.
#
# CONSTANTS:
# ----------
#   RFC822_DATETIME = "EEE, dd MMM yyyy HH:mm:ss Z"
#   SLASH_DATETIME  = "mm/dd/yyyy HH:MM:SS"   (minutes/day/year hour:month:millis)
#   LENIENT_DATE    = "yyyy-MM-dd"
#
# ==============================================

import re
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

SQL_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})")

RFC822_DATETIME = "EEE, dd MMM yyyy HH:mm:ss Z"
SLASH_DATETIME = "mm/dd/yyyy HH:MM:SS"
LENIENT_DATE = "yyyy-MM-dd"

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]
DAY_NAMES = [
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
]

# Zone abbreviations and their UTC offsets in minutes
ZONE_OFFSETS: Dict[str, int] = {
    "UT": 0, "UTC": 0, "GMT": 0, "Z": 0,
    "EST": -300, "EDT": -240,
    "CST": -360, "CDT": -300,
    "MST": -420, "MDT": -360,
    "PST": -480, "PDT": -420,
    "AKST": -540, "AKDT": -480, "HST": -600,
    "WET": 0, "WEST": 60, "BST": 60,
    "CET": 60, "CEST": 120, "EET": 120, "EEST": 180, "MSK": 180,
    "IST": 330, "SGT": 480, "HKT": 480, "AWST": 480,
    "JST": 540, "KST": 540, "ACST": 570,
    "AEST": 600, "AEDT": 660, "NZST": 720, "NZDT": 780,
}

NUMERIC_FIELDS = {"y", "M", "d", "H", "m", "s", "S"}
SUPPORTED_LETTERS = NUMERIC_FIELDS | {"E", "Z"}

ZONE_REGEX = r"(GMT[+-][0-9]{1,2}:?[0-9]{2}|[+-][0-9]{2}:?[0-9]{2}|[A-Za-z]{1,4})"


def is_sql_date(text: str) -> bool:
    """
    Check for a strict SQL date literal.

    Args:
        text: Candidate value, not stripped

    Returns:
        True for "2021-01-05", False for "2021-13-05" or "2021-01-05x"
    """
    match = SQL_DATE_PATTERN.fullmatch(text)
    if not match:
        return False
    month = int(match.group(2))
    day = int(match.group(3))
    return 1 <= month <= 12 and 1 <= day <= 31


def parse_with_formats(text: str, formats: Iterable[str]) -> Optional[datetime]:
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def matches_any_format(text: str, formats: Iterable[str]) -> bool:
    return parse_with_formats(text.strip(), formats) is not None


def _parse_zone(token: str) -> Optional[timezone]:
    upper = token.upper()
    if upper in ZONE_OFFSETS:
        return timezone(timedelta(minutes=ZONE_OFFSETS[upper]))

    if upper.startswith("GMT"):
        upper = upper[3:]
    if upper[:1] not in ("+", "-"):
        return None

    sign = -1 if upper[0] == "-" else 1
    digits = upper[1:].replace(":", "")
    if not digits.isdigit() or len(digits) < 3:
        return None
    hours, minutes = int(digits[:-2]), int(digits[-2:])
    try:
        return timezone(sign * timedelta(hours=hours, minutes=minutes))
    except ValueError:
        return None


def _name_index(token: str, names: List[str]) -> Optional[int]:
    lowered = token.lower()
    for index, name in enumerate(names):
        if lowered == name or lowered == name[:3]:
            return index
    return None


class LenientDatePattern:
    """
    A date pattern that parses permissively.

    Built once from a pattern string and reused for every value.
    """

    def __init__(self, pattern: str):
        """
        Compile the pattern into a prefix regex.

        Args:
            pattern: Pattern string such as "yyyy-MM-dd"

        Raises:
            ValueError: If the pattern uses an unsupported letter
        """
        self.pattern = pattern
        self._fields: List[Tuple[str, int]] = []
        self._regex: Pattern = self._compile(pattern)

    def __repr__(self) -> str:
        return f"LenientDatePattern({self.pattern!r})"

    def _compile(self, pattern: str) -> Pattern:
        parts = []
        for run in re.finditer(r"([A-Za-z])\1*|.", pattern):
            token = run.group(0)
            letter = token[0]
            if not letter.isalpha():
                parts.append(r"\s+" if letter.isspace() else re.escape(letter))
                continue

            if letter not in SUPPORTED_LETTERS:
                raise ValueError(f"Unsupported pattern letter {letter!r} in {pattern!r}")

            self._fields.append((letter, len(token)))
            if letter == "Z":
                parts.append(ZONE_REGEX)
            elif letter == "E" or (letter == "M" and len(token) >= 3):
                parts.append(r"([A-Za-z]+)")
            else:
                parts.append(r"([0-9]+)")

        return re.compile("".join(parts))

    def parse(self, text: str) -> Optional[datetime]:
        """
        Parse text, rolling over out-of-range components.

        Args:
            text: Candidate value (surrounding whitespace is ignored)

        Returns:
            The normalized datetime, or None if the text does not fit
        """
        match = self._regex.match(text.strip())
        if not match:
            return None

        values = {"y": 1970, "M": 1, "d": 1, "H": 0, "m": 0, "s": 0, "S": 0}
        zone = None

        for (letter, count), token in zip(self._fields, match.groups()):
            if letter == "E":
                if _name_index(token, DAY_NAMES) is None:
                    return None
            elif letter == "Z":
                zone = _parse_zone(token)
                if zone is None:
                    return None
            elif letter == "M" and count >= 3:
                index = _name_index(token, MONTH_NAMES)
                if index is None:
                    return None
                values["M"] = index + 1
            else:
                values[letter] = int(token)

        # Roll months into years first, then everything else into the date
        year_carry, month_index = divmod(values["M"] - 1, 12)
        try:
            result = datetime(values["y"] + year_carry, month_index + 1, 1) + timedelta(
                days=values["d"] - 1,
                hours=values["H"],
                minutes=values["m"],
                seconds=values["s"],
                milliseconds=values["S"],
            )
        except (ValueError, OverflowError):
            return None

        if zone is not None:
            result = result.replace(tzinfo=zone)
        return result

    def matches(self, text: str) -> bool:
        return self.parse(text) is not None


RFC822_MATCHER = LenientDatePattern(RFC822_DATETIME)
SLASH_DATETIME_MATCHER = LenientDatePattern(SLASH_DATETIME)
LENIENT_DATE_MATCHER = LenientDatePattern(LENIENT_DATE)
