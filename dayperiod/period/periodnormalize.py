"""Period Spec Normalization
-------------------------

Utility functions for normalizing and dissecting period specs before
resolution. Each extractor matches the whole normalized spec, so
"2014-11 and more" is not mistaken for "2014-11".

Examples:
  >>> normalize_spec_text("  2015 – 3Q ")
  '2015-3q'

  >>> extract_quarter_half("2015-3q")
  ('quarter', 3, 2015)

  >>> split_phrase("from 2014-11 to 2015-3Q per month")
  ('2014-11', '2015-3q', 'month')
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional


def normalize_spec_text(text: str) -> str:
    """
    Normalize spec text for consistent parsing.

    Transformations:
      - Strip whitespace
      - Lowercase
      - Normalize Unicode (NFC)
      - Normalize dashes (—, –, −, ‒ → -)
      - Remove spaces around hyphens
      - Collapse whitespace

    Examples:
        >>> normalize_spec_text("Q1 2026")
        'q1 2026'

        >>> normalize_spec_text("This_Month")
        'this_month'

        >>> normalize_spec_text("Jan - Mar 2025")
        'jan-mar 2025'
    """
    if not text:
        return ""

    # Strip and lowercase
    text = text.strip().lower()

    # Unicode normalization (NFC)
    text = unicodedata.normalize("NFC", text)

    # Normalize various dash types to single hyphen
    for dash in ("—", "–", "−", "‒"):
        text = text.replace(dash, "-")

    # Normalize spaces around hyphens: "2015 - 3Q" → "2015-3q"
    text = re.sub(r"\s*-\s*", "-", text)

    # Collapse multiple spaces to single space
    text = re.sub(r"\s+", " ", text)

    return text.strip()


def extract_year(text: str) -> Optional[int]:
    """
    Extract a bare year spec: "2025" or "fy 2025".

    Examples:
        >>> extract_year("2025")
        2025
        >>> extract_year("fy2026")
        2026
        >>> extract_year("2025-01") is None
        True
    """
    match = re.fullmatch(r"(?:fy\s*)?(\d{4})", text)
    if match:
        return int(match.group(1))
    return None


def extract_quarter_half(text: str) -> tuple[Optional[str], Optional[int], Optional[int]]:
    """
    Extract a quarter or half spec.

    Supports "2015-3q", "3q", "q3 2015", "2015q3", "2015-q3" and the same
    shapes with h1/h2 for halves.

    Returns:
        (period_type, number, year) with year None when omitted;
        (None, None, None) when the text is neither

    Examples:
        >>> extract_quarter_half("q1 2026")
        ('quarter', 1, 2026)

        >>> extract_quarter_half("2h")
        ('half', 2, None)
    """
    for letter, period_type, digits in (("q", "quarter", "1-4"), ("h", "half", "12")):
        patterns = [
            # 2015-3q, 3q
            (rf"(?:(\d{{4}})-)?([{digits}]){letter}", 1, 2),
            # 2015q3, 2015-q3, 2015 q3
            (rf"(\d{{4}})[\s\-]?{letter}([{digits}])", 1, 2),
            # q3 2015, q3
            (rf"{letter}([{digits}])(?:\s(\d{{4}}))?", 2, 1),
        ]
        for pattern, year_group, num_group in patterns:
            match = re.fullmatch(pattern, text)
            if match:
                year = match.group(year_group)
                return (
                    period_type,
                    int(match.group(num_group)),
                    int(year) if year else None,
                )

    return (None, None, None)


_MONTH_PATTERNS = {
    1: r"jan|january",
    2: r"feb|february",
    3: r"mar|march",
    4: r"apr|april",
    5: r"may",
    6: r"jun|june",
    7: r"jul|july",
    8: r"aug|august",
    9: r"sep|sept|september",
    10: r"oct|october",
    11: r"nov|november",
    12: r"dec|december",
}


def extract_month_name(text: str) -> Optional[int]:
    """
    Month number for a month name or abbreviation.

    Examples:
        >>> extract_month_name("jan")
        1
        >>> extract_month_name("december")
        12
        >>> extract_month_name("q1") is None
        True
    """
    for month_num, pattern in _MONTH_PATTERNS.items():
        if re.fullmatch(pattern, text.rstrip(".")):
            return month_num
    return None


def extract_month(text: str) -> tuple[Optional[int], Optional[int]]:
    """
    Extract a month spec: "2014-11", "2014-1", "nov 2014", "2014 november".

    Returns:
        (year, month) or (None, None)
    """
    match = re.fullmatch(r"(\d{4})-(\d{1,2})", text)
    if match:
        month = int(match.group(2))
        if 1 <= month <= 12:
            return (int(match.group(1)), month)
        return (None, None)

    match = re.fullmatch(r"([a-z]+\.?) (\d{4})", text)
    if match:
        name, year = match.group(1), match.group(2)
    else:
        match = re.fullmatch(r"(\d{4}) ([a-z]+)", text)
        if match:
            year, name = match.group(1), match.group(2)

    if match:
        month = extract_month_name(name)
        if month:
            return (int(year), month)

    return (None, None)


def extract_semimonth(text: str) -> tuple[Optional[int], Optional[int], Optional[int]]:
    """
    Extract a semimonth spec: "2010-05-i" (1st-15th) or "2010-05-ii" (16th-end).

    Returns:
        (year, month, half_of_month) or (None, None, None)
    """
    match = re.fullmatch(r"(\d{4})-(\d{1,2})-(i{1,2})", text)
    if match and 1 <= int(match.group(2)) <= 12:
        return (int(match.group(1)), int(match.group(2)), len(match.group(3)))
    return (None, None, None)


def extract_iso_week(text: str) -> tuple[Optional[int], Optional[int]]:
    """
    Extract an ISO week number.

    Supports formats:
      - 2025-W02, 2025W02, 2012-W5
      - 2013-14W
      - W02 2025

    Returns:
        (year, week_number) tuple or (None, None)

    Examples:
        >>> extract_iso_week("2025-w02")
        (2025, 2)

        >>> extract_iso_week("2013-14w")
        (2013, 14)

        >>> extract_iso_week("q1 2025")
        (None, None)
    """
    match = re.fullmatch(r"(\d{4})-?w(\d{1,2})", text) or re.fullmatch(r"(\d{4})-(\d{1,2})w", text)
    if match:
        return (int(match.group(1)), int(match.group(2)))

    match = re.fullmatch(r"w(\d{1,2})\s(\d{4})", text)
    if match:
        return (int(match.group(2)), int(match.group(1)))

    return (None, None)


_RELATIVE_OFFSETS = {
    "last": -1,
    "previous": -1,
    "prior": -1,
    "this": 0,
    "current": 0,
    "next": 1,
}


def extract_relative(text: str) -> tuple[Optional[int], Optional[str]]:
    """
    Extract a relative spec such as "last_month" or "this quarter".

    Returns:
        (offset, unit_name) with offset -1, 0 or 1; (None, None) otherwise

    Examples:
        >>> extract_relative("last_quarter")
        (-1, 'quarter')

        >>> extract_relative("2015-3q")
        (None, None)
    """
    match = re.fullmatch(r"([a-z]+)[\s_]([a-z][a-z\-_]*)", text)
    if match and match.group(1) in _RELATIVE_OFFSETS:
        return (_RELATIVE_OFFSETS[match.group(1)], match.group(2))
    return (None, None)


def is_relative_spec(text: str) -> bool:
    """
    Detect if text describes a relative period.

    Examples:
        >>> is_relative_spec("last quarter")
        True
        >>> is_relative_spec("this_year")
        True
        >>> is_relative_spec("q1 2026")
        False
    """
    return extract_relative(text)[0] is not None


_PHRASE = re.compile(
    r"(?:(?P<lead>from|to)\s)?(?P<first>.+?)"
    r"(?:\sto\s(?P<second>.+?))?"
    r"(?:\sper\s(?P<per>[a-z][a-z\-_]*))?"
)


def split_phrase(phrase: str) -> tuple[str, Optional[str], Optional[str]]:
    """
    Split a period phrase into its from spec, to spec and chunk size.

    "to X" alone is treated like "from X".

    Examples:
        >>> split_phrase("from last_year to this_year per month")
        ('last_year', 'this_year', 'month')

        >>> split_phrase("to 2015-3q")
        ('2015-3q', None, None)

        >>> split_phrase("2012")
        ('2012', None, None)
    """
    text = normalize_spec_text(phrase)
    match = _PHRASE.fullmatch(text)
    if not match:
        return (text, None, None)
    return (match.group("first"), match.group("second"), match.group("per"))


__all__ = [
    "normalize_spec_text",
    "extract_year",
    "extract_quarter_half",
    "extract_month_name",
    "extract_month",
    "extract_semimonth",
    "extract_iso_week",
    "extract_relative",
    "is_relative_spec",
    "split_phrase",
]
