"""Building and sub-building name exception classification.

Royal Mail's programmers guide defines four "exception" shapes for premise
names. An exception name is punctuated or merged with the following line
instead of being printed on a line of its own:

1. First and last characters numeric: ``"12-34"``, ``"1to1"``
2. First and penultimate characters numeric, last alphabetic: ``"12A"``
3. A single alphabetic character: ``"A"``
4. A keyword prefix followed by a numeric range or a number with an
   alphabetic suffix: ``"Unit 1-2"``, ``"Rear of 5A"``

Classification is purely syntactic. Only the exception 4 keyword is matched
case-insensitively.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from paf_address_utils.models.enums import NameException

# Keywords that introduce an exception 4 name
EXCEPTION_4_KEYWORDS: tuple[str, ...] = (
    "BACK OF",
    "BLOCK",
    "BLOCKS",
    "BUILDING",
    "MAISONETTE",
    "MAISONETTES",
    "REAR OF",
    "SHOP",
    "SHOPS",
    "STALL",
    "STALLS",
    "SUITE",
    "SUITES",
    "UNIT",
    "UNITS",
)

_EXCEPTION_1 = re.compile(r"[0-9](?:.*[0-9])?", re.DOTALL)
_EXCEPTION_2 = re.compile(r"[0-9](?:.*[0-9])?[A-Za-z]", re.DOTALL)
_EXCEPTION_3 = re.compile(r"[A-Za-z]")

# Numeric range ("1-2", "1A - 2B") or number with an alphabetic suffix ("5A")
NUMERIC_RANGE_OR_SUFFIX = r"[0-9]+[A-Za-z]?\s*-\s*[0-9]+[A-Za-z]?|[0-9]+[A-Za-z]"


@dataclass(frozen=True)
class NameClassification:
    """Exception class of a name plus the boundaries of its numeric token.

    Attributes:
        name: The classified name.
        exception: Which exception shape matched.
        keyword: The exception 4 keyword as written in the name.
        numeric_span: ``(start, end)`` of the numeric token within ``name``.
            Covers the whole name for exceptions 1 and 2, the range/suffix
            token for exception 4 and is None otherwise.
    """

    name: str
    exception: NameException
    keyword: str | None = None
    numeric_span: tuple[int, int] | None = None

    @property
    def is_exception(self) -> bool:
        return self.exception is not NameException.NONE

    @property
    def numeric_part(self) -> str | None:
        """The numeric token, e.g. ``"1-2"`` for ``"Unit 1-2"``."""
        if self.numeric_span is None:
            return None
        start, end = self.numeric_span
        return self.name[start:end]

    @property
    def suffix(self) -> str | None:
        """Trailing alphabetic letter of the numeric token, if any."""
        token = self.numeric_part
        if token and token[-1].isascii() and token[-1].isalpha():
            return token[-1]
        return None


@lru_cache(maxsize=32)
def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so "BLOCKS" wins over "BLOCK"
    ordered = sorted(keywords, key=len, reverse=True)
    alternatives = "|".join(r"\s+".join(map(re.escape, k.split())) for k in ordered)
    return re.compile(
        rf"(?P<keyword>(?i:{alternatives}))\s+(?P<number>{NUMERIC_RANGE_OR_SUFFIX})"
    )


def is_exception_4_keyword(text: str, keywords: Iterable[str] = EXCEPTION_4_KEYWORDS) -> bool:
    """Check whether ``text`` is exactly one of the exception 4 keywords."""
    normalized = " ".join(text.split()).upper()
    return normalized in {" ".join(k.split()).upper() for k in keywords}


def classify_name(
    name: str,
    keywords: Iterable[str] = EXCEPTION_4_KEYWORDS,
) -> NameClassification:
    """Classify a building or sub-building name.

    Exceptions are tested in order 1, 2, 3, 4 and the first match wins.

    Args:
        name: Non-empty building or sub-building name.
        keywords: Exception 4 keyword table.

    Returns:
        NameClassification describing the matched exception.

    Raises:
        ValueError: If ``name`` is empty.
    """
    if not name:
        raise ValueError("Cannot classify an empty name")

    if _EXCEPTION_1.fullmatch(name):
        return NameClassification(name, NameException.EXCEPTION_1, numeric_span=(0, len(name)))

    if _EXCEPTION_2.fullmatch(name):
        return NameClassification(name, NameException.EXCEPTION_2, numeric_span=(0, len(name)))

    if _EXCEPTION_3.fullmatch(name):
        return NameClassification(name, NameException.EXCEPTION_3)

    match = _keyword_pattern(tuple(keywords)).fullmatch(name)
    if match:
        return NameClassification(
            name,
            NameException.EXCEPTION_4,
            keyword=match.group("keyword"),
            numeric_span=match.span("number"),
        )

    return NameClassification(name, NameException.NONE)
