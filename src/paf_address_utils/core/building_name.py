"""Building name splitting.

A building name of the form ``<text> <number>`` whose trailing number is an
exception 1 or 2 shape (``"Test House 1024A"``, ``"Acacia Court 12-14"``)
carries its own building number. Splitting it out lets the number be printed
in front of the thoroughfare like any other building number.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from paf_address_utils.core.name_classifier import (
    EXCEPTION_4_KEYWORDS,
    classify_name,
    is_exception_4_keyword,
)
from paf_address_utils.models.enums import NameException

_SPLIT_PATTERN = re.compile(
    r"(?P<name>.*?\S)\s+"
    r"(?P<number>[0-9][0-9A-Za-z]*(?:\s*-\s*[0-9][0-9A-Za-z]*)?|\S+)",
    re.DOTALL,
)

_SPLITTABLE = frozenset({NameException.EXCEPTION_1, NameException.EXCEPTION_2})


@dataclass(frozen=True)
class BuildingNameSplit:
    """Outcome of splitting a building name.

    Attributes:
        original: The building name as supplied.
        name: The name part (the whole original name when not split).
        number: The split-out number part, or None.
    """

    original: str
    name: str
    number: str | None = None

    @property
    def is_split(self) -> bool:
        return self.number is not None


def split_building_name(
    building_name: str,
    keywords: Iterable[str] = EXCEPTION_4_KEYWORDS,
) -> BuildingNameSplit:
    """Split a trailing exception-shaped number off a building name.

    Names that are themselves exceptions (``"12-34"``, ``"Unit 1-2"``) and
    names whose leading text is a bare exception 4 keyword (``"Unit 5"``)
    are never split.

    Args:
        building_name: Building name to split.
        keywords: Exception 4 keyword table.

    Returns:
        BuildingNameSplit, with ``number`` set when a split happened.
    """
    keywords = tuple(keywords)
    unsplit = BuildingNameSplit(original=building_name, name=building_name)

    if not building_name or classify_name(building_name, keywords).is_exception:
        return unsplit

    match = _SPLIT_PATTERN.fullmatch(building_name)
    if match is None:
        return unsplit

    name = match.group("name").strip()
    number = match.group("number")
    if is_exception_4_keyword(name, keywords):
        return unsplit
    if classify_name(number, keywords).exception not in _SPLITTABLE:
        return unsplit

    return BuildingNameSplit(original=building_name, name=name, number=number)
