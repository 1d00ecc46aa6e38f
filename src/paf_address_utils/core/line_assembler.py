"""PAF address line assembly.

Turns the discrete fields of a PafAddress into ordered print lines following
the Royal Mail programmers guide. The rule is chosen from which premise
fields are populated:

- Rule 1: no building name, number or sub-building name
- Rule 2: building number
- Rule 3: building name
- Rule 4: building name and building number
- Rule 5: sub-building name and building number
- Rule 6: sub-building name and building name
- Rule 7: sub-building name, building name and building number
- c1: sub-building name and thoroughfare only

Organisation and department lines always come first. Exception shaped names
(see ``name_classifier``) are merged with the line that follows them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from paf_address_utils.core.building_name import split_building_name
from paf_address_utils.core.name_classifier import (
    EXCEPTION_4_KEYWORDS,
    NameClassification,
    classify_name,
)
from paf_address_utils.models.address import PafAddress
from paf_address_utils.models.enums import AssemblyRule, NameException
from paf_address_utils.models.results import AssemblyResult

logger = logging.getLogger(__name__)

# Separator placed between an exception name and the text that follows it.
# Names without an entry are printed on their own line.
_JOINERS: dict[NameException, str] = {
    NameException.EXCEPTION_1: " ",
    NameException.EXCEPTION_2: " ",
    NameException.EXCEPTION_3: ", ",
}


def _joiner(classification: NameClassification) -> str | None:
    return _JOINERS.get(classification.exception)


def _attach(prefix: str, joiner: str | None, thoroughfares: list[str]) -> list[str]:
    """Join ``prefix`` to the first thoroughfare, or give it a line of its own."""
    if joiner is None or not thoroughfares:
        return [prefix, *thoroughfares]
    first, *rest = thoroughfares
    return [f"{prefix}{joiner}{first}", *rest]


def select_rule(
    *,
    has_sub_building: bool,
    has_building_name: bool,
    has_building_number: bool,
    has_thoroughfare: bool,
    has_organisation: bool,
) -> AssemblyRule:
    """Select the assembly rule from field presence alone.

    ``has_organisation`` covers organisation and department names.
    """
    if has_sub_building:
        if has_building_name and has_building_number:
            return AssemblyRule.RULE_7
        if has_building_name:
            return AssemblyRule.RULE_6
        if has_building_number:
            return AssemblyRule.RULE_5
        if has_thoroughfare and not has_organisation:
            return AssemblyRule.C1
        return AssemblyRule.FALLBACK

    if has_building_name and has_building_number:
        return AssemblyRule.RULE_4
    if has_building_name:
        return AssemblyRule.RULE_3
    if has_building_number:
        return AssemblyRule.RULE_2
    return AssemblyRule.RULE_1


class AddressLineAssembler:
    """Assembles PAF address lines from a PafAddress.

    Instances only hold read-only configuration and may be shared.

    Example:
        >>> assembler = AddressLineAssembler()
        >>> result = assembler.assemble(address)
        >>> result.lines
        ['Test Organisation', '123 Test Street']
        >>> result.debug["rule"]
        2
    """

    def __init__(
        self,
        exception_4_keywords: Iterable[str] = EXCEPTION_4_KEYWORDS,
        *,
        split_building_names: bool = True,
        uppercase_post_town: bool = True,
    ) -> None:
        """Initialize the assembler.

        Args:
            exception_4_keywords: Keywords that introduce an exception 4 name.
            split_building_names: If True, split "<name> <number>" building names.
            uppercase_post_town: If True, print the post town in capitals.
        """
        self._keywords = tuple(exception_4_keywords)
        self._split_building_names = split_building_names
        self._uppercase_post_town = uppercase_post_town

    @property
    def exception_4_keywords(self) -> tuple[str, ...]:
        return self._keywords

    def classify(self, name: str) -> NameClassification:
        """Classify a name using this assembler's keyword table."""
        return classify_name(name, self._keywords)

    def assemble(self, address: PafAddress) -> AssemblyResult:
        """Assemble the address lines for ``address``.

        Args:
            address: The address to format.

        Returns:
            AssemblyResult holding the lines and the rule that produced them.
        """
        building_name = address.BuildingName
        building_number = str(address.BuildingNumber) if address.BuildingNumber else None
        sub_building = address.SubBuildingName
        thoroughfares = address.thoroughfares

        split = None
        if building_name and building_number is None and self._split_building_names:
            split = split_building_name(building_name, self._keywords)
            if split.is_split:
                logger.debug(
                    "Split building name %r into %r and %r",
                    building_name,
                    split.name,
                    split.number,
                )
                building_name, building_number = split.name, split.number

        rule = select_rule(
            has_sub_building=bool(sub_building),
            has_building_name=bool(building_name),
            has_building_number=bool(building_number),
            has_thoroughfare=bool(thoroughfares),
            has_organisation=bool(address.OrganisationName or address.DepartmentName),
        )
        logger.debug("Assembling address %s with rule %s", address.UDPRN, rule.value)

        building = self.classify(building_name) if building_name else None
        sub = self.classify(sub_building) if sub_building else None

        lines = [name for name in (address.OrganisationName, address.DepartmentName) if name]

        if rule is AssemblyRule.RULE_1:
            lines.extend(thoroughfares)
        elif rule is AssemblyRule.RULE_2:
            lines.extend(_attach(building_number, " ", thoroughfares))
        elif rule is AssemblyRule.RULE_3:
            lines.extend(_attach(building.name, _joiner(building), thoroughfares))
        elif rule is AssemblyRule.RULE_4:
            lines.append(building.name)
            lines.extend(_attach(building_number, " ", thoroughfares))
        elif rule is AssemblyRule.RULE_5:
            lines.append(sub.name)
            lines.extend(_attach(building_number, " ", thoroughfares))
        elif rule is AssemblyRule.RULE_6:
            lines.extend(self._sub_building_lines(sub, building, thoroughfares))
        elif rule is AssemblyRule.RULE_7:
            lines.extend(self._sub_building_lines(sub, building, []))
            lines.extend(_attach(building_number, " ", thoroughfares))
        elif rule is AssemblyRule.C1:
            lines.extend(_attach(sub.name, " ", thoroughfares))
        else:
            logger.warning(
                "No PAF rule covers address %s; printing fields on separate lines",
                address.UDPRN,
            )
            lines.extend(
                self._independent_lines(
                    sub_building, building_name, building_number, thoroughfares
                )
            )

        result = AssemblyResult(
            lines=lines,
            rule=rule,
            locality_lines=self._locality_lines(address),
            building_name_split=bool(split and split.is_split),
            building_name_exception=building.exception if building else None,
            sub_building_name_exception=sub.exception if sub else None,
        )
        if split is not None and split.is_split:
            result.add_process_cleaning(
                field="BuildingName",
                original_value=split.original,
                new_value=split.name,
                reason=f"Split building number {split.number} from building name",
                operation_type="normalization",
            )
        return result

    @staticmethod
    def _sub_building_lines(
        sub: NameClassification,
        building: NameClassification,
        thoroughfares: list[str],
    ) -> list[str]:
        """Combine sub-building and building name, then the thoroughfares.

        Exception 1 to 3 sub-building names are merged into the building
        name line. The building name in turn is merged into the first
        thoroughfare when it is an exception 1 to 3 name.
        """
        sub_joiner = _joiner(sub)
        if sub_joiner is None:
            return [sub.name, *_attach(building.name, _joiner(building), thoroughfares)]
        merged = f"{sub.name}{sub_joiner}{building.name}"
        return _attach(merged, _joiner(building), thoroughfares)

    @staticmethod
    def _independent_lines(
        sub_building: str | None,
        building_name: str | None,
        building_number: str | None,
        thoroughfares: list[str],
    ) -> list[str]:
        lines = [name for name in (sub_building, building_name) if name]
        if building_number:
            lines.extend(_attach(building_number, " ", thoroughfares))
        else:
            lines.extend(thoroughfares)
        return lines

    def _locality_lines(self, address: PafAddress) -> list[str]:
        post_town = address.PostTown.upper() if self._uppercase_post_town else address.PostTown
        return [*address.localities, post_town, address.Postcode]


# Module-level singleton for convenience
_assembler: AddressLineAssembler | None = None


def get_assembler() -> AddressLineAssembler:
    """Get the singleton AddressLineAssembler instance.

    Returns:
        Shared AddressLineAssembler with the default keyword table.
    """
    global _assembler
    if _assembler is None:
        _assembler = AddressLineAssembler()
    return _assembler
