"""Property-based tests using Hypothesis for core components.

This module contains property tests that verify invariants of address
line assembly using the strategies in ``tests.strategies``.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings

from paf_address_utils import (
    AddressLineAssembler,
    AssemblyRule,
    NameException,
    PafAddress,
    PafAddressBuilder,
)
from tests.strategies import (
    THOROUGHFARES,
    exception_1_name_strategy,
    exception_2_name_strategy,
    exception_4_name_strategy,
    minimal_fields_strategy,
    paf_fields_strategy,
)

assembler = AddressLineAssembler()


# =============================================================================
# Assembly Property Tests
# =============================================================================


class TestAssemblyProperties:
    """Property tests for AddressLineAssembler."""

    @given(paf_fields_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_assembly_is_idempotent(self, fields: dict[str, object]) -> None:
        """Assembling the same address twice gives identical output."""
        address = PafAddress.model_validate(fields)
        first = assembler.assemble(address)
        second = assembler.assemble(address)

        assert first.lines == second.lines
        assert first.debug == second.debug

    @given(paf_fields_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_no_empty_lines(self, fields: dict[str, object]) -> None:
        result = assembler.assemble(PafAddress.model_validate(fields))
        assert all(line.strip() for line in result.full_lines)

    @given(paf_fields_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_organisation_lines_first(self, fields: dict[str, object]) -> None:
        address = PafAddress.model_validate(fields)
        result = assembler.assemble(address)
        expected = [n for n in (address.OrganisationName, address.DepartmentName) if n]
        assert result.lines[: len(expected)] == expected

    @given(paf_fields_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_every_premise_value_printed(self, fields: dict[str, object]) -> None:
        """Names, number and thoroughfares all appear somewhere in the output."""
        address = PafAddress.model_validate(fields)
        text = "\n".join(assembler.assemble(address).lines)

        for value in (
            address.SubBuildingName,
            address.BuildingName,
            address.DependentThoroughfare,
            address.Thoroughfare,
        ):
            if value:
                assert value in text or all(part in text for part in value.split())
        if address.BuildingNumber:
            assert str(address.BuildingNumber) in text

    @given(minimal_fields_strategy())
    def test_thoroughfare_only_is_rule_1(self, fields: dict[str, object]) -> None:
        result = assembler.assemble(PafAddress.model_validate(fields))
        assert result.rule is AssemblyRule.RULE_1
        assert result.lines == [fields["Thoroughfare"]]
        assert len(result.lines) <= 2

    @given(minimal_fields_strategy(), exception_1_name_strategy())
    def test_exception_1_building_joins_thoroughfare(
        self, fields: dict[str, object], name: str
    ) -> None:
        result = assembler.assemble(PafAddress.model_validate({**fields, "BuildingName": name}))
        assert result.lines == [f"{name} {fields['Thoroughfare']}"]
        assert result.building_name_exception is NameException.EXCEPTION_1

    @given(minimal_fields_strategy(), exception_4_name_strategy())
    def test_exception_4_building_own_line(self, fields: dict[str, object], name: str) -> None:
        result = assembler.assemble(PafAddress.model_validate({**fields, "BuildingName": name}))
        assert result.lines == [name, fields["Thoroughfare"]]
        assert result.building_name_exception is NameException.EXCEPTION_4

    @given(exception_2_name_strategy())
    def test_split_name_uses_rule_4(self, number: str) -> None:
        address = (
            PafAddressBuilder()
            .with_building_name(f"Test House {number}")
            .with_thoroughfare(THOROUGHFARES[0])
            .with_post_town("Test Town")
            .with_postcode("AB12 3CD")
            .build()
        )
        result = assembler.assemble(address)
        assert result.rule is AssemblyRule.RULE_4
        assert result.lines == ["Test House", f"{number} {THOROUGHFARES[0]}"]
