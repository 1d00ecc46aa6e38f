"""Result classes for address line assembly.

This module contains the dataclass returned by the line assembler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from abstract_validation_base import ProcessEntry, ProcessLog

from paf_address_utils.models.enums import AssemblyRule, NameException


@dataclass
class AssemblyResult:
    """Formatted address lines plus a record of how they were produced.

    ``lines`` holds the premise and thoroughfare lines selected by the PAF
    rules. ``locality_lines`` holds the localities, post town and postcode
    that follow them on an envelope.
    """

    lines: list[str]
    rule: AssemblyRule
    locality_lines: list[str] = field(default_factory=list)
    building_name_split: bool = False
    building_name_exception: NameException | None = None
    sub_building_name_exception: NameException | None = None
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def debug(self) -> dict[str, Any]:
        """Which rule fired and the name classifications it was based on."""
        return {
            "rule": self.rule.value,
            "building_name_split": self.building_name_split,
            "building_name_exception": (
                self.building_name_exception.value if self.building_name_exception else None
            ),
            "sub_building_name_exception": (
                self.sub_building_name_exception.value
                if self.sub_building_name_exception
                else None
            ),
        }

    @property
    def full_lines(self) -> list[str]:
        return [*self.lines, *self.locality_lines]

    def to_string(self, separator: str = "\n", include_locality: bool = True) -> str:
        """Join the address lines into a single string."""
        return separator.join(self.full_lines if include_locality else self.lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "AddressLines": list(self.lines),
            "AssemblyRule": self.rule.value,
            "FormattedAddress": self.to_string(", "),
        }

    def add_process_cleaning(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
        operation_type: str = "cleaning",
    ) -> None:
        """Track a transformation applied to an input field during assembly.

        Args:
            field: Name of the field that was transformed.
            original_value: The original value before transformation.
            new_value: The value after transformation.
            reason: Explanation of why the transformation was performed.
            operation_type: Category of operation (cleaning, normalization, etc.).
        """
        entry = ProcessEntry(
            entry_type="cleaning",
            field=field,
            message=reason,
            original_value=str(original_value) if original_value is not None else None,
            new_value=str(new_value) if new_value is not None else None,
            context={"operation_type": operation_type},
        )
        self.process_log.cleaning.append(entry)

    @property
    def cleaning_operations(self) -> list[ProcessEntry]:
        return self.process_log.cleaning
