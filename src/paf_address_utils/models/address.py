"""PAF address model.

This module contains the PafAddress Pydantic model holding the discrete
Royal Mail PAF fields an address is assembled from.
"""

from __future__ import annotations

from typing import Any

from abstract_validation_base import ValidationResult
from pydantic import AliasChoices, ConfigDict, Field, PositiveInt, ValidationInfo, field_validator

from paf_address_utils.core.postcode import get_postcode_normalizer
from paf_address_utils.models.errors import ADDRESS_VALIDATION, PafAddressError
from paf_address_utils.models.enums import PafField
from paf_address_utils.validation.base import PafValidationBase

_OPTIONAL_TEXT_FIELDS = (
    "OrganisationName",
    "DepartmentName",
    "SubBuildingName",
    "BuildingName",
    "DependentThoroughfare",
    "Thoroughfare",
    "DoubleDependentLocality",
    "DependentLocality",
)

# Fields whose external validation errors are raised rather than only reported
_RAISING_FIELDS = (PafField.POSTCODE.value, PafField.UDPRN.value)


class PafAddress(PafValidationBase):
    """A UK postal address as discrete PAF fields.

    Instances are immutable; address lines are produced from them by
    ``AddressLineAssembler``. Blank optional fields are stored as None so that
    presence checks only ever see real values. ``PostTown`` and ``Postcode``
    are required.

    Inherits from PafValidationBase, providing:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error and optionally raise PafAddressError
    - audit_log(): Export logged entries for DataFrame analysis
    """

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
        frozen=True,
    )

    OrganisationName: str | None = Field(
        default=None,
        description="Name of the organisation at the delivery point",
        validation_alias=AliasChoices(
            "OrganisationName", "organisation_name", "organization_name"
        ),
    )
    DepartmentName: str | None = Field(
        default=None,
        description="Department within the organisation",
        validation_alias=AliasChoices("DepartmentName", "department_name"),
    )
    SubBuildingName: str | None = Field(
        default=None,
        description="Flat, unit or other part of a building (e.g. 'Flat 1', '56-78')",
        validation_alias=AliasChoices("SubBuildingName", "sub_building_name"),
    )
    BuildingName: str | None = Field(
        default=None,
        description="Name of the building (e.g. 'Rose Cottage', '12A', 'Unit 1-2')",
        validation_alias=AliasChoices("BuildingName", "building_name"),
    )
    BuildingNumber: PositiveInt | None = Field(
        default=None,
        description="Number of the building on the thoroughfare",
        validation_alias=AliasChoices("BuildingNumber", "building_number"),
    )
    DependentThoroughfare: str | None = Field(
        default=None,
        description="Thoroughfare subordinate to the main one (e.g. an industrial estate)",
        validation_alias=AliasChoices("DependentThoroughfare", "dependent_thoroughfare"),
    )
    Thoroughfare: str | None = Field(
        default=None,
        description="Street name",
        validation_alias=AliasChoices("Thoroughfare", "thoroughfare"),
    )
    DoubleDependentLocality: str | None = Field(
        default=None,
        description="Small locality within the dependent locality",
        validation_alias=AliasChoices("DoubleDependentLocality", "double_dependent_locality"),
    )
    DependentLocality: str | None = Field(
        default=None,
        description="Locality within the post town",
        validation_alias=AliasChoices("DependentLocality", "dependent_locality"),
    )
    PostTown: str = Field(
        description="Royal Mail post town",
        validation_alias=AliasChoices("PostTown", "post_town"),
    )
    Postcode: str = Field(
        description="UK postcode, stored upper-case with a single space",
        validation_alias=AliasChoices("Postcode", "postcode", "post_code", "PostCode"),
    )
    UDPRN: PositiveInt | None = Field(
        default=None,
        description="Unique Delivery Point Reference Number",
        validation_alias=AliasChoices("UDPRN", "udprn"),
    )

    @field_validator(*_OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Treat blank strings as absent fields."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("BuildingNumber", "UDPRN", mode="before")
    @classmethod
    def blank_number_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("PostTown", "Postcode", mode="before")
    @classmethod
    def require_value(cls, value: Any, info: ValidationInfo) -> Any:
        """Fail fast when a required field is blank."""
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PafAddressError.missing_field(info.field_name)
        return value

    @field_validator("Postcode")
    @classmethod
    def normalize_postcode(cls, value: str) -> str:
        return get_postcode_normalizer().normalize(value)

    def to_dict(self) -> dict[str, Any]:
        """Convert address to dictionary of PAF fields."""
        return self.model_dump()

    @property
    def thoroughfares(self) -> list[str]:
        """Dependent thoroughfare and thoroughfare, in print order."""
        return [t for t in (self.DependentThoroughfare, self.Thoroughfare) if t]

    @property
    def localities(self) -> list[str]:
        """Double dependent locality and dependent locality, in print order."""
        return [loc for loc in (self.DoubleDependentLocality, self.DependentLocality) if loc]

    def validate_external_results(self, validation_result: ValidationResult) -> None:
        """Raise PafAddressError for postcode and UDPRN validation errors.

        Args:
            validation_result: Validation result from external validators.

        Raises:
            PafAddressError: For postcode and UDPRN validation errors.
        """
        for error in validation_result.errors:
            if error.field in _RAISING_FIELDS:
                self.add_error(
                    error.field,
                    error.message,
                    value=error.value,
                    raise_exception=True,
                    error_type=ADDRESS_VALIDATION,
                )
