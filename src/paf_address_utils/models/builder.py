"""Address builder for programmatic address construction.

This module provides a fluent builder interface for constructing
PafAddress objects with validation at build time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from pydantic import ValidationError

from paf_address_utils.models.enums import PAF_FIELDS, PafField
from paf_address_utils.models.errors import (
    ADDRESS_BUILDER,
    PACKAGE_NAME,
    PafAddressError,
    PafValidationError,
)

if TYPE_CHECKING:
    from paf_address_utils.models.address import PafAddress

_REQUIRED_FIELDS = (PafField.POST_TOWN.value, PafField.POSTCODE.value)


class PafAddressBuilder:
    """Builder for programmatic PafAddress construction.

    Provides a fluent interface for building PafAddress objects
    with validation at build time.

    Example:
        >>> address = (
        ...     PafAddressBuilder()
        ...     .with_organisation_name("Test Organisation")
        ...     .with_building_number(123)
        ...     .with_thoroughfare("Test Street")
        ...     .with_post_town("Test Town")
        ...     .with_postcode("AB12 3CD")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def with_organisation_name(self, name: str) -> Self:
        """Set the organisation name."""
        self._data["OrganisationName"] = name
        return self

    def with_department_name(self, name: str) -> Self:
        """Set the department name."""
        self._data["DepartmentName"] = name
        return self

    def with_sub_building_name(self, name: str) -> Self:
        """Set the sub-building name (e.g. 'Flat 1')."""
        self._data["SubBuildingName"] = name
        return self

    def with_building_name(self, name: str) -> Self:
        """Set the building name."""
        self._data["BuildingName"] = name
        return self

    def with_building_number(self, number: int) -> Self:
        """Set the building number."""
        self._data["BuildingNumber"] = number
        return self

    def with_dependent_thoroughfare(self, thoroughfare: str) -> Self:
        """Set the dependent thoroughfare (e.g. an industrial estate)."""
        self._data["DependentThoroughfare"] = thoroughfare
        return self

    def with_thoroughfare(self, thoroughfare: str) -> Self:
        """Set the thoroughfare (street)."""
        self._data["Thoroughfare"] = thoroughfare
        return self

    def with_double_dependent_locality(self, locality: str) -> Self:
        self._data["DoubleDependentLocality"] = locality
        return self

    def with_dependent_locality(self, locality: str) -> Self:
        self._data["DependentLocality"] = locality
        return self

    def with_post_town(self, post_town: str) -> Self:
        """Set the post town."""
        self._data["PostTown"] = post_town
        return self

    def with_postcode(self, postcode: str) -> Self:
        """Set the postcode."""
        self._data["Postcode"] = postcode
        return self

    def with_udprn(self, udprn: int) -> Self:
        """Set the Unique Delivery Point Reference Number."""
        self._data["UDPRN"] = udprn
        return self

    def with_field(self, field: str | PafField, value: Any) -> Self:
        """Set an arbitrary field by name or enum."""
        field_name = field.value if isinstance(field, PafField) else field
        if field_name not in PAF_FIELDS:
            raise PafAddressError(
                ADDRESS_BUILDER,
                "Unknown PAF field: {field}",
                {"package": PACKAGE_NAME, "field": field_name},
            )
        self._data[field_name] = value
        return self

    def build(self) -> PafAddress:
        """Build the PafAddress object.

        Returns:
            Validated, immutable PafAddress.

        Raises:
            PafAddressError: If PostTown or Postcode is missing or blank.
            PafValidationError: If any other field fails validation.
        """
        from paf_address_utils.models.address import PafAddress

        for field_name in _REQUIRED_FIELDS:
            value = self._data.get(field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise PafAddressError.missing_field(field_name)

        try:
            return PafAddress.model_validate(self._data)
        except ValidationError as e:
            raise PafValidationError.from_validation_error(e) from e

    def reset(self) -> Self:
        """Reset the builder to empty state."""
        self._data = {}
        return self
