from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from paf_address_utils.core.postcode import PostcodeNormalizer

if TYPE_CHECKING:
    from paf_address_utils.models import PafAddress

# UDPRNs are at most eight digits
MAX_UDPRN = 99_999_999


class PostcodeFormatValidator(BaseValidator["PafAddress"]):
    """Validates the UK postcode format (outward and inward code).

    This is a fast format validator that doesn't require
    external lookups - it only checks the shape is correct.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "postcode_format"

    def validate(self, address: PafAddress) -> ValidationResult:
        """Validate the postcode format.

        Args:
            address: Address to validate.

        Returns:
            ValidationResult with any format errors.
        """
        result = ValidationResult(is_valid=True)
        cleaned, error = validate_postcode(address.Postcode)
        if error:
            result.add_error("Postcode", error, address.Postcode)
        return result


class UdprnValidator(BaseValidator["PafAddress"]):
    """Validates that a UDPRN, when present, fits in eight digits."""

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "udprn"

    def validate(self, address: PafAddress) -> ValidationResult:
        result = ValidationResult(is_valid=True)
        if address.UDPRN is not None and address.UDPRN > MAX_UDPRN:
            result.add_error(
                field="UDPRN",
                message=f"UDPRN must be at most 8 digits: {address.UDPRN}",
                value=address.UDPRN,
            )
        return result


def create_default_validators(
    strict_postcode: bool = True,
    check_udprn: bool = True,
) -> CompositeValidator[PafAddress]:
    """Create default address validation pipeline.

    Uses ValidatorPipelineBuilder to construct a composable
    validation pipeline.

    Args:
        strict_postcode: If True, include the postcode format validator.
        check_udprn: If True, include the UDPRN range validator.

    Returns:
        CompositeValidator with default validators configured.
    """
    builder: ValidatorPipelineBuilder[PafAddress] = ValidatorPipelineBuilder("paf_validation")

    if strict_postcode:
        builder.add(PostcodeFormatValidator())
    if check_udprn:
        builder.add(UdprnValidator())

    return builder.build()


# Module-level normalizer instance for validation functions
_postcode_normalizer = PostcodeNormalizer()


def validate_postcode(postcode: str | None) -> tuple[str | None, str | None]:
    """Validate a UK postcode.

    Delegates to PostcodeNormalizer.validate() for consistent validation.

    Args:
        postcode: The postcode string to validate.

    Returns:
        Tuple of (cleaned_value, error_message).
        cleaned_value is None if invalid.
        error_message is None if valid.
    """
    return _postcode_normalizer.validate(postcode)
