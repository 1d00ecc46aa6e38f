"""Address validation implementations.

This module provides validator implementations for validating
PAF address fields before assembly.
"""

from abstract_validation_base import CompositeValidator, ValidatorPipelineBuilder

from paf_address_utils.validation.base import BaseValidator
from paf_address_utils.validation.validators import (
    PostcodeFormatValidator,
    UdprnValidator,
    create_default_validators,
    validate_postcode,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "PostcodeFormatValidator",
    "UdprnValidator",
    "create_default_validators",
    "validate_postcode",
]
