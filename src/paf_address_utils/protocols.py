from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from abstract_validation_base import ValidationResult

    from paf_address_utils.models import AssemblyResult, PafAddress


@runtime_checkable
class AddressAssemblerProtocol(Protocol):
    """Protocol for address line assembly implementations.

    Implementations turn a PafAddress into ordered print lines and
    report which rule produced them.
    """

    def assemble(self, address: PafAddress) -> AssemblyResult:
        """Assemble the address lines for a single address.

        Args:
            address: Address to format.

        Returns:
            AssemblyResult containing the lines and the rule that fired.
        """
        ...


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for address validation implementations.

    Implementations validate specific aspects of an address
    (postcode, UDPRN, etc.) and return validation results.
    """

    def validate(self, address: PafAddress) -> ValidationResult:
        """Validate an address.

        Args:
            address: PafAddress object to validate.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...
