from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from paf_address_utils.core.line_assembler import AddressLineAssembler
from paf_address_utils.models import (
    ASSEMBLY_COLUMNS,
    AssemblyResult,
    PafAddress,
    PafAddressError,
    PafValidationError,
)
from paf_address_utils.validation.validators import create_default_validators

if TYPE_CHECKING:
    import pandas as pd

    from paf_address_utils.protocols import AddressAssemblerProtocol, ValidatorProtocol

logger = logging.getLogger(__name__)

AddressInput = PafAddress | Mapping[str, Any]


class PafAddressService:
    """High-level facade for PAF address assembly.

    Orchestrates model validation, the validator pipeline and the line
    assembler to provide a simple API for common formatting tasks.

    Example:
        >>> service = PafAddressService()
        >>> result = service.assemble(
        ...     {"BuildingNumber": 1, "Thoroughfare": "High Street",
        ...      "PostTown": "Leeds", "Postcode": "ls1 1aa"}
        ... )
        >>> result.lines
        ['1 High Street']

        # Without postcode/UDPRN validation
        >>> result = service.assemble(address, validate=False)

        # Custom components
        >>> service = PafAddressService(
        ...     assembler=AddressLineAssembler(uppercase_post_town=False)
        ... )
    """

    def __init__(
        self,
        assembler: AddressAssemblerProtocol | None = None,
        validator: ValidatorProtocol | None = None,
        strict_postcode: bool = True,
        check_udprn: bool = True,
    ) -> None:
        """Initialize the service.

        Args:
            assembler: Assembler implementation. Defaults to AddressLineAssembler.
            validator: Validator implementation. Defaults to composite validator.
            strict_postcode: If True, the default validator checks postcode format.
            check_udprn: If True, the default validator checks the UDPRN range.
        """
        self._assembler = assembler or AddressLineAssembler()

        if validator is not None:
            self._validator = validator
        else:
            self._validator = create_default_validators(
                strict_postcode=strict_postcode,
                check_udprn=check_udprn,
            )

    @property
    def assembler(self) -> AddressAssemblerProtocol:
        """Get the assembler instance."""
        return self._assembler

    @property
    def validator(self) -> ValidatorProtocol:
        """Get the validator instance."""
        return self._validator

    def to_address(self, address: AddressInput) -> PafAddress:
        """Coerce a mapping of PAF fields into a PafAddress.

        Raises:
            PafValidationError: If the fields do not form a valid address.
        """
        if isinstance(address, PafAddress):
            return address
        try:
            return PafAddress.model_validate(dict(address))
        except ValidationError as e:
            raise PafValidationError(e) from e

    def assemble(
        self,
        address: AddressInput,
        *,
        validate: bool = True,
    ) -> AssemblyResult:
        """Assemble the address lines for a single address.

        Args:
            address: PafAddress, or a mapping of PAF field names to values.
            validate: If True, run the validator pipeline before assembly.

        Returns:
            AssemblyResult containing the lines and the rule that fired.

        Raises:
            PafValidationError: If a mapping does not form a valid address.
            PafAddressError: If validation finds a bad postcode or UDPRN.
        """
        paf_address = self.to_address(address)

        if validate:
            validation = self._validator.validate(paf_address)
            # Postcode/UDPRN errors raise PafAddressError
            paf_address.validate_external_results(validation)

        return self._assembler.assemble(paf_address)

    def assemble_batch(
        self,
        addresses: Sequence[AddressInput],
        *,
        validate: bool = True,
        errors: str = "raise",
    ) -> list[AssemblyResult | None]:
        """Assemble multiple addresses.

        Args:
            addresses: Sequence of addresses or field mappings.
            validate: If True, validate each address before assembly.
            errors: How to handle errors:
                - "raise": Raise on the first failure
                - "coerce": Put None in place of each failure

        Returns:
            List of AssemblyResult objects, in input order.
        """
        results: list[AssemblyResult | None] = []
        for index, address in enumerate(addresses):
            try:
                results.append(self.assemble(address, validate=validate))
            except (PafAddressError, PafValidationError) as e:
                if errors == "raise":
                    raise
                logger.warning("Could not assemble address %d: %s", index, e)
                results.append(None)
        return results

    def format_address(
        self,
        address: AddressInput,
        *,
        separator: str = "\n",
        include_locality: bool = True,
        validate: bool = True,
    ) -> str:
        """Assemble an address and join its lines into one string.

        Args:
            address: PafAddress, or a mapping of PAF field names to values.
            separator: String placed between lines.
            include_locality: If True, append localities, post town and postcode.
            validate: If True, validate the address before assembly.

        Returns:
            The formatted address.
        """
        result = self.assemble(address, validate=validate)
        return result.to_string(separator=separator, include_locality=include_locality)

    # -------------------------------------------------------------------------
    # Pandas integration methods
    # -------------------------------------------------------------------------

    def to_series(
        self,
        row: AddressInput,
        *,
        validate: bool = True,
        errors: str = "coerce",
    ) -> pd.Series:
        """Assemble an address and return a pandas Series.

        Args:
            row: PafAddress or mapping (a DataFrame row works) of PAF fields.
            validate: If True, validate the address before assembly.
            errors: How to handle errors ("raise" or "coerce").

        Returns:
            Series indexed by AddressLines, AssemblyRule and FormattedAddress.
        """
        import pandas as pd

        if isinstance(row, pd.Series):
            row = {key: value for key, value in row.items() if pd.notna(value)}

        try:
            return pd.Series(self.assemble(row, validate=validate).to_dict())
        except (PafAddressError, PafValidationError):
            if errors == "raise":
                raise
            return pd.Series({column: None for column in ASSEMBLY_COLUMNS})

    def assemble_dataframe(
        self,
        df: pd.DataFrame,
        *,
        validate: bool = True,
        errors: str = "coerce",
        prefix: str = "",
        inplace: bool = False,
    ) -> pd.DataFrame:
        """Assemble every row of a DataFrame of PAF fields.

        Columns are matched to PAF fields by name or alias; other columns are
        ignored.

        Args:
            df: Input DataFrame, one address per row.
            validate: If True, validate each address.
            errors: "coerce" (None for failures) or "raise".
            prefix: Prefix for new column names.
            inplace: If True, modify df in place.

        Returns:
            DataFrame with AddressLines, AssemblyRule and FormattedAddress columns.
        """
        import pandas as pd

        if not inplace:
            df = df.copy()

        if df.empty:
            assembled = pd.DataFrame(columns=ASSEMBLY_COLUMNS, index=df.index)
        else:
            assembled = df.apply(
                lambda row: self.to_series(row, validate=validate, errors=errors),
                axis=1,
            )

        for column in ASSEMBLY_COLUMNS:
            df[f"{prefix}{column}"] = assembled[column]

        return df


# Module-level convenience function
_default_service: PafAddressService | None = None


def get_default_service() -> PafAddressService:
    """Get the default PafAddressService singleton.

    Returns:
        Shared PafAddressService instance with default configuration.
    """
    global _default_service
    if _default_service is None:
        _default_service = PafAddressService()
    return _default_service


def assemble_address_lines(fields: AddressInput, *, validate: bool = True) -> AssemblyResult:
    """Assemble address lines using the default service.

    Convenience function for quick formatting.

    Args:
        fields: PafAddress, or a mapping of PAF field names to values.
        validate: If True, validate the address before assembly.

    Returns:
        AssemblyResult containing the lines and debug information.
    """
    return get_default_service().assemble(fields, validate=validate)


def format_address(
    fields: AddressInput,
    *,
    separator: str = "\n",
    include_locality: bool = True,
) -> str:
    """Format an address as a single string using the default service."""
    return get_default_service().format_address(
        fields, separator=separator, include_locality=include_locality
    )


__all__ = [
    "PafAddressService",
    "assemble_address_lines",
    "format_address",
    "get_default_service",
]
