from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd

    from paf_address_utils.service import PafAddressService


class PafAddressAccessor:
    """Pandas accessor for PAF address assembly.

    Provides convenient methods for assembling address lines directly
    on DataFrames whose columns are PAF fields.

    Usage:
        >>> from paf_address_utils.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame(
        ...     {"BuildingNumber": [1], "Thoroughfare": ["High Street"],
        ...      "PostTown": ["Leeds"], "Postcode": ["LS1 1AA"]}
        ... )
        >>> df.paf.assemble()
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj
        self._service: PafAddressService | None = None

    def _get_service(self) -> PafAddressService:
        """Get or create the PafAddressService instance."""
        if self._service is None:
            from paf_address_utils.service import PafAddressService

            self._service = PafAddressService()
        return self._service

    def assemble(
        self,
        *,
        validate: bool = True,
        errors: str = "coerce",
        service: PafAddressService | None = None,
    ) -> pd.DataFrame:
        """Assemble the address in each row.

        Args:
            validate: If True, validate postcodes and UDPRNs.
            errors: How to handle errors ("raise" or "coerce").
            service: Optional PafAddressService to use.

        Returns:
            DataFrame with AddressLines, AssemblyRule and FormattedAddress columns.
        """
        from paf_address_utils.models import ASSEMBLY_COLUMNS

        svc = service or self._get_service()
        assembled = svc.assemble_dataframe(self._obj, validate=validate, errors=errors)
        return assembled[ASSEMBLY_COLUMNS]


def register_accessor(name: str = "paf") -> None:
    """Register the PAF accessor on pandas DataFrames.

    After calling this, you can use:
        >>> df.paf.assemble()

    Args:
        name: Name for the accessor (default: "paf").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(PafAddressAccessor)


def assemble_addresses(
    df: pd.DataFrame,
    validate: bool = True,
    errors: str = "coerce",
    prefix: str = "",
    inplace: bool = False,
) -> pd.DataFrame:
    """Assemble addresses in a DataFrame and add the result columns.

    Note: Prefer using PafAddressService.assemble_dataframe() instead.

    Args:
        df: Input DataFrame with one PAF address per row.
        validate: If True, validate postcodes and UDPRNs.
        errors: How to handle failures ("raise" or "coerce").
        prefix: Prefix to add to new column names.
        inplace: If True, modify DataFrame in place.

    Returns:
        DataFrame with new AddressLines, AssemblyRule and FormattedAddress columns.
    """
    from paf_address_utils.service import get_default_service

    service = get_default_service()
    return service.assemble_dataframe(
        df,
        validate=validate,
        errors=errors,
        prefix=prefix,
        inplace=inplace,
    )
