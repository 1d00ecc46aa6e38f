"""paf-address-utils: Royal Mail PAF address line assembly.

This package turns the discrete fields of a UK Postcode Address File record
into the ordered lines printed on an envelope, with:
- The PAF rules 1 to 7 and the c1 case
- Classification of exception shaped building and sub-building names
- Splitting of "<name> <number>" building names
- Composable postcode/UDPRN validators
- Pandas integration
- Builder pattern for programmatic address construction

Quick Start:
    >>> from paf_address_utils import PafAddressService
    >>> service = PafAddressService()
    >>> result = service.assemble(
    ...     {
    ...         "BuildingName": "Rose Cottage",
    ...         "BuildingNumber": 12,
    ...         "Thoroughfare": "Church Lane",
    ...         "PostTown": "Ambridge",
    ...         "Postcode": "ab12 3cd",
    ...     }
    ... )
    >>> result.lines
    ['Rose Cottage', '12 Church Lane']
    >>> result.debug["rule"]
    4

    # Pandas integration
    >>> import pandas as pd
    >>> df = pd.DataFrame([{"Thoroughfare": "Church Lane", "PostTown": "Ambridge",
    ...                     "Postcode": "AB12 3CD"}])
    >>> result_df = service.assemble_dataframe(df)

    # Build addresses programmatically
    >>> from paf_address_utils import PafAddressBuilder
    >>> address = (
    ...     PafAddressBuilder()
    ...     .with_sub_building_name("Flat 1")
    ...     .with_building_number(12)
    ...     .with_thoroughfare("Church Lane")
    ...     .with_post_town("Ambridge")
    ...     .with_postcode("AB12 3CD")
    ...     .build()
    ... )
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from abstract_validation_base import ProcessEntry, ProcessLog, ValidationResult

from paf_address_utils.core import (
    EXCEPTION_4_KEYWORDS,
    AddressLineAssembler,
    BuildingNameSplit,
    NameClassification,
    PostcodeNormalizer,
    PostcodeResult,
    classify_name,
    get_assembler,
    select_rule,
    split_building_name,
)
from paf_address_utils.models import (
    ASSEMBLY_COLUMNS,
    PAF_FIELDS,
    AssemblyResult,
    AssemblyRule,
    NameException,
    PafAddress,
    PafAddressBuilder,
    PafAddressError,
    PafField,
    PafValidationError,
)
from paf_address_utils.pandas_ext import assemble_addresses, register_accessor
from paf_address_utils.protocols import AddressAssemblerProtocol, ValidatorProtocol
from paf_address_utils.service import (
    PafAddressService,
    assemble_address_lines,
    format_address,
    get_default_service,
)
from paf_address_utils.validation import (
    BaseValidator,
    CompositeValidator,
    PostcodeFormatValidator,
    UdprnValidator,
    create_default_validators,
    validate_postcode,
)
from paf_address_utils.validation.base import PafValidationBase, ValidationBase

__version__ = "0.1.0"
__package_name__ = "paf-address-utils"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "PafAddressService",
    "get_default_service",
    "assemble_address_lines",
    "format_address",
    # Models
    "PafAddress",
    "PafAddressBuilder",
    "AssemblyResult",
    "PafField",
    "PAF_FIELDS",
    "ASSEMBLY_COLUMNS",
    "AssemblyRule",
    "NameException",
    # Errors
    "PafAddressError",
    "PafValidationError",
    # Assembly
    "AddressLineAssembler",
    "get_assembler",
    "select_rule",
    # Name handling
    "EXCEPTION_4_KEYWORDS",
    "NameClassification",
    "classify_name",
    "BuildingNameSplit",
    "split_building_name",
    # Postcodes
    "PostcodeNormalizer",
    "PostcodeResult",
    # Validation
    "BaseValidator",
    "CompositeValidator",
    "PostcodeFormatValidator",
    "UdprnValidator",
    "create_default_validators",
    "validate_postcode",
    "ValidationResult",
    # Process logging
    "ProcessEntry",
    "ProcessLog",
    # Validation base classes
    "ValidationBase",
    "PafValidationBase",
    # Protocols
    "AddressAssemblerProtocol",
    "ValidatorProtocol",
    # Pandas
    "register_accessor",
    "assemble_addresses",
]
