"""PAF address models package.

This package contains the address model, builder, results and the
enumerations and errors they share.
"""

from __future__ import annotations  # noqa: I001

# Import order matters for avoiding circular imports
from paf_address_utils.models.errors import (
    PACKAGE_NAME,
    PafAddressError,
    PafValidationError,
)
from paf_address_utils.models.enums import (
    ASSEMBLY_COLUMNS,
    PAF_FIELDS,
    AssemblyRule,
    NameException,
    PafField,
)
from paf_address_utils.models.address import PafAddress
from paf_address_utils.models.builder import PafAddressBuilder
from paf_address_utils.models.results import AssemblyResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "PafAddressError",
    "PafValidationError",
    # Enums and constants
    "PafField",
    "PAF_FIELDS",
    "ASSEMBLY_COLUMNS",
    "NameException",
    "AssemblyRule",
    # Address model
    "PafAddress",
    # Results
    "AssemblyResult",
    # Builder
    "PafAddressBuilder",
]
