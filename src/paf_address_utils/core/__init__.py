"""PAF Address Utils Core - name classification and line assembly.

Usage:
    from paf_address_utils.core import (
        # Name classification
        NameClassification,
        classify_name,
        EXCEPTION_4_KEYWORDS,
        # Building name splitting
        BuildingNameSplit,
        split_building_name,
        # Line assembly
        AddressLineAssembler,
        get_assembler,
        # Postcodes
        PostcodeNormalizer,
    )
"""

from __future__ import annotations

from paf_address_utils.core.building_name import BuildingNameSplit, split_building_name
from paf_address_utils.core.line_assembler import (
    AddressLineAssembler,
    get_assembler,
    select_rule,
)
from paf_address_utils.core.name_classifier import (
    EXCEPTION_4_KEYWORDS,
    NameClassification,
    classify_name,
    is_exception_4_keyword,
)
from paf_address_utils.core.postcode import (
    PostcodeNormalizer,
    PostcodeResult,
    get_postcode_normalizer,
)

__all__ = [
    # Name classification
    "EXCEPTION_4_KEYWORDS",
    "NameClassification",
    "classify_name",
    "is_exception_4_keyword",
    # Building name splitting
    "BuildingNameSplit",
    "split_building_name",
    # Line assembly
    "AddressLineAssembler",
    "get_assembler",
    "select_rule",
    # Postcode normalization
    "PostcodeNormalizer",
    "PostcodeResult",
    "get_postcode_normalizer",
]
