"""PAF field, name-exception and assembly-rule enumerations."""

from __future__ import annotations

from enum import Enum


class PafField(str, Enum):
    """Enumeration of all PAF address fields used for line assembly."""

    ORGANISATION_NAME = "OrganisationName"
    DEPARTMENT_NAME = "DepartmentName"
    SUB_BUILDING_NAME = "SubBuildingName"
    BUILDING_NAME = "BuildingName"
    BUILDING_NUMBER = "BuildingNumber"
    DEPENDENT_THOROUGHFARE = "DependentThoroughfare"
    THOROUGHFARE = "Thoroughfare"
    DOUBLE_DEPENDENT_LOCALITY = "DoubleDependentLocality"
    DEPENDENT_LOCALITY = "DependentLocality"
    POST_TOWN = "PostTown"
    POSTCODE = "Postcode"
    UDPRN = "UDPRN"


class NameException(str, Enum):
    """Shape classes for building and sub-building names.

    The numbered exceptions follow the Royal Mail programmers guide and
    control how a name is punctuated or merged with the following line.
    """

    NONE = "none"
    EXCEPTION_1 = "exception_1"
    """First and last characters are numeric (e.g. '1to1', '12-34')."""

    EXCEPTION_2 = "exception_2"
    """First and penultimate characters numeric, last alphabetic (e.g. '12A')."""

    EXCEPTION_3 = "exception_3"
    """A single alphabetic character (e.g. 'A')."""

    EXCEPTION_4 = "exception_4"
    """Keyword prefix followed by a numeric range or alpha suffix (e.g. 'Unit 1-2')."""


class AssemblyRule(Enum):
    """Rule that produced a set of address lines."""

    RULE_1 = 1
    RULE_2 = 2
    RULE_3 = 3
    RULE_4 = 4
    RULE_5 = 5
    RULE_6 = 6
    RULE_7 = 7
    C1 = "c1"
    FALLBACK = "fallback"


# All field names as a list
PAF_FIELDS: list[str] = [f.value for f in PafField]

# Columns produced by tabular assembly
ASSEMBLY_COLUMNS: list[str] = ["AddressLines", "AssemblyRule", "FormattedAddress"]
