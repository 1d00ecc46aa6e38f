"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from paf_address_utils import AddressLineAssembler, PafAddressService

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def base_fields() -> dict[str, object]:
    """Required fields plus a thoroughfare."""
    return {
        "PostTown": "Test Town",
        "Postcode": "AB12 3CD",
        "Thoroughfare": "Test Street",
    }


@pytest.fixture
def assembler() -> AddressLineAssembler:
    return AddressLineAssembler()


@pytest.fixture
def service() -> PafAddressService:
    return PafAddressService()
