"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator starting at 0."""
    from treecalc import Calculator

    return Calculator()


@pytest.fixture
def calculator_with_history():
    """Provide a Calculator after 0 -> +5 -> *3 -> -1."""
    from treecalc import Calculator

    return Calculator().add(5).multiply(3).subtract(1)


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        0,
        1,
        -1,
        0.5,
        -0.5,
        100,
        -100,
        1e10,
        -1e10,
        1e-10,
        -1e-10,
        0.1 + 0.2,  # Floating point edge case
    ]
