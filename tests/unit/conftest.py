"""Unit test configuration.

Isolates tests from HEALTHMETRICS_* variables set in the developer's
shell or a local .env file.
"""

import os

import pytest

from healthmetrics.domain.measurement import Measurement
from healthmetrics.domain.shared.anthropometric_profile import AnthropometricProfile, Sex


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Remove engine settings so defaults apply unless a test sets them."""
    for name in list(os.environ):
        if name.startswith("HEALTHMETRICS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def full_profile() -> AnthropometricProfile:
    """Complete male profile, 80 kg / 180 cm / 30 years."""
    return AnthropometricProfile(
        weight=Measurement(80.0, "kg"),
        height=Measurement(180.0, "cm"),
        arm_length=Measurement(60.0, "cm"),
        leg_length=Measurement(90.0, "cm"),
        body_fat_percentage=Measurement(18.0, "%"),
        tape_measurements={"waist": Measurement(84.0, "cm")},
        age=30,
        sex=Sex.MALE,
    )
