import os

import pytest

from bmi_engine import HeightUnit, Measurement, WeightUnit


@pytest.fixture(scope="session")
def fpath_app() -> str:
    """
    Path to the Streamlit page script at the repository root.
    """
    return os.path.join(os.path.dirname(__file__), "..", "app.py")


@pytest.fixture
def metric_measurement() -> Measurement:
    return Measurement(age=30, height=180, height_unit=HeightUnit.CM, weight=75, weight_unit=WeightUnit.KG)


@pytest.fixture
def imperial_measurement() -> Measurement:
    return Measurement(age=25, height=5.9, height_unit=HeightUnit.FT, weight=160, weight_unit=WeightUnit.LBS)


@pytest.fixture(autouse=True)
def clear_bmi_env(monkeypatch):
    """Keep BMI_* variables from the developer's shell out of the settings."""
    for name in list(os.environ):
        if name.startswith("BMI_"):
            monkeypatch.delenv(name)
