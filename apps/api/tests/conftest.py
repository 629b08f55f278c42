"""
Pytest configuration and fixtures

The plan engine is pure: no database, no network. Fixtures build request
objects and plan dicts; ConfigService is reset around every test so
in-memory overrides never leak.
"""
import pytest
import sys
import os
from copy import deepcopy
from typing import Any, Dict

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.plan_engine import ConfigService, TrainingPreferencesInput
from tests.plan_validation_helpers import VALID_PLAN, make_preferences


@pytest.fixture(autouse=True)
def _reset_plan_config():
    """Every test starts from the built-in plan rules."""
    original_dir = ConfigService._config_dir
    ConfigService._config = None
    yield
    ConfigService._config_dir = original_dir
    ConfigService._config = None


@pytest.fixture
def valid_plan() -> Dict[str, Any]:
    """A fresh, minimal plan that passes validation."""
    return deepcopy(VALID_PLAN)


@pytest.fixture
def intermediate_preferences() -> TrainingPreferencesInput:
    """13-week intermediate request (2025-03-15 to 2025-06-14), Sunday long runs."""
    return make_preferences()
