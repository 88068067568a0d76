"""Shared fixtures for the Stair Mesh Studio test suite."""
import sys
import os
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from staircase_single import DEFAULT_CONFIG as SINGLE_DEFAULTS
from staircase_stairwell import DEFAULT_CONFIG as STAIRWELL_DEFAULTS


@pytest.fixture
def default_single_config():
    """Returns a copy of the default single flight configuration."""
    return SINGLE_DEFAULTS.copy()


@pytest.fixture
def default_stairwell_config():
    """Returns a copy of the default stairwell configuration."""
    config = STAIRWELL_DEFAULTS.copy()
    config["levels"] = list(config["levels"])
    return config


@pytest.fixture
def scenario_b_config():
    """Two 8-step levels joined by a 1200 x 1200 landing."""
    return {
        "step_height": 180.0,
        "step_length": 280.0,
        "stair_width": 1000.0,
        "platform_width": 1200.0,
        "platform_depth": 1200.0,
        "levels": [8, 8],
    }
