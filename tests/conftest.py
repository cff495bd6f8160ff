# tests/conftest.py
"""
Pytest configuration and shared fixtures for all tests
Automatically sets up project imports and provides common utilities
"""

import sys
from pathlib import Path

import pytest

# Calculate project root and add to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def get_project_root():
    """Get project root directory for path calculations"""
    return PROJECT_ROOT


class ScriptedRandomSource:
    """
    RandomSource that replays fixed draws

    permutation() returns the next queued arrangement, choice() returns the
    next queued value, which must be one of the offered items.
    """

    def __init__(self, permutations=None, choices=None):
        self.permutations = list(permutations or [])
        self.choices = list(choices or [])
        self.choice_calls = []

    def permutation(self, items):
        arrangement = list(self.permutations.pop(0))
        assert sorted(arrangement, key=str) == sorted(items, key=str), \
            f"Scripted arrangement {arrangement} is not a permutation of {items}"
        return arrangement

    def choice(self, items):
        self.choice_calls.append(tuple(items))
        value = self.choices.pop(0)
        assert value in items, f"Scripted choice {value} not in {items}"
        return value


@pytest.fixture
def test_context(request):
    """
    A per-scenario context dict with scenario name pre-attached.
    """
    ctx = {}
    # __scenario__ is attached by pytest-bdd
    scenario = getattr(getattr(request.node, "_obj", None), "__scenario__", None)
    if scenario:
        ctx["scenario_name"] = scenario.name
    else:
        ctx["scenario_name"] = request.node.name  # fallback
    return ctx


@pytest.fixture
def scripted_rng_factory():
    """Factory for random sources that replay fixed draws"""
    return ScriptedRandomSource
