"""Pytest configuration for the mf2validate test suite.

Hypothesis profiles:
- dev: default for local runs (200 examples)
- ci: selected automatically when CI=true (50 examples, derandomized)
- verbose: progress output while debugging a property (100 examples)

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked @pytest.mark.fuzz only run when selected with `pytest -m fuzz`.
"""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from mf2validate.plural_categories import StaticPluralCategories
from tests.strategies import PLURAL_TABLE

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 200},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(
        _name, suppress_health_check=[HealthCheck.too_slow], **_options  # type: ignore[arg-type]
    )


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


@pytest.fixture
def static_provider() -> StaticPluralCategories:
    """Plural categories pinned to a CLDR snapshot, independent of Babel."""
    return StaticPluralCategories(dict(PLURAL_TABLE))


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless the run selects them with -m."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test: run with pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)
