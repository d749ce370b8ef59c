from collections.abc import Iterator
from pathlib import Path

import pytest

from src.api import deps
from src.rules.loader import load_rules
from src.rules.models import WorksheetRules


@pytest.fixture(autouse=True)
def reset_api_state() -> Iterator[None]:
    """
    Drop process-lifetime API state between tests.

    Settings, rules, the factorial cache and the payroll registry are
    lru-cached singletons; a test must not see another test's employees.
    """
    yield
    deps.get_settings.cache_clear()
    deps.get_rules.cache_clear()
    deps.get_factorial_cache.cache_clear()
    deps.reset_payroll_registry()


@pytest.fixture
def project_rules() -> WorksheetRules:
    """The rules.yaml shipped at the project root."""
    rules_path = Path(__file__).parent.parent / "rules.yaml"
    return load_rules(rules_path)
