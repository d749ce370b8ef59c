import os
import threading
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.components.numeric import FactorialCache, NumericConfig, create_factorial_cache
from src.components.payroll import PayrollRegistry, create_payroll_registry
from src.components.rainfall import RainfallConfig
from src.components.table import TableConfig
from src.components.text import TextConfig
from src.rules.loader import load_rules_or_default
from src.rules.models import WorksheetRules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("WORKSHEET_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> WorksheetRules:
    return load_rules_or_default(settings.rules_path)


# --- Component Config ---
def get_numeric_config(rules: WorksheetRules = Depends(get_rules)) -> NumericConfig:
    return NumericConfig.from_rules(rules)


def get_table_config(rules: WorksheetRules = Depends(get_rules)) -> TableConfig:
    return TableConfig.from_rules(rules)


def get_text_config(rules: WorksheetRules = Depends(get_rules)) -> TextConfig:
    return TextConfig.from_rules(rules)


def get_rainfall_config(rules: WorksheetRules = Depends(get_rules)) -> RainfallConfig:
    return RainfallConfig.from_rules(rules)


# --- Process-lifetime State ---
@lru_cache
def get_factorial_cache() -> FactorialCache:
    """Factorial memo shared by every request."""
    return create_factorial_cache()


# Employee registry singleton; built from the first rules it is handed
_payroll_registry_instance: PayrollRegistry | None = None
_payroll_registry_lock = threading.Lock()


def get_payroll_registry(rules: WorksheetRules = Depends(get_rules)) -> PayrollRegistry:
    """Employee registry shared by every request; lives until shutdown."""
    global _payroll_registry_instance
    with _payroll_registry_lock:
        if _payroll_registry_instance is None:
            _payroll_registry_instance = create_payroll_registry(rules)
    return _payroll_registry_instance


def reset_payroll_registry() -> None:
    """Forget the registry so the next request builds a fresh one."""
    global _payroll_registry_instance
    _payroll_registry_instance = None
