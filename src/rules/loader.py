from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import WorksheetRules


def load_rules(path: Path) -> WorksheetRules:
    """
    Parse rules.yaml into WorksheetRules.

    Missing sections and an empty file fall back to the built-in defaults.

    Raises:
        FileNotFoundError: path does not exist
        ValueError: the YAML is malformed or fails schema validation
    """
    try:
        text = path.read_text()
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Rules file not found at: {path}") from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return WorksheetRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(path: Path | None) -> WorksheetRules:
    """Load rules from path when it exists, otherwise the built-in defaults."""
    if path is None or not path.exists():
        return WorksheetRules()
    return load_rules(path)
