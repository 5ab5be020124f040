"""
Configuration Loader (``contract_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into the frozen
``contract_config.schema`` dataclasses.  Runtime callers go through
``contract_config.get_active_config()`` instead of calling this directly.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Non-numeric tolerance  -> ``ValueError`` propagates.
* Facade entry that is neither a mapping nor a policy string
  -> ``ValueError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from contract_config.schema import CheckerConfiguration, FacadeConfig


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the top-level document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def parse_facade(name: str, data: Any) -> FacadeConfig:
    """Parse one facade entry: ``{on_fail: raise}`` or the shorthand ``raise``."""
    if isinstance(data, str):
        return FacadeConfig(name=name, on_fail=data)
    if isinstance(data, dict):
        return FacadeConfig(name=name, on_fail=str(data["on_fail"]))
    raise ValueError(f"Facade {name!r}: expected a mapping or policy name, got {data!r}")


def parse_configuration(
    data: dict[str, Any], source: str | None = None
) -> CheckerConfiguration:
    """
    Parse a ``CheckerConfiguration`` from a dict.

    Missing keys take the schema defaults.  No semantic validation happens
    here; see ``contract_config.validator``.
    """
    defaults = CheckerConfiguration()
    facades_raw = data.get("facades") or {}
    if not isinstance(facades_raw, dict):
        raise ValueError(f"'facades' must be a mapping, got {facades_raw!r}")

    return CheckerConfiguration(
        # PyYAML reads exponent floats without a dot ("1e-5") as strings.
        float_tolerance=float(data.get("float_tolerance", defaults.float_tolerance)),
        location_style=str(data.get("location_style", defaults.location_style)),
        # Kept as loaded; the validator rejects non-int / non-bool values.
        snippet_length=data.get("snippet_length", defaults.snippet_length),
        capture_locations=data.get("capture_locations", defaults.capture_locations),
        lenient=data.get("lenient", defaults.lenient),
        facades=tuple(
            parse_facade(str(name), entry) for name, entry in facades_raw.items()
        ),
        source=source,
    )


def load_configuration(path: Path) -> CheckerConfiguration:
    """Load and parse a configuration file (no validation)."""
    return parse_configuration(load_yaml_file(path), source=str(path))
