"""
contract_config -- single public entrypoint for checker configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  No other component reads configuration files
    or environment variables.  Returns a validated, frozen
    ``CheckerConfiguration``; ``contract_config.bridges`` turns it into
    kernel settings.

Architecture position:
    Configuration -- sits above ``contract_kernel``.  The kernel MUST NEVER
    import ``contract_config``.

Resolution order:
    1. ``config_path`` argument
    2. ``CONTRACT_KERNEL_CONFIG`` environment variable
    3. the packaged ``defaults.yaml``

Failure modes:
    - ``FileNotFoundError`` -- the resolved path does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ValueError`` / ``KeyError`` -- malformed values or facade entries.
    - ``ConfigValidationError`` -- the configuration failed validation.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from contract_config.loader import load_configuration
from contract_config.schema import CheckerConfiguration, FacadeConfig
from contract_config.validator import (
    ConfigValidationError,
    ConfigValidationResult,
    validate_configuration,
)

_logger = logging.getLogger("contract_kernel.config")

CONFIG_ENV_VAR = "CONTRACT_KERNEL_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "CheckerConfiguration",
    "ConfigValidationError",
    "ConfigValidationResult",
    "FacadeConfig",
    "get_active_config",
    "validate_configuration",
]


def get_active_config(config_path: Path | str | None = None) -> CheckerConfiguration:
    """The ONLY public configuration entrypoint.

    Guarantees:
        - The returned configuration has passed ``validate_configuration``.
        - A ``contract_config_loaded`` log entry is emitted on every
          successful call; validation warnings are logged individually.
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    path = Path(config_path)

    config = load_configuration(path)
    result = validate_configuration(config)
    if not result.is_valid:
        raise ConfigValidationError(config.source, result.errors)

    for warning in result.warnings:
        _logger.warning(
            "contract_config_warning",
            extra={"source": config.source, "detail": warning},
        )

    _logger.info(
        "contract_config_loaded",
        extra={
            "source": config.source,
            "lenient": config.lenient,
            "location_style": config.location_style,
            "facade_policies": {f.name: f.on_fail for f in config.facades},
        },
    )
    return config
