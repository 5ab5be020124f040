"""
Config -> Kernel Bridges.

Functions that convert a ``CheckerConfiguration`` into kernel
``CheckerSettings`` and apply them to the facades.  These live in
contract_config (the producer) because the kernel must NEVER import
contract_config.

Usage:
    from contract_config import get_active_config
    from contract_config.bridges import apply_configuration

    apply_configuration(get_active_config())
"""

from __future__ import annotations

from contract_config.schema import CheckerConfiguration
from contract_kernel.domain.location import LocationStyle
from contract_kernel.domain.policy import CheckerSettings, FailurePolicy
from contract_kernel.facades import DEFAULT_POLICIES, all_facades, get_facade


def resolve_policy(config: CheckerConfiguration, facade: str) -> FailurePolicy:
    """Effective policy for ``facade``: configured, else default; lenient
    mode turns RAISE into REPORT."""
    get_facade(facade)  # raises UnknownFacadeError
    entry = config.facade(facade)
    policy = (
        FailurePolicy.parse(entry.on_fail)
        if entry is not None
        else DEFAULT_POLICIES[facade]
    )
    if config.lenient and policy is FailurePolicy.RAISE:
        return FailurePolicy.REPORT
    return policy


def build_settings(config: CheckerConfiguration, facade: str) -> CheckerSettings:
    """Build the ``CheckerSettings`` for one facade."""
    return CheckerSettings(
        policy=resolve_policy(config, facade),
        float_tolerance=config.float_tolerance,
        location_style=LocationStyle(config.location_style),
        snippet_length=config.snippet_length,
        capture_locations=config.capture_locations,
    )


def apply_configuration(config: CheckerConfiguration) -> dict[str, CheckerSettings]:
    """Reconfigure Assert, Require and Expect.

    Each facade's handler is reset to the AssertLogger for its new
    settings; custom handlers installed earlier are discarded.

    Returns:
        The settings applied, keyed by facade name.
    """
    applied: dict[str, CheckerSettings] = {}
    for checker in all_facades():
        settings = build_settings(config, checker.name)
        checker.configure(settings)
        applied[checker.name] = settings
    return applied
