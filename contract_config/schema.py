"""
CheckerConfiguration schema.

The human-authored source artifact for checker configuration.  YAML is
parsed into these types by the loader, validated by the validator, and
translated into kernel ``CheckerSettings`` by the bridges.

Values stay as authored (plain strings, numbers) here; the bridges are the
only place they become kernel enums.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FacadeConfig:
    """Failure behaviour for one facade."""

    name: str
    on_fail: str  # "raise" or "report"


@dataclass(frozen=True)
class CheckerConfiguration:
    """Complete configuration for the three facades."""

    float_tolerance: float = 1e-5
    location_style: str = "bracket"  # "bracket" or "colon"
    snippet_length: int = 30
    capture_locations: bool = True
    lenient: bool = False
    facades: tuple[FacadeConfig, ...] = ()
    source: str | None = None  # file the configuration was loaded from

    def facade(self, name: str) -> FacadeConfig | None:
        for facade in self.facades:
            if facade.name == name:
                return facade
        return None
