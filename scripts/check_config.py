#!/usr/bin/env python3
"""
Validate a checker configuration file.

Usage:
    python scripts/check_config.py [config.yaml]

If no file is given, validates contract_config/defaults.yaml.

Prints the effective policy per facade, every warning and every error.
Exits 0 when the configuration is valid and 1 otherwise.
"""

import argparse
import sys
from pathlib import Path

import yaml

# Add project root to path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from contract_config import DEFAULT_CONFIG_PATH
from contract_config.bridges import build_settings
from contract_config.loader import load_configuration
from contract_config.validator import validate_configuration
from contract_kernel.facades import FACADE_NAMES


def check(path: Path) -> bool:
    """Load, validate and summarise one configuration file."""
    print(f"Checking: {path}")
    try:
        config = load_configuration(path)
    except (OSError, yaml.YAMLError, ValueError, KeyError) as e:
        print(f"  ERROR: cannot load configuration: {e}")
        return False

    result = validate_configuration(config)
    for w in result.warnings:
        print(f"  WARNING: {w}")
    if not result.is_valid:
        print("VALIDATION FAILED:")
        for err in result.errors:
            print(f"  ERROR: {err}")
        return False

    for name in FACADE_NAMES:
        settings = build_settings(config, name)
        print(f"  {name:<8} on_fail={settings.policy.value}")
    print(f"  location_style:  {config.location_style}")
    print(f"  float_tolerance: {config.float_tolerance:g}")
    if config.lenient:
        print("  lenient mode: raise downgraded to report")
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="YAML configuration file (default: packaged defaults)",
    )
    args = parser.parse_args(argv)

    if not args.config.is_file():
        print(f"Error: file not found: {args.config}", file=sys.stderr)
        return 1

    ok = check(args.config)
    print("OK" if ok else "FAILED")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
