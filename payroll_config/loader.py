"""
Configuration Loader (``payroll_config.loader``).

Responsibility
--------------
Loads a YAML configuration set and parses it into the typed
``payroll_config.schema`` dataclasses.  Callers outside this package go
through ``payroll_config.get_active_config()``.

Invariants enforced
-------------------
* Every numeric value goes through ``Decimal(str(value))`` -- YAML floats
  never leak into calculations as binary floats.
* Sections absent from the YAML keep their schema defaults; unknown keys
  are rejected so a typo cannot silently fall back to a default.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown key or non-numeric value -> ``InvalidConfigurationError``.
* Out-of-range value -> ``InvalidConfigurationError`` from the schema.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict, fields
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from payroll_config.schema import (
    HealthInsuranceRule,
    HousingFundRule,
    PayrollConfig,
    SocialInsuranceRule,
    WorkSchedule,
)
from payroll_kernel.exceptions import InvalidConfigurationError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_decimal(field_name: str, value: Any) -> Decimal:
    """Parse a Decimal from a YAML scalar (int, float or string)."""
    if isinstance(value, bool):
        raise InvalidConfigurationError(field_name, f"expected a number, got {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise InvalidConfigurationError(
            field_name, f"expected a number, got {value!r}"
        ) from None


def _parse_section(section: str, cls: type, data: dict[str, Any] | None):
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise InvalidConfigurationError(section, "must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise InvalidConfigurationError(
            section, f"unknown keys: {', '.join(sorted(unknown))}"
        )
    return cls(**{
        key: parse_decimal(f"{section}.{key}", value)
        for key, value in data.items()
    })


def parse_payroll_config(data: dict[str, Any]) -> PayrollConfig:
    """
    Parse a ``PayrollConfig`` from a dict.

    Preconditions:
        - ``data`` is the top-level mapping of a configuration set.
    Postconditions:
        - Returns a frozen ``PayrollConfig``.
    """
    top_level = {
        "config_id", "version", "jurisdiction", "rounding_quantum",
        "work_schedule", "social_insurance", "health_insurance", "housing_fund",
    }
    unknown = set(data) - top_level
    if unknown:
        raise InvalidConfigurationError(
            "payroll_config", f"unknown keys: {', '.join(sorted(unknown))}"
        )

    kwargs: dict[str, Any] = {
        "work_schedule": _parse_section(
            "work_schedule", WorkSchedule, data.get("work_schedule")
        ),
        "social_insurance": _parse_section(
            "social_insurance", SocialInsuranceRule, data.get("social_insurance")
        ),
        "health_insurance": _parse_section(
            "health_insurance", HealthInsuranceRule, data.get("health_insurance")
        ),
        "housing_fund": _parse_section(
            "housing_fund", HousingFundRule, data.get("housing_fund")
        ),
    }
    if "config_id" in data:
        kwargs["config_id"] = str(data["config_id"])
    if "version" in data:
        kwargs["version"] = int(data["version"])
    if "jurisdiction" in data:
        kwargs["jurisdiction"] = str(data["jurisdiction"])
    if "rounding_quantum" in data:
        kwargs["rounding_quantum"] = parse_decimal(
            "rounding_quantum", data["rounding_quantum"]
        )
    return PayrollConfig(**kwargs)


def load_payroll_config(path: Path) -> PayrollConfig:
    """Load and parse one YAML configuration set."""
    return parse_payroll_config(load_yaml_file(path))


def compute_checksum(config: PayrollConfig) -> str:
    """
    Compute SHA-256 checksum of the canonical JSON form of ``config``.

    Postconditions:
        - Identical configurations always produce identical checksums.
        - Decimals are serialized normalized, so ``0.010`` and ``0.01``
          hash the same.
    """

    def _canonical(value: Any) -> Any:
        if isinstance(value, Decimal):
            return str(value.normalize())
        if isinstance(value, dict):
            return {k: _canonical(v) for k, v in value.items()}
        return value

    canonical = json.dumps(_canonical(asdict(config)), sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
