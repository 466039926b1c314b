"""
payroll_config -- single public entrypoint for payroll configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  Engines and services receive the returned
    ``PayrollConfig`` by injection and never read files themselves.

Architecture position:
    Configuration -- sits above ``payroll_kernel`` and below
    ``payroll_engines`` / ``payroll_services``.  The kernel MUST NEVER
    import from ``payroll_config``.

Failure modes:
    - ``FileNotFoundError`` -- the requested configuration set is missing.
    - ``InvalidConfigurationError`` -- a value is malformed or out of range.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``payroll_config_loaded`` log entry with config_id, version and
    checksum, tying each payroll run to the exact constants it used.
"""

from __future__ import annotations

from pathlib import Path

from payroll_config.loader import compute_checksum, load_payroll_config
from payroll_config.schema import (
    DEFAULT_CONFIG,
    HealthInsuranceRule,
    HousingFundRule,
    PayrollConfig,
    SocialInsuranceRule,
    WorkSchedule,
)
from payroll_kernel.logging_config import get_logger

logger = get_logger("config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | None = None) -> PayrollConfig:
    """
    Load the active payroll configuration set.

    Args:
        config_path: Override path to a YAML configuration set.
            Defaults to payroll_config/sets/default.yaml.

    Returns:
        A validated, frozen ``PayrollConfig``.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    config = load_payroll_config(path)
    logger.info(
        "payroll_config_loaded",
        extra={
            "config_id": config.config_id,
            "version": config.version,
            "jurisdiction": config.jurisdiction,
            "checksum": compute_checksum(config),
            "source": str(path),
        },
    )
    return config


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "HealthInsuranceRule",
    "HousingFundRule",
    "PayrollConfig",
    "SocialInsuranceRule",
    "WorkSchedule",
    "compute_checksum",
    "get_active_config",
    "load_payroll_config",
]
