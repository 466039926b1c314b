"""
payroll_engines.tracer -- ``PAYROLL_ENGINE_TRACE`` records for engine calls.

Each call to a decorated engine logs one record naming the engine and its
version, a fingerprint of the arguments that determine its result, and
how long it took.  Two calls with the same fingerprint under the same
engine version must give the same result, which makes a disputed payslip
traceable to the exact engine inputs.

The fingerprint is the first 16 hex digits of a SHA-256 over
``name=value`` pairs.  Decimals are normalized (``50000.00`` and ``50000``
hash alike) and dates use ISO format.  Arguments may be passed positionally
or by keyword.
"""

from __future__ import annotations

import functools
import hashlib
import inspect
import time
from collections.abc import Callable, Iterable
from datetime import date
from decimal import Decimal
from typing import Any

from payroll_kernel.logging_config import get_logger

_logger = get_logger("engines.tracer")

TRACE_EVENT = "PAYROLL_ENGINE_TRACE"


def _canonical(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return "{" + ",".join(
            f"{k}:{_canonical(v)}" for k, v in sorted(value.items())
        ) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonical(v) for v in value) + "]"
    return str(value)


def compute_input_fingerprint(
    fingerprint_fields: Iterable[str],
    arguments: dict[str, Any],
) -> str:
    """Fingerprint of ``arguments`` restricted to ``fingerprint_fields``; absent ones count as null."""
    canonical = "|".join(
        f"{name}={_canonical(arguments.get(name))}" for name in fingerprint_fields
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:16]


def traced_engine(
    engine_name: str,
    engine_version: str,
    fingerprint_fields: tuple[str, ...] = (),
) -> Callable:
    """
    Decorate a pure engine function so that every call logs a trace record.

    ``fingerprint_fields`` names the parameters that go into the
    fingerprint; the rest (schedules, configs) are identified by their own
    version and checksum.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            fingerprint = ""
            if fingerprint_fields:
                bound = signature.bind_partial(*args, **kwargs)
                fingerprint = compute_input_fingerprint(
                    fingerprint_fields, bound.arguments
                )

            started = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

            _logger.info(
                TRACE_EVENT,
                extra={
                    "engine_name": engine_name,
                    "engine_version": engine_version,
                    "input_fingerprint": fingerprint,
                    "duration_ms": elapsed_ms,
                    "function": func.__qualname__,
                },
            )
            return result

        return wrapper

    return decorator
