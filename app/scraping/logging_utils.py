"""
Structured logging helpers for scraping workflows.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured log line as compact JSON.
    """

    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))


@contextmanager
def timed_event(
    logger: logging.Logger,
    event: str,
    *,
    failure_event: str | None = None,
    **fields: Any,
) -> Iterator[dict[str, Any]]:
    """
    Log `event` with `duration_ms` once the block finishes.

    The yielded dict is merged into the payload, so the block can attach
    counts it only knows at the end. Failures are logged as `failure_event`
    (default `<event>_failed`) and re-raised.
    """

    extra: dict[str, Any] = {}
    started = time.perf_counter()
    try:
        yield extra
    except Exception as exc:
        log_event(
            logger,
            logging.ERROR,
            failure_event or f"{event}_failed",
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
            error=str(exc),
            error_type=type(exc).__name__,
            **fields,
        )
        raise
    log_event(
        logger,
        logging.INFO,
        event,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
        **fields,
        **extra,
    )
