"""
debug_trace.py

Opt-in tracing of the viewer's event loop, routed through ``logging``.

Set CASTELJAU_TRACE=1 to attach handlers to the ``casteljau.trace`` logger:
stderr plus CASTELJAU_TRACE_FILE (default ``casteljau_debug.log``, empty for
stderr only). Frame ticks arrive about sixty times a second and are traced
only when CASTELJAU_TRACE_FRAME=1 as well.

Each record carries a ``category`` (MAIN, UI, VIEW, POINTER, FRAME, CRASH)
shown in brackets ahead of the message.
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps

DEBUG_TRACE = os.environ.get("CASTELJAU_TRACE", "") == "1"
TRACE_FRAME = os.environ.get("CASTELJAU_TRACE_FRAME", "") == "1"
LOG_FILE = os.environ.get("CASTELJAU_TRACE_FILE", "casteljau_debug.log")

TRACE_FORMAT = "[%(asctime)s.%(msecs)03d] [%(category)s] %(message)s"

logger = logging.getLogger("casteljau.trace")

_handlers: list = []


def configure(enabled: bool = DEBUG_TRACE, log_file: str = LOG_FILE) -> logging.Logger:
    """Attach the trace handlers once. A no-op when tracing is disabled."""
    if not enabled or _handlers:
        return logger

    formatter = logging.Formatter(TRACE_FORMAT, datefmt="%H:%M:%S")
    _handlers.append(logging.StreamHandler())
    if log_file:
        try:
            _handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
        except OSError as e:
            logging.getLogger(__name__).warning("Cannot open trace file %s: %s", log_file, e)

    for handler in _handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    # Root handlers use a format without the category field
    logger.propagate = False
    return logger


def close_log() -> None:
    """Detach and close the trace handlers."""
    for handler in _handlers:
        logger.removeHandler(handler)
        handler.close()
    _handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def enabled(category: str = "INFO") -> bool:
    if category == "FRAME" and not TRACE_FRAME:
        return False
    return bool(_handlers) and logger.isEnabledFor(logging.DEBUG)


def trace(msg: str, category: str = "INFO") -> None:
    if enabled(category):
        logger.debug(msg, extra={"category": category})


def trace_exception(msg: str = "Exception") -> None:
    """Trace the exception currently being handled, with its traceback."""
    if enabled("ERROR"):
        logger.debug(msg, exc_info=True, extra={"category": "ERROR"})


def trace_pointer(event: str, x: float, y: float, point=None) -> None:
    """Trace a pointer event and the control point it acted on, if any."""
    if not enabled("POINTER"):
        return
    target = point.label if point is not None else "-"
    trace(f"{event} ({x:.1f}, {y:.1f}) -> {target}", "POINTER")


def trace_frame(scene) -> None:
    """Trace one frame tick of a ``CurveScene``."""
    if not enabled("FRAME"):
        return
    curve = scene.curve
    flags = []
    if curve.interpolating:
        flags.append("overlay")
    if curve.paused:
        flags.append("paused")
    trace(f"frame {scene.frame_count} t={curve.t:.3f} {' '.join(flags)}".rstrip(), "FRAME")


def trace_call(category: str = "CALL"):
    """Decorator tracing a call's entry, exit and wall time in milliseconds."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if not enabled(category):
                return func(*args, **kwargs)
            name = func.__qualname__
            trace(f">>> {name}", category)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                trace(f"!!! {name} raised {type(e).__name__}: {e}", "ERROR")
                raise
            trace(f"<<< {name} ({(time.perf_counter() - start) * 1000:.1f} ms)", category)
            return result
        return wrapper
    return decorator
