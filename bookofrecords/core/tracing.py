"""
Logging setup shared by the batch job and the API.

Trace level names are the ones the NeoHabitat tools use (winston names).
"""

import logging

TRACE_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "silly": logging.DEBUG,
}


def trace_level(name: str) -> int:
    """Map a trace level name to a logging level (unknown names mean ERROR)."""
    return TRACE_LEVELS.get(name.strip().lower(), logging.ERROR)


def configure_logging(trace: str) -> None:
    logging.basicConfig(
        level=trace_level(trace),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
