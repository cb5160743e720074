# utils/__init__.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
