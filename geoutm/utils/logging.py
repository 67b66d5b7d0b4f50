"""Logging utility for geoutm"""

__all__ = ['LOGGER', 'reset_warnings', 'warn_once']

import logging

LOGGER = logging.getLogger('geoutm')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str, *args) -> None:
    """
    Logs a warning the first time a given message template is seen. Arguments are
    interpolated lazily by the logger, so messages that differ only in their
    arguments are still logged once.

    Args:
        warning:
            The message template

        *args:
            Values interpolated into the template

    Returns:
        None
    """
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning, *args)
    _WARNINGS.add(warning)


def reset_warnings() -> None:
    """Forget which warnings have already been logged"""
    _WARNINGS.clear()
