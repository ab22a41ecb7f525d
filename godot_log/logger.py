"""
Host logger for the warning and error channels.

Warnings and errors go through Python's built-in logging module so that:
    - Their level can be filtered (GODOT_LOG_LEVEL)
    - They land on stderr, apart from regular printed output
    - The line format can be changed without touching the log facade

Usage:
    from .logger import host_log
    host_log.warning("Prefix: watch out")
"""

import logging

from . import config

host_log = logging.getLogger(config.LOG_NAME)

if not host_log.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    host_log.addHandler(handler)
    host_log.propagate = False

# Unknown names map to a "Level X" string instead of a number
_level = logging.getLevelName(config.LOG_LEVEL)
if isinstance(_level, int):
    host_log.setLevel(_level)
else:
    host_log.setLevel(logging.DEBUG)
    host_log.warning(
        "Unknown GODOT_LOG_LEVEL %r, using DEBUG", config.LOG_LEVEL
    )
