"""Configuration management."""

import os


# Host logger Configuration
LOG_NAME = os.getenv("GODOT_LOG_NAME", "GodotLog")
LOG_FORMAT = os.getenv("GODOT_LOG_FORMAT", "%(levelname)s: %(message)s")
LOG_LEVEL = os.getenv("GODOT_LOG_LEVEL", "DEBUG").upper()
