"""Configuration management for fsagent.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides.
"""

from fsagent.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
