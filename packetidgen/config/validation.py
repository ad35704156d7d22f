"""
Configuration validation utilities
"""

import logging
import re

from ..errors import PacketIDGenError


class ConfigValidationError(PacketIDGenError):
    """Raised when configuration validation fails"""
    pass


_VERSION_RE = re.compile(r"\d+(\.\d+)*([a-z0-9.-]*)")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_version(version: str) -> str:
    """Validate protocol version (e.g. ``1.17.1``)"""
    if not isinstance(version, str):
        raise ConfigValidationError("Version must be a string")
    
    version = version.strip()
    if not _VERSION_RE.fullmatch(version):
        raise ConfigValidationError(f"Invalid protocol version: {version!r}")
    
    return version


def validate_url(url: str) -> str:
    """Validate protocol document URL"""
    if not url or not isinstance(url, str):
        raise ConfigValidationError("URL must be a non-empty string")
    
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise ConfigValidationError("URL must start with http:// or https://")
    
    return url


def validate_timeout(timeout: float) -> float:
    """Validate timeout value"""
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigValidationError("Timeout must be a number")
    
    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")
    
    return float(timeout)


def validate_output(output: str) -> str:
    """Validate output file name"""
    if not output or not isinstance(output, str):
        raise ConfigValidationError("Output must be a non-empty string")
    
    output = output.strip()
    if not output.endswith(".py"):
        raise ConfigValidationError("Output must be a .py file")
    
    return output


def validate_log_level(level: str) -> str:
    """Validate logging level name"""
    if not isinstance(level, str):
        raise ConfigValidationError("Log level must be a string")
    
    level = level.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigValidationError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
    
    return level


def log_level_value(level: str) -> int:
    """Numeric logging level for a validated level name"""
    return getattr(logging, validate_log_level(level))
