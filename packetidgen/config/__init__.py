"""
Configuration system for packetidgen
"""

from .generator_config import GeneratorConfig
from .validation import ConfigValidationError

__all__ = ['GeneratorConfig', 'ConfigValidationError']
