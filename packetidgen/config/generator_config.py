"""
Generator Configuration - settings for one generation run
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from .validation import (
    validate_version, validate_timeout, validate_output, validate_log_level,
    validate_url,
)

# Protocol version the generated constants are pinned to
DEFAULT_VERSION = "1.17.1"

PROTOCOL_URL_TEMPLATE = (
    "https://raw.githubusercontent.com/PrismarineJS/minecraft-data/master/"
    "data/pc/{version}/protocol.json"
)


@dataclass
class GeneratorConfig:
    """Generator configuration settings"""
    
    # Input
    version: str = DEFAULT_VERSION
    url: Optional[str] = None  # overrides the URL derived from version
    input_path: Optional[str] = None  # local protocol.json instead of downloading
    timeout: float = 30.0
    
    # Output
    output: str = "packetid.py"
    
    # Logging
    log_level: str = "INFO"
    
    def resolved_url(self) -> str:
        """URL the protocol document is downloaded from"""
        if self.url:
            return self.url
        return PROTOCOL_URL_TEMPLATE.format(version=self.version)
    
    def validate(self) -> 'GeneratorConfig':
        """Validate and normalize all settings, raising ConfigValidationError"""
        self.version = validate_version(self.version)
        if self.url is not None:
            self.url = validate_url(self.url)
        self.timeout = validate_timeout(self.timeout)
        self.output = validate_output(self.output)
        self.log_level = validate_log_level(self.log_level)
        return self
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'version': self.version,
            'url': self.url,
            'input_path': self.input_path,
            'timeout': self.timeout,
            'output': self.output,
            'log_level': self.log_level,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratorConfig':
        """Create from dictionary"""
        return cls(**data)
    
    def update(self, **kwargs):
        """Update configuration values, ignoring unknown keys and None"""
        for key, value in kwargs.items():
            if value is not None and hasattr(self, key):
                setattr(self, key, value)
