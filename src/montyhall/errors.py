# errors.py
from typing import Any


class InvalidInputError(ValueError):
    """Raised when a door index, door assignment or round count is out of contract"""
    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid"""
    def __init__(self, message: str, config_section: str = None):
        super().__init__(message)
        self.config_section = config_section
