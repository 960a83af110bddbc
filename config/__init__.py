"""
Configuration module with lazy loading to prevent circular imports.
This module provides access to rule tables and settings without causing dependency issues.
"""

import logging

# Module-level variables for lazy loading
_travel_config = None
_settings = None

def get_travel_config():
    """Get the rule table module with lazy loading."""
    global _travel_config
    if _travel_config is None:
        try:
            from . import travel_config
            _travel_config = travel_config
        except ImportError as e:
            logging.error(f"Failed to import travel config: {e}")
            raise
    return _travel_config

def get_settings():
    """Get environment-driven settings with lazy loading."""
    global _settings
    if _settings is None:
        try:
            from . import settings
            _settings = settings
        except ImportError as e:
            logging.error(f"Failed to import settings: {e}")
            raise
    return _settings

def setup_logging(level=None):
    """Configure logging using the settings module."""
    get_settings().setup_logging(level)

# Export the getter functions
__all__ = [
    'get_travel_config',
    'get_settings',
    'setup_logging'
]
