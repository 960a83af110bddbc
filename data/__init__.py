"""
Data layer module with lazy loading to prevent circular imports.
Weather lookups live here; the rule engine in core/ only consumes snapshots.
"""

import logging

# Module-level variables to hold lazy-loaded instances
_weather_provider = None

def get_weather_provider():
    """Get a shared weather provider with lazy loading."""
    global _weather_provider
    if _weather_provider is None:
        try:
            from .weather_utils import WeatherProvider
            _weather_provider = WeatherProvider()
        except ImportError as e:
            logging.error(f"Failed to import weather provider: {e}")
            _weather_provider = None
    return _weather_provider

# Export the getter functions
__all__ = [
    'get_weather_provider'
]
