#!/usr/bin/env python3
"""
Entry point for the Trip Packing Planner.
Reads a trip form JSON file, plans the trip and prints the result as JSON.
"""
import json
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config import setup_logging

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def show_help():
    """Show usage help."""
    print("""
Trip Packing Planner - Usage

    python __main__.py <trip.json> [--offline]

The trip file holds the form fields:
    destination, start_date, end_date (or duration), trip_purposes,
    other_purpose, accommodations, gender, itinerary, luggage_type

Options:
    --offline      Skip the weather lookup (weather-based rules are skipped)
    --help, -h     Show this help
    --version, -v  Show the version

Environment setup:
    Optional settings are read from .env: WEATHER_API_BASE_URL, GEOCODING_API_URL,
    WEATHER_TIMEOUT_SECONDS, OUTFIT_PAGE_SIZE, ITINERARY_ORPHAN_POLICY, LOG_LEVEL
""")


def load_form_data(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv=None):
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in ['--help', '-h', 'help']:
        show_help()
        return 0
    if args[0] in ['--version', '-v']:
        print(f"Trip Packing Planner v{VERSION}")
        return 0

    offline = '--offline' in args
    trip_file = next((arg for arg in args if not arg.startswith('--')), None)
    if trip_file is None:
        show_help()
        return 1

    setup_logging()

    try:
        form_data = load_form_data(trip_file)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"❌ Could not read trip file {trip_file}: {e}")
        return 1

    from core import get_travel_pipeline_orchestrator_class
    from data import get_weather_provider

    orchestrator_class = get_travel_pipeline_orchestrator_class()
    provider = None if offline else get_weather_provider()

    logger.info("🚀 Planning trip...")
    result = orchestrator_class(weather_provider=provider).run(form_data)
    print(json.dumps(result, indent=2, ensure_ascii=False))

    if not result["success"]:
        logger.error(f"❌ Trip planning failed: {result['error']}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
