import logging

from config import get_settings, get_travel_config, setup_logging
from core import get_generate_packing_list, get_plan_daily_outfits, get_travel_pipeline_orchestrator_class
from data import get_weather_provider
from data.weather_utils import WeatherProvider


def test_lazy_getters_resolve_modules():
    assert get_travel_config().COLD_THRESHOLD_C == 15
    assert get_settings().OUTFIT_PAGE_SIZE >= 1
    assert callable(get_generate_packing_list())
    assert callable(get_plan_daily_outfits())
    assert get_travel_pipeline_orchestrator_class().__name__ == "TravelPipelineOrchestrator"


def test_weather_provider_is_shared():
    provider = get_weather_provider()

    assert isinstance(provider, WeatherProvider)
    assert get_weather_provider() is provider


def test_setup_logging_uses_level(mocker):
    mock_basic_config = mocker.patch('logging.basicConfig')

    setup_logging("debug")

    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert mock_basic_config.call_args.kwargs["format"] == get_settings().LOG_FORMAT


def test_outfit_tables_cover_every_context_and_gender():
    config = get_travel_config()

    for context in ("beach", "business", "outdoor", "casual"):
        assert set(config.DAYTIME_OUTFITS[context]) == {"male", "female", "neutral"}
        assert context in config.OUTERWEAR_RULES
    assert set(config.EVENING_OUTFITS) == {"male", "female", "neutral"}
