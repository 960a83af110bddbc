import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from config.settings import OUTFIT_PAGE_SIZE
from core.models import TripParameters, WeatherSnapshot, packing_list_to_dict
from core.outfit_planner_agent import outfit_planner_agent, page_count, paginate
from core.packing_checklist import carry_on_liquid_report, packing_progress
from core.packing_list_generator import generate_packing_list
from core.packing_strategy import get_packing_strategy
from core.trip_configurator import TripConfigurator, accommodation_label
from data.weather_utils import (
    ForecastDailyWeather,
    SyntheticDailyWeather,
    WeatherError,
    WeatherProvider,
    forecast_for_trip,
)


class PipelineStage(Enum):
    """Pipeline execution stages for tracking"""
    INIT = "initialization"
    CONFIG_PREP = "config_preparation"
    WEATHER_FETCH = "weather_fetch"
    PACKING_LIST = "packing_list"
    OUTFIT_PLAN = "outfit_plan"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class PipelineMetrics:
    """Timing per stage, in milliseconds"""
    stage_timings: Dict[str, float] = field(default_factory=dict)


class TravelPipelineOrchestrator:
    """
    Runs a whole trip plan: form data -> trip parameters -> weather ->
    packing list -> daily outfits.

    Weather failures never stop the pipeline; they are collected as
    per-location warnings and the weather-dependent rules are skipped.
    """

    def __init__(self, weather_provider: Optional[WeatherProvider] = None, page_size: int = OUTFIT_PAGE_SIZE):
        self.weather_provider = weather_provider
        self.page_size = page_size
        self.current_stage = PipelineStage.INIT
        self.metrics = PipelineMetrics()

    def run(self, form_data: Dict) -> Dict:
        pipeline_start = time.time()
        self.current_stage = PipelineStage.INIT
        self.metrics = PipelineMetrics()

        try:
            logging.info("🧳 Starting trip planning pipeline...")

            stage_start = self._enter(PipelineStage.CONFIG_PREP)
            params = TripConfigurator(form_data).prepare_trip_parameters()
            if not params:
                return self._create_error_result("Invalid trip configuration", pipeline_start)
            self._leave(PipelineStage.CONFIG_PREP, stage_start)

            stage_start = self._enter(PipelineStage.WEATHER_FETCH)
            weather, forecast, warnings = self._resolve_weather(params)
            self._leave(PipelineStage.WEATHER_FETCH, stage_start)

            stage_start = self._enter(PipelineStage.PACKING_LIST)
            packing_list = generate_packing_list(params, weather)
            self._leave(PipelineStage.PACKING_LIST, stage_start)

            stage_start = self._enter(PipelineStage.OUTFIT_PLAN)
            outfits = outfit_planner_agent.plan(
                params.duration_days,
                params.start_date,
                params.trip_purposes,
                params.itinerary_text,
                params.destination,
                gender=params.gender,
                weather=weather,
                daily_weather=self._daily_weather(params, weather, forecast),
            )
            self._leave(PipelineStage.OUTFIT_PLAN, stage_start)

            self.current_stage = PipelineStage.COMPLETED
            total_time = (time.time() - pipeline_start) * 1000
            logging.info(f"🎉 Trip plan completed in {total_time:.1f}ms")

            return {
                "success": True,
                "trip": self._trip_summary(params),
                "weather": weather.to_dict() if weather else None,
                "weather_warnings": warnings,
                "packing_list": packing_list_to_dict(packing_list),
                "packing_progress": packing_progress(packing_list),
                "liquids": carry_on_liquid_report(packing_list),
                "packing_strategy": get_packing_strategy(params.luggage_type),
                "outfit_pages": [[outfit.to_dict() for outfit in page] for page in paginate(outfits, self.page_size)],
                "total_pages": page_count(outfits, self.page_size),
                "execution_time_ms": total_time,
                "stage_timings": self.metrics.stage_timings,
            }

        except Exception as e:
            self.current_stage = PipelineStage.FAILED
            error_msg = f"Critical pipeline error: {str(e)}"
            logging.error(f"❌ {error_msg}", exc_info=True)
            return self._create_error_result(error_msg, pipeline_start)

    def _resolve_weather(self, params: TripParameters) -> Tuple[Optional[WeatherSnapshot], List[WeatherSnapshot], List[str]]:
        """Uses the first location the provider can resolve; failures become warnings."""
        warnings: List[str] = []
        if self.weather_provider is None:
            logging.info("⚠️ No weather provider configured, skipping weather-based rules")
            return None, [], warnings

        for location in params.locations:
            try:
                result = self.weather_provider.current_and_forecast(location)
            except WeatherError as e:
                logging.warning(f"⚠️ Weather unavailable for {location}: {e}")
                warnings.append(f"{location}: {e}")
                continue
            return result["current"], result.get("forecast") or [], warnings

        return None, [], warnings

    @staticmethod
    def _daily_weather(params: TripParameters, weather: Optional[WeatherSnapshot],
                       forecast: List[WeatherSnapshot]):
        synthetic = SyntheticDailyWeather(weather)
        if params.start_date and forecast:
            trip_forecast = forecast_for_trip(forecast, params.start_date, params.duration_days)
            if trip_forecast:
                return ForecastDailyWeather(trip_forecast, params.start_date, fallback=synthetic)
        return synthetic

    @staticmethod
    def _trip_summary(params: TripParameters) -> Dict:
        return {
            "destination": params.destination,
            "locations": params.locations,
            "duration_days": params.duration_days,
            "start_date": params.start_date.isoformat() if params.start_date else None,
            "trip_purposes": list(params.trip_purposes),
            "accommodations": [accommodation_label(a) for a in params.accommodations],
            "gender": params.gender.value,
            "luggage_type": params.luggage_type,
        }

    def _enter(self, stage: PipelineStage) -> float:
        self.current_stage = stage
        return time.time()

    def _leave(self, stage: PipelineStage, stage_start: float) -> None:
        self.metrics.stage_timings[stage.value] = (time.time() - stage_start) * 1000
        logging.info(f"✅ {stage.value} done ({self.metrics.stage_timings[stage.value]:.1f}ms)")

    def _create_error_result(self, error_message: str, pipeline_start: float) -> Dict:
        """Create standardized error result."""
        return {
            "success": False,
            "error": error_message,
            "execution_time_ms": (time.time() - pipeline_start) * 1000,
            "current_stage": self.current_stage.value,
            "stage_timings": self.metrics.stage_timings,
        }
