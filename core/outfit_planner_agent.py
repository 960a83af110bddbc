import logging
import math
from datetime import date, datetime, timedelta
from typing import List, Optional, Sequence, Union

from config.settings import ITINERARY_ORPHAN_POLICY, OUTFIT_PAGE_SIZE
from config.travel_config import DEFAULT_ACTIVITY
from core.itinerary_parser import parse_itinerary
from core.models import DailyOutfit, Gender, WeatherSnapshot
from core.outfit_logic import build_daytime_outfit, build_evening_outfit, classify_day
from data.weather_utils import SyntheticDailyWeather


def parse_start_date(start_date: Union[date, datetime, str, None]) -> date:
    """Accepts a date, datetime or ISO-8601 string; missing means today."""
    if start_date is None or start_date == "":
        return date.today()
    if isinstance(start_date, datetime):
        return start_date.date()
    if isinstance(start_date, date):
        return start_date
    return datetime.fromisoformat(str(start_date).strip().replace("Z", "+00:00")).date()


class OutfitPlannerAgent:
    """
    Plans a daytime and evening outfit for every day of a trip.
    Activities come from the itinerary text, the day's context from keywords
    or trip purposes, and the weather from a daily weather source.
    """

    def __init__(self, orphan_policy: str = ITINERARY_ORPHAN_POLICY):
        self.orphan_policy = orphan_policy

    def plan(
        self,
        duration_days: int,
        start_date: Union[date, datetime, str, None],
        trip_purposes: Sequence[str],
        itinerary_text: Optional[str],
        destination: str,
        gender=Gender.NEUTRAL,
        weather: Optional[WeatherSnapshot] = None,
        daily_weather=None,
    ) -> List[DailyOutfit]:
        first_day = parse_start_date(start_date)
        parsed = parse_itinerary(itinerary_text or "", self.orphan_policy)
        weather_source = daily_weather or SyntheticDailyWeather(weather)
        gender = Gender.coerce(gender)
        purposes = list(trip_purposes or [])

        locations = [loc.strip() for loc in (destination or "").split(",") if loc.strip()]
        logging.info(f"👕 Planning {duration_days} days of outfits for {', '.join(locations) or 'unknown destination'}")

        outfits = []
        for day in range(1, max(0, int(duration_days)) + 1):
            day_activities = parsed.get(day) or []
            day_weather = weather_source.for_day(day)
            context = classify_day(day_activities, purposes, day)

            outfits.append(DailyOutfit(
                day=day,
                date=first_day + timedelta(days=day - 1),
                activities=list(day_activities) if day_activities else [DEFAULT_ACTIVITY],
                daytime=build_daytime_outfit(context, gender, day_weather),
                evening=build_evening_outfit(gender, day_weather),
                context=context,
                weather=day_weather,
            ))
            logging.debug(f"   Day {day}: {context.value}")

        return outfits


def paginate(outfits: Sequence[DailyOutfit], page_size: int = OUTFIT_PAGE_SIZE) -> List[List[DailyOutfit]]:
    """Slices a plan into fixed-size display pages."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return [list(outfits[i:i + page_size]) for i in range(0, len(outfits), page_size)]


def page_count(outfits: Sequence[DailyOutfit], page_size: int = OUTFIT_PAGE_SIZE) -> int:
    return math.ceil(len(outfits) / page_size)


outfit_planner_agent = OutfitPlannerAgent()


def plan_daily_outfits(duration_days, start_date, trip_purposes, itinerary_text, destination,
                       gender=Gender.NEUTRAL, weather=None, daily_weather=None) -> List[DailyOutfit]:
    return outfit_planner_agent.plan(
        duration_days, start_date, trip_purposes, itinerary_text, destination,
        gender=gender, weather=weather, daily_weather=daily_weather,
    )
