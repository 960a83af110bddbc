from datetime import date

import pytest
from core.models import ActivityContext, Gender, WeatherSnapshot
from core.outfit_logic import build_daytime_outfit, build_evening_outfit, classify_day
from core.outfit_planner_agent import (
    OutfitPlannerAgent,
    page_count,
    paginate,
    parse_start_date,
    plan_daily_outfits,
)
from data.weather_utils import ForecastDailyWeather, SyntheticDailyWeather


@pytest.fixture
def mild_weather():
    return WeatherSnapshot(temperature=20, description="Partly cloudy")


def test_plan_length_dates_and_default_activity():
    outfits = plan_daily_outfits(4, "2025-06-01", [], "", "Lisbon, Porto", "neutral")

    assert [o.day for o in outfits] == [1, 2, 3, 4]
    assert outfits[0].date == date(2025, 6, 1)
    assert outfits[3].date == date(2025, 6, 4)
    assert outfits[0].activities == ["Free day / Exploration"]
    assert all(o.weather is None for o in outfits)


def test_itinerary_activities_are_used():
    outfits = plan_daily_outfits(2, "2025-06-01", [], "Day 1: Museum\nDay 2 - Hiking\nSwimming", "Rome")

    assert outfits[0].activities == ["Museum"]
    assert outfits[1].activities == ["Hiking", "Swimming"]
    assert outfits[1].context is ActivityContext.BEACH


def test_beach_beats_business():
    assert classify_day(["Beach meeting with clients"], [], 1) is ActivityContext.BEACH


def test_business_beats_outdoor():
    assert classify_day(["Conference then mountain trail"], [], 1) is ActivityContext.BUSINESS


def test_casual_when_nothing_matches():
    assert classify_day(["Museum"], ["city"], 2) is ActivityContext.CASUAL


def test_purpose_fallback_day_patterns():
    assert classify_day([], ["beach"], 2) is ActivityContext.BEACH
    assert classify_day([], ["beach"], 1) is ActivityContext.CASUAL
    assert classify_day([], ["outdoor"], 1) is ActivityContext.OUTDOOR
    assert classify_day([], ["outdoor"], 2) is ActivityContext.CASUAL


def test_business_trip_day_three_is_formal():
    outfits = plan_daily_outfits(3, "2025-01-10", ["business"], None, "Berlin", "male")

    assert outfits[0].context is ActivityContext.CASUAL
    assert outfits[2].context is ActivityContext.BUSINESS
    assert outfits[2].daytime.top == "Business shirt"
    assert outfits[2].daytime.shoes == "Formal shoes"
    assert "Tie" in outfits[2].daytime.accessories


def test_synthetic_weather_cycle():
    base = WeatherSnapshot(temperature=34, description="Clear sky")
    source = SyntheticDailyWeather(base)

    assert source.for_day(4) == base
    assert source.for_day(1).temperature == 35
    assert source.for_day(2).temperature == 32
    assert source.for_day(2).description == "rainy"
    assert source.for_day(3).temperature == 34
    assert source.for_day(3).description == "rainy"
    assert source.for_day(5) == source.for_day(1)


def test_synthetic_cycle_keeps_rain_description_and_floors_at_zero():
    source = SyntheticDailyWeather(WeatherSnapshot(temperature=1, description="Heavy Rain"))

    assert source.for_day(2).temperature == 0
    assert source.for_day(2).description == "Heavy Rain"


def test_no_base_weather_means_no_day_weather():
    assert SyntheticDailyWeather(None).for_day(1) is None


def test_daytime_outfits_use_day_weather(mild_weather):
    outfits = plan_daily_outfits(4, "2025-06-01", [], None, "Oslo", "female", weather=mild_weather)

    # Day 1 is the warmer variant (22C, dry), day 2 is cooler and rainy
    assert outfits[0].weather.temperature == 22
    assert outfits[0].daytime.outerwear is None
    assert outfits[1].daytime.outerwear == "Rain jacket or umbrella"
    assert outfits[1].evening.outerwear == "Rain jacket or umbrella"


def test_warm_casual_day_switches_top_and_bottom():
    warm = WeatherSnapshot(temperature=30, description="Clear sky")
    outfit = build_daytime_outfit(ActivityContext.CASUAL, Gender.FEMALE, warm)

    assert outfit.top == "Light t-shirt or tank top"
    assert outfit.bottom == "Shorts or skirt"


def test_casual_without_weather_uses_defaults():
    outfit = build_daytime_outfit(ActivityContext.CASUAL, Gender.MALE, None)

    assert outfit.top == "T-shirt"
    assert outfit.bottom == "Jeans or pants"
    assert outfit.outerwear is None


def test_cold_business_day_gets_blazer_but_not_on_rain_alone():
    cold = WeatherSnapshot(temperature=10, description="Clear sky")
    rainy_mild = WeatherSnapshot(temperature=20, description="rainy")

    assert build_daytime_outfit(ActivityContext.BUSINESS, "neutral", cold).outerwear == "Blazer or suit jacket"
    assert build_daytime_outfit(ActivityContext.BUSINESS, "neutral", rainy_mild).outerwear is None


def test_outdoor_rain_takes_precedence_over_cold():
    cold_rain = WeatherSnapshot(temperature=5, description="Rain")
    cold_dry = WeatherSnapshot(temperature=5, description="Fog")

    assert build_daytime_outfit(ActivityContext.OUTDOOR, "male", cold_rain).outerwear == "Waterproof jacket"
    assert build_daytime_outfit(ActivityContext.OUTDOOR, "male", cold_dry).outerwear == "Light jacket or fleece"


def test_beach_outfit_has_no_outerwear():
    outfit = build_daytime_outfit(ActivityContext.BEACH, "female", WeatherSnapshot(temperature=12, description="rain"))

    assert outfit.outerwear is None
    assert outfit.bottom == "Swimsuit with shorts/skirt/cover-up"
    assert "Hair tie" in outfit.accessories


def test_zero_degrees_counts_as_cold():
    outfit = build_evening_outfit(Gender.NEUTRAL, WeatherSnapshot(temperature=0, description="Snow"))

    assert outfit.outerwear == "Light jacket or sweater"


def test_evening_outfit_by_gender():
    assert build_evening_outfit("female", None).shoes == "Dress shoes or heels"
    assert build_evening_outfit("male", None).accessories == ["Watch"]
    assert build_evening_outfit("unknown", None).top == "Dress shirt or blouse"


def test_outfit_tables_are_not_shared_between_days():
    outfits = plan_daily_outfits(2, "2025-06-01", [], None, "Nice")
    outfits[0].daytime.accessories.append("Scarf")

    assert "Scarf" not in outfits[1].daytime.accessories


def test_forecast_daily_weather_overrides_cycle():
    forecast = [WeatherSnapshot(temperature=t, description="Clear sky") for t in (5, 28)]
    source = ForecastDailyWeather(forecast, date(2025, 3, 1), fallback=SyntheticDailyWeather(forecast[0]))

    outfits = plan_daily_outfits(3, date(2025, 3, 1), [], None, "Madrid", daily_weather=source)

    assert outfits[0].weather.temperature == 5
    assert outfits[0].daytime.outerwear == "Light jacket or sweater"
    assert outfits[1].daytime.top == "Light t-shirt"
    assert outfits[2].weather.description == "rainy"


def test_latest_orphan_policy_can_be_configured():
    planner = OutfitPlannerAgent(orphan_policy="latest")
    outfits = planner.plan(3, "2025-06-01", [], "Day 3: Museum\nDay 1: Arrive\nSwim at the beach", "Nice")

    assert outfits[0].context is ActivityContext.BEACH
    assert outfits[2].activities == ["Museum"]


def test_parse_start_date_variants():
    assert parse_start_date("2025-06-01") == date(2025, 6, 1)
    assert parse_start_date("2025-06-01T10:30:00Z") == date(2025, 6, 1)
    assert parse_start_date(date(2024, 2, 29)) == date(2024, 2, 29)
    assert parse_start_date(None) == date.today()


def test_pagination_in_pages_of_three():
    outfits = plan_daily_outfits(7, "2025-06-01", [], None, "Paris")
    pages = paginate(outfits)

    assert [len(page) for page in pages] == [3, 3, 1]
    assert pages[2][0].day == 7
    assert page_count(outfits) == 3
    assert paginate([]) == []


def test_daily_outfit_serialization(mild_weather):
    outfit = plan_daily_outfits(1, "2025-06-01", ["beach"], None, "Nice", weather=mild_weather)[0]
    data = outfit.to_dict()

    assert data["date"] == "2025-06-01"
    assert data["context"] == "casual"
    assert data["weather"]["temperature"] == 22
    assert "outerwear" not in data["daytime"]
