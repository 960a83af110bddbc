from typing import Optional, Sequence

from config.travel_config import (
    ACTIVITY_DAY_FALLBACK,
    ACTIVITY_KEYWORDS,
    COLD_THRESHOLD_C,
    DAYTIME_OUTFITS,
    EVENING_OUTFITS,
    OUTERWEAR_RULES,
    WARM_THRESHOLD_C,
)
from core.models import ActivityContext, Gender, Outfit, WeatherSnapshot

# Evaluation order doubles as priority: the first matching context wins.
CONTEXT_PRIORITY = [ActivityContext.BEACH, ActivityContext.BUSINESS, ActivityContext.OUTDOOR]


def mentions_any(activities: Sequence[str], keywords: Sequence[str]) -> bool:
    """Checks if any activity contains any keyword, ignoring case."""
    lowered = [activity.lower() for activity in activities]
    return any(keyword in activity for activity in lowered for keyword in keywords)


def matches_context(context: ActivityContext, activities: Sequence[str],
                    trip_purposes: Sequence[str], day: int) -> bool:
    """Keyword match on the day's activities, or the purpose-based day pattern."""
    if mentions_any(activities, ACTIVITY_KEYWORDS[context.value]):
        return True
    purpose, modulus, remainder = ACTIVITY_DAY_FALLBACK[context.value]
    return purpose in (trip_purposes or []) and day % modulus == remainder


def classify_day(activities: Sequence[str], trip_purposes: Sequence[str], day: int) -> ActivityContext:
    for context in CONTEXT_PRIORITY:
        if matches_context(context, activities, trip_purposes, day):
            return context
    return ActivityContext.CASUAL


def is_warm(weather: Optional[WeatherSnapshot]) -> bool:
    return weather is not None and weather.temperature > WARM_THRESHOLD_C


def is_cold(weather: Optional[WeatherSnapshot]) -> bool:
    return weather is not None and weather.temperature < COLD_THRESHOLD_C


def is_rainy(weather: Optional[WeatherSnapshot]) -> bool:
    return weather is not None and weather.is_rainy


def pick_outerwear(rule_key: str, weather: Optional[WeatherSnapshot]) -> Optional[str]:
    """Rain gear takes precedence over cold-weather layers."""
    rain_outerwear, cold_outerwear = OUTERWEAR_RULES[rule_key]
    if rain_outerwear and is_rainy(weather):
        return rain_outerwear
    if cold_outerwear and is_cold(weather):
        return cold_outerwear
    return None


def _from_template(template: dict, weather: Optional[WeatherSnapshot]) -> Outfit:
    warm = is_warm(weather)
    return Outfit(
        top=template.get("warm_top", template["top"]) if warm else template["top"],
        bottom=template.get("warm_bottom", template["bottom"]) if warm else template["bottom"],
        shoes=template["shoes"],
        accessories=list(template["accessories"]),
    )


def build_daytime_outfit(context: ActivityContext, gender, weather: Optional[WeatherSnapshot]) -> Outfit:
    """
    Builds the daytime outfit for a classified day.
    Looks up the (context, gender) template, applies the warm-day swaps and
    adds outerwear for rain or cold where the context calls for it.
    """
    gender = Gender.coerce(gender)
    outfit = _from_template(DAYTIME_OUTFITS[context.value][gender.value], weather)
    outfit.outerwear = pick_outerwear(context.value, weather)
    return outfit


def build_evening_outfit(gender, weather: Optional[WeatherSnapshot]) -> Outfit:
    """Evening wear depends only on gender and weather, never on the day's activities."""
    gender = Gender.coerce(gender)
    template = EVENING_OUTFITS[gender.value]
    outfit = Outfit(
        top=template["top"],
        bottom=template["bottom"],
        shoes=template["shoes"],
        accessories=list(template["accessories"]),
    )
    outfit.outerwear = pick_outerwear("evening", weather)
    return outfit
