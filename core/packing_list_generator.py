import logging
import math
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from config.travel_config import (
    CAMPING_ITEMS,
    COLD_THRESHOLD_C,
    DOCUMENT_ITEMS,
    ELECTRONICS_ITEMS,
    ESSENTIAL_ITEMS,
    GENDER_TOILETRIES,
    PURPOSE_BUNDLES,
    SHARED_SLEEPING_ACCOMMODATIONS,
    SHARED_SLEEPING_ITEMS,
    TOILETRY_ITEMS,
    WARM_THRESHOLD_C,
    WEATHER_CLOTHING,
)
from core.models import Gender, PackingCategory, PackingItem, TripParameters, WeatherSnapshot

# A rule yields (category, item) pairs; the generator appends them in order.
Addition = Tuple[str, PackingItem]
PackingRule = Callable[[TripParameters, Optional[WeatherSnapshot]], Iterable[Addition]]


def _items(category: str, rule_items) -> List[Addition]:
    return [(category, PackingItem.from_rule(*entry)) for entry in rule_items]


def _duration(params: TripParameters) -> int:
    try:
        duration = int(params.duration_days)
    except (TypeError, ValueError):
        duration = 0
    if duration < 1:
        logging.warning(f"⚠️ Invalid trip duration {params.duration_days!r}, using 1 day")
        return 1
    return duration


def essentials_rule(params, weather):
    return _items("essentials", ESSENTIAL_ITEMS)


def duration_clothing_rule(params, weather):
    """Basic clothing scaled to trip length."""
    days = _duration(params)
    return _items("clothing", [
        ("T-shirts/tops", math.ceil(days / 2) + 1, "Basic clothing", None),
        ("Pants/shorts/skirts", math.ceil(days / 3) + 1, "Basic clothing", None),
        ("Underwear", days + 1, "Basic clothing", None),
        ("Socks", days + 1, "Basic clothing", None),
        ("Sleepwear", 1, "Basic clothing", None),
    ])


def gender_rule(params, weather):
    gender = Gender.coerce(params.gender)
    additions = []
    if gender is Gender.FEMALE:
        days = _duration(params)
        additions += _items("clothing", [
            ("Bras", math.ceil(days / 2) + 1, "Basic clothing", None),
            ("Sports bras", math.ceil(days / 4) + 1, "For activities", None),
        ])
    additions += _items("toiletries", GENDER_TOILETRIES.get(gender.value, []))
    return additions


def weather_rule(params, weather):
    """Cold, warm and rain checks are independent of each other."""
    if weather is None:
        return []
    additions = []
    if weather.temperature < COLD_THRESHOLD_C:
        additions += _items("clothing", WEATHER_CLOTHING["cold"])
    if weather.temperature > WARM_THRESHOLD_C:
        additions += _items("clothing", WEATHER_CLOTHING["warm"])
    if weather.is_rainy:
        additions += _items("clothing", WEATHER_CLOTHING["rain"])
    return additions


def purpose_rule(params, weather):
    additions = []
    for purpose in params.trip_purposes or []:
        if purpose == "other":
            label = params.other_purpose_label
            if label:
                additions += _items("activities", [(f"Items for {label}", 1, f"For {label}", None)])
            continue

        bundle = PURPOSE_BUNDLES.get(purpose)
        if bundle is None:
            logging.debug(f"Ignoring unknown trip purpose: {purpose!r}")
            continue

        if purpose == "business":
            additions += _items("clothing", [
                ("Formal shirts", math.ceil(_duration(params) / 2), "For business meetings", None),
            ])
        for category, rule_items in bundle.items():
            additions += _items(category, rule_items)
    return additions


def toiletries_rule(params, weather):
    return _items("toiletries", TOILETRY_ITEMS)


def accommodation_rule(params, weather):
    additions = []
    for accommodation in params.accommodations or []:
        if accommodation in SHARED_SLEEPING_ACCOMMODATIONS:
            additions += _items("essentials", [
                (name, 1, f"For {accommodation}", None) for name in SHARED_SLEEPING_ITEMS
            ])
        if accommodation == "camping":
            additions += _items("essentials", CAMPING_ITEMS)
    return additions


def electronics_and_documents_rule(params, weather):
    return _items("electronics", ELECTRONICS_ITEMS) + _items("documents", DOCUMENT_ITEMS)


PACKING_RULES: List[PackingRule] = [
    essentials_rule,
    duration_clothing_rule,
    gender_rule,
    weather_rule,
    purpose_rule,
    toiletries_rule,
    accommodation_rule,
    electronics_and_documents_rule,
]


class PackingListGenerator:
    """
    Deterministic rule-based packing list builder.
    Rules run in order and only ever append; nothing is removed or de-duplicated.
    """

    def __init__(self, rules: Optional[List[PackingRule]] = None):
        self.rules = list(rules) if rules is not None else list(PACKING_RULES)

    def generate(
        self, params: TripParameters, weather: Optional[WeatherSnapshot] = None
    ) -> Dict[str, List[PackingItem]]:
        packing_list: Dict[str, List[PackingItem]] = {
            category.value: [] for category in PackingCategory
        }

        for rule in self.rules:
            for category, item in rule(params, weather):
                packing_list.setdefault(category, []).append(item)

        total = sum(len(items) for items in packing_list.values())
        logging.debug(f"Generated packing list with {total} items")
        return packing_list


# Global instance
packing_list_generator = PackingListGenerator()


def generate_packing_list(
    params: TripParameters, weather: Optional[WeatherSnapshot] = None
) -> Dict[str, List[PackingItem]]:
    return packing_list_generator.generate(params, weather)
