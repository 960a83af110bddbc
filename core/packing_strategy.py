from typing import Dict, Optional

from config.travel_config import BACKPACK_SIZES, GENERAL_PACKING_STRATEGY, PACKING_STRATEGIES
from core.trip_configurator import luggage_label


def _section(section: Dict) -> Dict:
    data = {"heading": section["heading"], "tips": list(section["tips"])}
    if section.get("intro"):
        data["intro"] = section["intro"]
    return data


def get_packing_strategy(luggage_type: Optional[str]) -> Optional[Dict]:
    """
    Packing tips for a luggage type.
    Backpack sizes share one template; other unlisted luggage gets the general
    principles. Returns None when no luggage type was chosen.
    """
    if not luggage_type:
        return None

    if luggage_type in BACKPACK_SIZES:
        template = PACKING_STRATEGIES["backpack"]
        title = template["title"].format(size=BACKPACK_SIZES[luggage_type])
    elif luggage_type in PACKING_STRATEGIES:
        template = PACKING_STRATEGIES[luggage_type]
        title = template["title"]
    else:
        template = GENERAL_PACKING_STRATEGY
        title = template["title"].format(luggage=luggage_type)

    return {
        "luggage_type": luggage_type,
        "label": luggage_label(luggage_type),
        "title": title,
        "sections": [_section(section) for section in template["sections"]],
    }
