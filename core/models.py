from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from config.travel_config import RAIN_KEYWORD


class Gender(Enum):
    """Traveler gender used to pick clothing and outfit tables"""
    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"

    @classmethod
    def coerce(cls, value) -> "Gender":
        """Unknown or missing values fall back to neutral."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.NEUTRAL


class PackingCategory(Enum):
    """Packing list sections, in display order"""
    ESSENTIALS = "essentials"
    CLOTHING = "clothing"
    TOILETRIES = "toiletries"
    ELECTRONICS = "electronics"
    DOCUMENTS = "documents"
    ACTIVITIES = "activities"


class ActivityContext(Enum):
    """Winning activity classification for a single day"""
    BEACH = "beach"
    BUSINESS = "business"
    OUTDOOR = "outdoor"
    CASUAL = "casual"


@dataclass(frozen=True)
class WeatherSnapshot:
    """A normalized weather reading as returned by the weather provider."""
    temperature: float
    description: str
    icon: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    precipitation: Optional[float] = None
    cloud_cover: Optional[float] = None
    date: Optional[date] = None

    @property
    def is_rainy(self) -> bool:
        return RAIN_KEYWORD in (self.description or "").lower()

    def with_changes(self, **changes) -> "WeatherSnapshot":
        return replace(self, **changes)

    def to_dict(self) -> Dict:
        data = {
            "temperature": self.temperature,
            "description": self.description,
        }
        for key in ("icon", "humidity", "wind_speed", "precipitation", "cloud_cover"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.date is not None:
            data["date"] = self.date.isoformat()
        return data


@dataclass(frozen=True)
class TripParameters:
    """Trip attributes for a single generation call"""
    duration_days: int
    trip_purposes: List[str] = field(default_factory=list)
    other_purpose_label: Optional[str] = None
    accommodations: List[str] = field(default_factory=list)
    gender: Gender = Gender.NEUTRAL
    itinerary_text: Optional[str] = None
    destination: str = ""
    start_date: Optional[date] = None
    luggage_type: Optional[str] = None

    @property
    def locations(self) -> List[str]:
        return [loc.strip() for loc in (self.destination or "").split(",") if loc.strip()]


@dataclass
class PackingItem:
    name: str
    quantity: int = 1
    packed: bool = False
    purpose: Optional[str] = None
    is_liquid: bool = False
    volume: Optional[str] = None

    @classmethod
    def from_rule(cls, name, quantity, purpose, volume=None) -> "PackingItem":
        """Builds an item from a rule tuple; a volume marks the item as liquid."""
        return cls(
            name=name,
            quantity=max(1, int(quantity)),
            purpose=purpose,
            is_liquid=volume is not None,
            volume=volume,
        )

    def to_dict(self) -> Dict:
        data = {
            "name": self.name,
            "quantity": self.quantity,
            "packed": self.packed,
            "purpose": self.purpose,
            "is_liquid": self.is_liquid,
        }
        if self.volume is not None:
            data["volume"] = self.volume
        return data


@dataclass
class Outfit:
    top: str
    bottom: str
    shoes: str
    accessories: List[str] = field(default_factory=list)
    outerwear: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {
            "top": self.top,
            "bottom": self.bottom,
            "shoes": self.shoes,
            "accessories": list(self.accessories),
        }
        if self.outerwear:
            data["outerwear"] = self.outerwear
        return data


@dataclass
class DailyOutfit:
    day: int
    date: date
    activities: List[str]
    daytime: Outfit
    evening: Outfit
    context: ActivityContext = ActivityContext.CASUAL
    weather: Optional[WeatherSnapshot] = None

    def to_dict(self) -> Dict:
        return {
            "day": self.day,
            "date": self.date.isoformat(),
            "activities": list(self.activities),
            "context": self.context.value,
            "daytime": self.daytime.to_dict(),
            "evening": self.evening.to_dict(),
            "weather": self.weather.to_dict() if self.weather else None,
        }


def packing_list_to_dict(packing_list: Dict[str, List[PackingItem]]) -> Dict[str, List[Dict]]:
    """Serializes a generated packing list for JSON output."""
    return {category: [item.to_dict() for item in items] for category, items in packing_list.items()}
