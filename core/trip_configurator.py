import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from config.travel_config import ACCOMMODATION_LABELS, ACCOMMODATION_TYPES, LUGGAGE_LABELS, TRIP_PURPOSES
from core.models import Gender, TripParameters


def _normalize_tags(values) -> List[str]:
    """Lower-cases and trims tags, keeping input order and duplicates."""
    if isinstance(values, str):
        values = values.split(",")
    return [str(v).strip().lower() for v in values or [] if str(v).strip()]


def _parse_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        logging.warning(f"⚠️ Could not parse date: {value!r}")
        return None


def _warn_unknown(kind: str, values: List[str], known: List[str]) -> None:
    """Unknown values are kept; the packing rules simply ignore them."""
    unknown = [v for v in values if v not in known]
    if unknown:
        logging.warning(f"⚠️ Unknown {kind} value(s) will add no items: {', '.join(unknown)}")


def accommodation_label(accommodation: str) -> str:
    return ACCOMMODATION_LABELS.get(accommodation, accommodation)


def luggage_label(luggage_type: str) -> str:
    return LUGGAGE_LABELS.get(luggage_type, luggage_type)


class TripConfigurator:
    """Handles the preparation and validation of trip form data."""

    def __init__(self, form_data: Dict):
        self._form_data = form_data or {}
        self._trip_params: Optional[TripParameters] = None

    def prepare_trip_parameters(self) -> Optional[TripParameters]:
        """
        Normalizes raw form input into TripParameters.
        Returns None when the destination or a usable trip length is missing.
        """
        logging.info("🧳 Preparing trip parameters...")
        self._log_form_data()

        destination = str(self._form_data.get("destination") or "").strip()
        if not destination:
            logging.error("❌ Critical trip information (destination) is missing.")
            return None

        start_date = _parse_date(self._form_data.get("start_date"))
        duration = self._resolve_duration(start_date)
        if duration is None:
            logging.error("❌ Critical trip information (dates or duration) is missing.")
            return None

        trip_purposes = _normalize_tags(self._form_data.get("trip_purposes"))
        accommodations = _normalize_tags(self._form_data.get("accommodations"))
        _warn_unknown("trip purpose", trip_purposes, TRIP_PURPOSES)
        _warn_unknown("accommodation", accommodations, ACCOMMODATION_TYPES)

        self._trip_params = TripParameters(
            duration_days=duration,
            trip_purposes=trip_purposes,
            other_purpose_label=(self._form_data.get("other_purpose") or "").strip() or None,
            accommodations=accommodations,
            gender=Gender.coerce(self._form_data.get("gender")),
            itinerary_text=self._form_data.get("itinerary") or None,
            destination=destination,
            start_date=start_date,
            luggage_type=(self._form_data.get("luggage_type") or "").strip() or None,
        )

        logging.info(f"✅ Trip parameters prepared: {duration} days, {len(self._trip_params.locations)} location(s)")
        return self._trip_params

    def _resolve_duration(self, start_date: Optional[date]) -> Optional[int]:
        """An explicit duration wins; otherwise count days from start to end inclusive."""
        explicit = self._form_data.get("duration")
        if explicit not in (None, ""):
            try:
                duration = int(explicit)
            except (TypeError, ValueError):
                logging.warning(f"⚠️ Ignoring non-numeric duration: {explicit!r}")
            else:
                if duration >= 1:
                    return duration
                logging.warning(f"⚠️ Ignoring non-positive duration: {duration}")

        end_date = _parse_date(self._form_data.get("end_date"))
        if start_date and end_date:
            if end_date < start_date:
                logging.error(f"❌ End date {end_date} is before start date {start_date}")
                return None
            return (end_date - start_date).days + 1
        return None

    def _log_form_data(self) -> None:
        """Logs the raw trip form data."""
        logging.info("🧳 Trip form data:")
        logging.info(f"   Destination: \"{self._form_data.get('destination', 'N/A')}\"")
        logging.info(f"   Dates: {self._form_data.get('start_date', 'N/A')} -> {self._form_data.get('end_date', 'N/A')}")
        logging.info(f"   Purposes: {', '.join(_normalize_tags(self._form_data.get('trip_purposes'))) or 'N/A'}")
        logging.info(f"   Luggage: {self._form_data.get('luggage_type') or 'N/A'}")
