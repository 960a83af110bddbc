import re
import logging
from typing import Dict, List, Optional

# Matches "Day 1: ...", "  day 2 - ...", "DAY3 ..." at the start of a line
DAY_HEADER = re.compile(r"\s*day\s*(\d+)\s*[:-]?\s*(.*)", re.IGNORECASE)

ORPHAN_POLICIES = ("highest", "latest")


def parse_itinerary(text: Optional[str], orphan_policy: str = "highest") -> Dict[int, List[str]]:
    """
    Extracts activities per day number from free-form itinerary text.

    Lines that are not day headers are attached to a previously seen day:
    the highest day number so far ("highest") or the last header parsed ("latest").
    Text before the first header and blank lines are dropped.
    """
    if orphan_policy not in ORPHAN_POLICIES:
        raise ValueError(f"Unknown orphan policy {orphan_policy!r}, expected one of {ORPHAN_POLICIES}")

    activities: Dict[int, List[str]] = {}
    if not text:
        return activities

    last_day = None
    for line in text.splitlines():
        match = DAY_HEADER.match(line)
        if match:
            day = int(match.group(1))
            activity = match.group(2).strip()
            activities.setdefault(day, [])
            if activity:
                activities[day].append(activity)
            last_day = day
        elif activities:
            trimmed = line.strip()
            if not trimmed:
                continue
            target = max(activities) if orphan_policy == "highest" else last_day
            activities[target].append(trimmed)

    logging.debug(f"Parsed itinerary into {len(activities)} days")
    return activities
