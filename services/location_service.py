"""
Location Service
Read-only reference data for the monitored Uttarakhand locations
"""
import structlog
from typing import Dict, Iterable, List, Optional

from models.base import RiskLevel
from models.model import Location

logger = structlog.get_logger(__name__)

DEFAULT_LOCATIONS: List[Location] = [
    Location(name="Kedarnath", lat=30.7346, lng=79.0669, population=1500, risk_level=RiskLevel.CRITICAL, elevation=3583),
    Location(name="Badrinath", lat=30.7433, lng=79.4938, population=2000, risk_level=RiskLevel.HIGH, elevation=3133),
    Location(name="Gangotri", lat=30.9993, lng=78.9411, population=1200, risk_level=RiskLevel.HIGH, elevation=3100),
    Location(name="Yamunotri", lat=31.0118, lng=78.4270, population=800, risk_level=RiskLevel.MEDIUM, elevation=3293),
    Location(name="Hemkund", lat=30.7268, lng=79.6634, population=500, risk_level=RiskLevel.CRITICAL, elevation=4329),
    Location(name="Govindghat", lat=30.7176, lng=79.6341, population=3000, risk_level=RiskLevel.HIGH, elevation=1828),
    Location(name="Joshimath", lat=30.5553, lng=79.5601, population=8000, risk_level=RiskLevel.MEDIUM, elevation=1890),
    Location(name="Rishikesh", lat=30.0869, lng=78.2676, population=102138, risk_level=RiskLevel.LOW, elevation=372),
    Location(name="Haridwar", lat=29.9457, lng=78.1642, population=228832, risk_level=RiskLevel.LOW, elevation=314),
    Location(name="Dehradun", lat=30.3165, lng=78.0322, population=578420, risk_level=RiskLevel.LOW, elevation=640),
]


class LocationService:
    """Lookup over the monitored locations, keyed by name"""

    def __init__(self, locations: Optional[Iterable[Location]] = None):
        self._locations: Dict[str, Location] = {}
        for location in (DEFAULT_LOCATIONS if locations is None else locations):
            if location.name in self._locations:
                raise ValueError(f"Duplicate location name: {location.name}")
            self._locations[location.name] = location
        logger.info("Locations loaded", count=len(self._locations))

    def list_locations(self) -> List[Location]:
        return list(self._locations.values())

    def get_location(self, name: str) -> Optional[Location]:
        """Exact match first, then case-insensitive"""
        location = self._locations.get(name)
        if location is None:
            location = next(
                (loc for key, loc in self._locations.items() if key.lower() == name.lower()),
                None,
            )
        return location

    def __len__(self) -> int:
        return len(self._locations)
