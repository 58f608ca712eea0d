"""Bloc Horaires — jours de la semaine + fuseau."""
from typing import Dict, Optional

from ..core.schemas import BlockDefinition
from .base import BlockProps

WEEK_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
CLOSED = "Closed"


class HoursProps(BlockProps):
    hours: Dict[str, str] = {}
    timezone: Optional[str] = None
    # Conservé pour le round-trip ; non rendu (sortie indépendante de l'horloge)
    show_current_status: bool = False

    def for_day(self, day: str) -> str:
        return self.hours.get(day) or CLOSED


DEFINITION = BlockDefinition(
    id="business-hours",
    type="hours",
    category="business",
    name="Business Hours",
    description="Display your operating hours and contact information",
    default_props={
        "hours": {
            "monday": "9:00 AM - 6:00 PM",
            "tuesday": "9:00 AM - 6:00 PM",
            "wednesday": "9:00 AM - 6:00 PM",
            "thursday": "9:00 AM - 6:00 PM",
            "friday": "9:00 AM - 6:00 PM",
            "saturday": "10:00 AM - 4:00 PM",
            "sunday": "Closed",
        },
        "timezone": "EST",
        "showCurrentStatus": True,
    },
)
