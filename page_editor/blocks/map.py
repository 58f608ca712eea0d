"""Bloc Carte — adresse + coordonnées (rendu statique)."""
from typing import Annotated, Optional

from pydantic import AfterValidator

from ..core.schemas import BlockDefinition
from .base import BlockProps, clamp

# Hauteur en px : bornée pour garder un rendu raisonnable
MapHeight = Annotated[int, AfterValidator(lambda v: clamp(v, 100, 1200))]
MapZoom = Annotated[int, AfterValidator(lambda v: clamp(v, 1, 20))]


class MapProps(BlockProps):
    address: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    zoom: MapZoom = 15
    show_marker: bool = True
    height: MapHeight = 400


DEFINITION = BlockDefinition(
    id="location-map",
    type="map",
    category="business",
    name="Location Map",
    description="Embed an interactive map showing your business location",
    default_props={
        "address": "123 Business Street, City, State 12345",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "zoom": 15,
        "showMarker": True,
        "height": 400,
    },
)
