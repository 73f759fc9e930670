"""
modules/recommendation/destination_catalog.py
-----------------------------------------------
Built-in catalogue of popular destinations offered by the trip form's
destination picker, plus the hero-image lookup used on trip cards.

Any destination name not in the catalogue falls back to
config.DEFAULT_DESTINATION_IMAGE_URL.
"""

from __future__ import annotations
from dataclasses import dataclass
import config

_UNSPLASH_PARAMS = "?q=80&w=3000&auto=format&fit=crop&ixlib=rb-4.0.3"


@dataclass(frozen=True)
class Destination:
    name: str
    country: str
    description: str
    image_name: str            # symbol shown in the picker row
    popularity_score: int      # 0-100
    location_id: str           # external travel-site location id
    image_url: str = ""


POPULAR_DESTINATIONS: tuple[Destination, ...] = (
    Destination(
        name="Paris", country="France",
        description="The City of Light featuring the Eiffel Tower and world-class cuisine",
        image_name="building.columns.fill", popularity_score=98, location_id="187147",
        image_url="https://plus.unsplash.com/premium_photo-1661919210043-fd847a58522d" + _UNSPLASH_PARAMS,
    ),
    Destination(
        name="Bali", country="Indonesia",
        description="Tropical paradise with beautiful beaches and rich culture",
        image_name="leaf.fill", popularity_score=95, location_id="294226",
        image_url="https://images.unsplash.com/photo-1554481923-a6918bd997bc" + _UNSPLASH_PARAMS,
    ),
    Destination(
        name="Tokyo", country="Japan",
        description="Modern metropolis blending traditional culture with cutting-edge technology",
        image_name="building.2.fill", popularity_score=94, location_id="298184",
        image_url="https://images.unsplash.com/photo-1551641506-ee5bf4cb45f1" + _UNSPLASH_PARAMS,
    ),
    Destination(
        name="Santorini", country="Greece",
        description="Stunning white-washed buildings overlooking the Aegean Sea",
        image_name="sun.max.fill", popularity_score=92, location_id="189433",
        image_url="https://images.unsplash.com/photo-1731684019094-673232b34cf6" + _UNSPLASH_PARAMS,
    ),
    Destination(
        name="New York City", country="USA",
        description="The Big Apple - world's most iconic cityscape and cultural hub",
        image_name="building.fill", popularity_score=91, location_id="60763",
        image_url="https://images.unsplash.com/photo-1539630179772-93574399faf7" + _UNSPLASH_PARAMS,
    ),
)


class DestinationCatalog:

    def __init__(
        self,
        destinations: tuple[Destination, ...] = POPULAR_DESTINATIONS,
        default_image_url: str = config.DEFAULT_DESTINATION_IMAGE_URL,
    ):
        self._destinations = destinations
        self._default_image_url = default_image_url

    def popular(self) -> list[Destination]:
        """Most popular first."""
        return sorted(self._destinations, key=lambda d: d.popularity_score, reverse=True)

    def get(self, name: str) -> Destination | None:
        for d in self._destinations:
            if d.name == name:
                return d
        return None

    def search(self, query: str) -> list[Destination]:
        """Case-insensitive substring match on name or country, most popular first."""
        q = query.strip().lower()
        if not q:
            return self.popular()
        return [
            d for d in self.popular()
            if q in d.name.lower() or q in d.country.lower()
        ]

    def image_url_for(self, destination_name: str) -> str:
        match = self.get(destination_name)
        if match is None or not match.image_url:
            return self._default_image_url
        return match.image_url
