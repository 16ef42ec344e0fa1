"""Record kinds and the controlled vocabularies used by record fields.

Unrecognized vocabulary values never fail a parse: each record schema
falls back to a sentinel member (``OTHER`` for relationships, ``PLACE``
for callouts) or treats the record as absent when the field is required
(media ``type``).
"""

from __future__ import annotations

from enum import StrEnum


class RecordKind(StrEnum):
    """The four record families stored in a vault."""

    ENTRY = "entry"
    PERSON = "person"
    PLACE = "place"
    MEDIA = "media"


class RelationshipType(StrEnum):
    """Relationship tags for people."""

    FAMILY = "family"
    FRIEND = "friend"
    COLLEAGUE = "colleague"
    ACQUAINTANCE = "acquaintance"
    PARTNER = "partner"
    MENTOR = "mentor"
    OTHER = "other"


class PlaceCallout(StrEnum):
    """Place categories, also used as the callout type in day notes."""

    PLACE = "place"
    SCHOOL = "school"
    PARK = "park"
    CAFE = "cafe"
    RESTAURANT = "restaurant"
    GROCERY = "grocery"
    HOME = "home"
    RESIDENCE = "residence"
    BAR = "bar"
    SHOP = "shop"
    MEDICAL = "medical"
    AIRPORT = "airport"
    HOTEL = "hotel"
    LIBRARY = "library"
    ZOO = "zoo"
    MUSEUM = "museum"
    WORKOUT = "workout"


class MediaType(StrEnum):
    """Media categories. ``TV_SHOW`` keeps its snake_case file spelling."""

    MOVIE = "movie"
    TV_SHOW = "tv_show"
    BOOK = "book"
    PODCAST = "podcast"
    ALBUM = "album"

    @property
    def display_name(self) -> str:
        return _MEDIA_DISPLAY_NAMES[self]


_MEDIA_DISPLAY_NAMES: dict[MediaType, str] = {
    MediaType.MOVIE: "Movie",
    MediaType.TV_SHOW: "TV Show",
    MediaType.BOOK: "Book",
    MediaType.PODCAST: "Podcast",
    MediaType.ALBUM: "Album",
}
