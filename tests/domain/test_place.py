"""Tests for the Place schema."""

from __future__ import annotations

from journalfm.domain.fields import Coordinates
from journalfm.domain.place import Place
from journalfm.domain.types import PlaceCallout

PLACE_FILE = """\
---
location: 37.77490,-122.41940
addr: 66 Mint St
tags: []
callout: cafe
pin: coffee
url: "https://bluebottle.com"
aliases: []
---
"""


class TestPlace:
    def test_parse(self) -> None:
        place = Place.parse(PLACE_FILE + "\n", "Places/Blue Bottle.md")
        assert place is not None
        assert place.id == "Blue Bottle"
        assert place.location == Coordinates(latitude=37.7749, longitude=-122.4194)
        assert place.address == "66 Mint St"
        assert place.callout is PlaceCallout.CAFE
        assert place.url == "https://bluebottle.com"
        assert place.tags == []

    def test_round_trip_is_bit_exact(self) -> None:
        text = PLACE_FILE + "\n"
        place = Place.parse(text, "Blue Bottle.md")
        assert place is not None
        assert place.to_markdown() == text

    def test_unknown_callout_defaults_to_place(self) -> None:
        place = Place.parse("---\ncallout: volcano\n---\n", "Etna.md")
        assert place is not None
        assert place.callout is PlaceCallout.PLACE

    def test_malformed_location_kept_verbatim(self) -> None:
        text = "---\nlocation: somewhere north\n---\n\n"
        place = Place.parse(text, "Cabin.md")
        assert place is not None
        assert place.location is None
        assert "location: somewhere north\n" in place.to_markdown()

    def test_new_place(self) -> None:
        place = Place.create("Blue Bottle", location=Coordinates(latitude=1.5, longitude=-2.25))
        assert place.to_markdown() == (
            "---\n"
            "location: 1.50000,-2.25000\n"
            "tags: []\n"
            "callout: place\n"
            "aliases: []\n"
            "---\n\n"
        )

    def test_path(self) -> None:
        assert Place.create("Café: Nero").relative_path() == "Places/Café Nero.md"

    def test_empty_header(self) -> None:
        place = Place.parse("---\n---\n\nBody", "Home.md")
        assert place is not None
        assert place.location is None
        assert place.address is None
        assert place.tags == []
        assert place.aliases == []
        assert place.callout is PlaceCallout.PLACE
        assert place.unknown_fields == {}
        assert place.body == "Body"
