"""Tests for the Media schema."""

from __future__ import annotations

import pytest

from journalfm.domain.media import Media
from journalfm.domain.types import MediaType
from journalfm.domain.values import StringValue

MEDIA_FILE = """\
---
type: movie
title: "Star Wars: A New Hope"
creator: George Lucas
release_year: 1977
itunes_id: "123456"
aliases: []
season: 2
---

Watched twice.
"""


class TestMedia:
    def test_parse(self) -> None:
        media = Media.parse(MEDIA_FILE, "Media/Star Wars A New Hope.md")
        assert media is not None
        assert media.id == "Star Wars A New Hope"
        assert media.media_type is MediaType.MOVIE
        assert media.title == "Star Wars: A New Hope"
        assert media.release_year == 1977
        assert media.itunes_id == "123456"

    def test_round_trip_is_bit_exact(self) -> None:
        media = Media.parse(MEDIA_FILE, "Star Wars A New Hope.md")
        assert media is not None
        assert media.to_markdown() == MEDIA_FILE

    @pytest.mark.parametrize("header", ["title: Dune", "type: vinyl\ntitle: Dune", "type:"])
    def test_missing_or_unknown_type_is_absent(self, header: str) -> None:
        assert Media.parse(f"---\n{header}\n---\n", "Dune.md") is None

    def test_title_defaults_to_stem(self) -> None:
        media = Media.parse("---\ntype: book\n---\n", "Dune.md")
        assert media is not None
        assert media.title == "Dune"

    def test_numeric_itunes_id_is_quoted_on_write(self) -> None:
        media = Media.parse("---\ntype: album\nitunes_id: 987\n---\n", "Blue.md")
        assert media is not None
        assert media.itunes_id == "987"
        assert 'itunes_id: "987"' in media.to_markdown()

    def test_empty_tags_omitted(self) -> None:
        media = Media.create("Dune", MediaType.BOOK)
        assert media.to_markdown() == "---\ntype: book\ntitle: Dune\naliases: []\n---\n\n"

    def test_create_sanitizes_id(self) -> None:
        media = Media.create("Star Wars: A New Hope", MediaType.MOVIE)
        assert media.id == "Star Wars A New Hope"
        assert media.relative_path() == "Media/Star Wars A New Hope.md"

    def test_requires_filename(self) -> None:
        assert Media.parse(MEDIA_FILE) is None

    def test_display_name(self) -> None:
        assert MediaType.TV_SHOW.display_name == "TV Show"
        assert MediaType.TV_SHOW.value == "tv_show"

    def test_unknown_bracket_string_keeps_type(self) -> None:
        text = '---\ntype: book\nfoo: "[]"\n---\n\nBody\n'
        media = Media.parse(text, "Dune.md")
        assert media is not None
        assert media.unknown_fields["foo"] == StringValue(value="[]")
        assert 'foo: "[]"\n' in media.to_markdown()
        again = Media.parse(media.to_markdown(), "Dune.md")
        assert again is not None
        assert again.unknown_fields["foo"] == StringValue(value="[]")

    def test_directory(self) -> None:
        assert Media.create("Dune", MediaType.BOOK).directory() == "Media"
