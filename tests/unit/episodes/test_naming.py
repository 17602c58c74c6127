"""Tests for title and filename convention parsers."""

from datetime import datetime, timedelta, timezone

import pytest

from podsite.episodes.naming import (
    expand_paragraphs,
    format_episode_date,
    parse_episode_number,
    parse_guest_name,
    parse_pub_date,
)
from podsite.utils.errors import MalformedAudioNameError, ParseError


class TestParseEpisodeNumber:
    """Tests for parse_episode_number."""

    def test_hash_prefixed_title(self) -> None:
        """Test the '#N - Guest - Name' convention."""
        assert parse_episode_number("#3 - Jane Doe - Episode Title") == 3

    def test_multi_digit(self) -> None:
        """Test numbers with several digits."""
        assert parse_episode_number("#42 - John Smith - Kotlin") == 42

    def test_surrounding_whitespace(self) -> None:
        """Test whitespace around the first token is trimmed."""
        assert parse_episode_number("  #7   - Guest - Name") == 7

    def test_other_leading_character(self) -> None:
        """Test any single non-digit prefix character is dropped."""
        assert parse_episode_number("â8 - Guest - Name") == 8

    def test_without_prefix_character(self) -> None:
        """Test that a bare number is accepted."""
        assert parse_episode_number("9 - Guest - Name") == 9

    @pytest.mark.parametrize(
        "title",
        [
            "Bonus - Guest - Name",
            "#abc - Guest",
            "",
            "#",
            "## 1 - Guest",
            "#١٢ - Guest",
        ],
    )
    def test_unparseable_raises(self, title: str) -> None:
        """Test titles without a leading number raise ParseError."""
        with pytest.raises(ParseError):
            parse_episode_number(title)


class TestParsePubDate:
    """Tests for parse_pub_date and format_episode_date."""

    def test_rfc1123_numeric_zone(self) -> None:
        """Test the fixed RSS date layout."""
        parsed = parse_pub_date("Mon, 02 Jan 2006 15:04:05 -0700")

        assert parsed == datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7)))

    def test_format_uses_own_zone(self) -> None:
        """Test the page date is the calendar date in the feed's zone."""
        parsed = parse_pub_date("Sun, 01 Jan 2023 23:30:00 +0300")

        assert format_episode_date(parsed) == "2023-01-01"

    @pytest.mark.parametrize(
        "value",
        [
            "2023-01-01",
            "Mon, 02 Jan 2006 15:04:05 MST",
            "",
            "Mon, 32 Jan 2006 15:04:05 -0700",
            "Tue, 3 Jan 2023 10:00:00 +0300",
            "Tue, 03 Jan 2023 10:00:00 Z",
            "Tue, 03 Jan 2023 10:00:00 +03:00",
        ],
    )
    def test_mismatch_raises(self, value: str) -> None:
        """Test other layouts raise ParseError."""
        with pytest.raises(ParseError):
            parse_pub_date(value)


class TestParseGuestName:
    """Tests for parse_guest_name."""

    def test_last_two_words(self) -> None:
        """Test the guest slug is the last two words of the filename."""
        assert parse_guest_name("3-2023-01-01-jane-doe.mp3") == "jane-doe"

    def test_extension_stripped_at_first_dot(self) -> None:
        """Test everything after the first '.' is ignored."""
        assert parse_guest_name("5-john-smith.final.mp3") == "john-smith"

    def test_exactly_two_words(self) -> None:
        """Test the shortest valid name."""
        assert parse_guest_name("jane-doe.mp3") == "jane-doe"

    def test_single_word_raises(self) -> None:
        """Test names without a separator raise MalformedAudioNameError."""
        with pytest.raises(MalformedAudioNameError) as exc_info:
            parse_guest_name("episode.mp3")

        assert exc_info.value.audio_name == "episode.mp3"


class TestExpandParagraphs:
    """Tests for expand_paragraphs."""

    def test_single_newline_doubled(self) -> None:
        """Test line breaks become paragraph breaks."""
        assert expand_paragraphs("line1\nline2") == "line1\n\nline2"

    def test_every_newline_doubled(self) -> None:
        """Test that existing blank lines are doubled too."""
        assert expand_paragraphs("a\n\nb") == "a\n\n\n\nb"

    def test_no_newline(self) -> None:
        """Test text without newlines is unchanged."""
        assert expand_paragraphs("single") == "single"
