"""Tests for output path utilities."""

from pathlib import Path

from lyricspot.utils.paths import lyrics_output_path, slugify


class TestSlugify:
    def test_basic(self):
        assert slugify("Hello World") == "hello-world"

    def test_video_title(self):
        assert slugify("Daft Punk - Get Lucky (Official Video)") == (
            "daft-punk-get-lucky-official-video"
        )

    def test_keeps_non_latin_words(self):
        assert slugify("Tum Hi Ho | तुम ही हो") != ""

    def test_collapses_dashes(self):
        assert slugify("a---b   c") == "a-b-c"

    def test_truncates_long_strings(self):
        assert len(slugify("a" * 200)) <= 80

    def test_empty_string(self):
        assert slugify("") == ""


class TestLyricsOutputPath:
    def test_slug_and_extension(self, tmp_path):
        path = lyrics_output_path("Artist - Song", tmp_path, "srt")
        assert path == tmp_path / "artist-song.srt"

    def test_untitled_fallback(self):
        assert lyrics_output_path("!!!", Path("out"), "lrc") == Path("out/untitled.lrc")

    def test_taken_paths_get_suffix(self, tmp_path):
        taken = {tmp_path / "artist-song.lrc", tmp_path / "artist-song-2.lrc"}
        path = lyrics_output_path("Artist: Song!", tmp_path, "lrc", taken=taken)
        assert path == tmp_path / "artist-song-3.lrc"

    def test_free_path_unchanged_with_taken(self, tmp_path):
        taken = {tmp_path / "other.lrc"}
        assert lyrics_output_path("Artist - Song", tmp_path, "lrc", taken) == (
            tmp_path / "artist-song.lrc"
        )
