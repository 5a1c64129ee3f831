"""Tests for noise directory classification."""

import pytest
from bobindex.index.filter import is_noise


class TestLiteralRules:
    """Tests for the substring rules."""

    @pytest.mark.parametrize(
        "path",
        [
            "/mp3/Artist-Album-2010/Sample",
            "/mp3/Artist-Album-2010/Sample/inner",
            "/tv/Show.S01E01/Subs",
            "/tv/Show.S01E01/Sub",
            "/x264/Movie.2010/Proof",
            "/mp3/Artist-Album-2010/Cover",
            "/mp3/[ Artist-Album ] - ( 120M 12F - COMPLETE ) - [ Artist-Album ]",
            "/mp3/[ Artist-Album ] - ( 40M 3F - INCOMPLETE ) - [ Artist-Album ]",
            "/x264/Movie.2010/[IMDB]-7.1",
            "/mp3/_incoming",
            "/mp3/Artist-Album-2010/_hidden",
        ],
    )
    def test_noise_paths(self, path: str) -> None:
        """Sample, subs, proof, cover and status folders are noise."""
        assert is_noise(path) is True

    def test_trailing_segment_matches(self) -> None:
        """A final segment matches the same rule as an inner one."""
        assert is_noise("/mp3/album/sample") is True
        assert is_noise("/mp3/album/sample/") is True

    def test_case_insensitive(self) -> None:
        """Rules ignore the casing of the candidate path."""
        assert is_noise("/MP3/ALBUM/SAMPLE") is True
        assert is_noise("/mp3/album/sUbS") is True

    @pytest.mark.parametrize(
        "path",
        [
            "/mp3/Artist-Album-2010",
            "/mp3/Artist/Album_2010",
            "/mp3/Subscription_Vol1",
            "/mp3/Samples_Vol1",
            "/mp3/Complete_Works-2001",
            "/mp3/Artist-Incomplete_Thoughts-2003",
            "/mp3/Artist-Album_Covers-2011",
        ],
    )
    def test_release_paths(self, path: str) -> None:
        """Release directories are not noise."""
        assert is_noise(path) is False

    def test_empty_path_is_not_noise(self) -> None:
        """The classifier is total, even for an empty path."""
        assert is_noise("") is False


class TestMultiDiscRule:
    """Tests for the disc/cd/dvd split rule."""

    @pytest.mark.parametrize(
        "segment",
        ["CD1", "cd2", "CD10", "Disc1", "DISC-02", "disc_3", "disc.4", "DVD1", "dvd_1", "cd"],
    )
    def test_disc_folders(self, segment: str) -> None:
        """Disc split folders are noise in any of their spellings."""
        assert is_noise(f"/mp3/Artist-Album-2010/{segment}") is True

    def test_disc_rule_needs_segment_start(self) -> None:
        """The disc keyword only matches at the start of a segment."""
        assert is_noise("/mp3/Artist-Album_CD-2010") is False
        assert is_noise("/mp3/Various-Best_Of_Disco-2010") is False
