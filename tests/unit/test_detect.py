"""
Unit tests for the header locator and layout detection (uk_climate_ingest.detect).
"""

import pytest

from uk_climate_ingest.detect import detect_layout, locate_data_body
from uk_climate_ingest.exceptions import NoDataError, UnknownFormatError
from uk_climate_ingest.layout_registry import get_layout
from uk_climate_ingest.parsers.ranked import RankedParser

from tests.conftest import (
    CHRONO_HEADER,
    PREAMBLE,
    chrono_text,
    full_row,
    ranked_header,
    ranked_text,
)


class TestLocateDataBody:
    """Tests for locate_data_body()."""

    def test_returns_text_after_header(self, chrono_sample):
        body = locate_data_body(chrono_sample, get_layout("chronological"))
        lines = body.split("\n")
        assert len(lines) == 3
        assert lines[0].startswith("1910")
        assert lines[2].startswith("1912")

    def test_blank_lines_removed(self):
        text = CHRONO_HEADER + "\n   \n1910  1.0  2.0\n\t\n\n1911  3.0  4.0\n  \n"
        body = locate_data_body(text, get_layout("chronological"))
        assert body == "1910  1.0  2.0\n1911  3.0  4.0"

    def test_crlf_line_endings(self):
        text = chrono_text({1910: full_row(), 1911: full_row(6.0)}, line_end="\r\n")
        body = locate_data_body(text, get_layout("chronological"))
        assert "\r" not in body
        assert body.split("\n")[1].startswith("1911")

    def test_crlf_line_endings_ranked_columns(self):
        layout = get_layout("ranked")
        text = ranked_text([[(value, 1950) for value in full_row(5.4)]]).replace("\n", "\r\n")
        body = locate_data_body(text, layout)
        assert "\r" not in body
        assert len(body) == 17 * layout.cell_width

        observations = RankedParser().parse(body, layout)
        assert len(observations) == 17
        assert {o.year for o in observations} == {1950}
        assert (observations[0].period, observations[0].value) == ("JAN", "5.4")
        assert (observations[16].period, observations[16].value) == ("ANN", "7.0")

    def test_leading_whitespace_kept(self):
        """Ranked decoding needs character positions from the line start."""
        text = ranked_header() + "       9.7  1916\n"
        body = locate_data_body(text, get_layout("ranked"))
        assert body == "       9.7  1916"

    def test_first_match_only(self):
        text = CHRONO_HEADER + "1910  1.0\n" + CHRONO_HEADER + "1911  2.0\n"
        body = locate_data_body(text, get_layout("chronological"))
        assert body.startswith("1910")
        assert "1911" in body

    def test_missing_header_raises(self):
        with pytest.raises(NoDataError, match="chronological"):
            locate_data_body(PREAMBLE + "Sorry, this file is not available\n",
                             get_layout("chronological"))

    def test_wrong_layout_raises(self, ranked_sample):
        with pytest.raises(NoDataError):
            locate_data_body(ranked_sample, get_layout("chronological"))

    def test_header_only_gives_empty_body(self):
        assert locate_data_body(CHRONO_HEADER, get_layout("chronological")) == ""


class TestDetectLayout:
    """Tests for detect_layout()."""

    def test_detects_chronological(self, chrono_sample):
        assert detect_layout(chrono_sample).mode == "chronological"

    def test_detects_ranked(self, ranked_sample):
        assert detect_layout(ranked_sample).mode == "ranked"

    def test_unknown_raises(self):
        with pytest.raises(UnknownFormatError, match="Could not detect layout"):
            detect_layout("col_a,col_b\n1,2\n")

    def test_empty_raises(self):
        with pytest.raises(UnknownFormatError, match="empty"):
            detect_layout("  \n")

    def test_no_layouts_raises(self):
        with pytest.raises(UnknownFormatError, match="No layout"):
            detect_layout("anything", layouts=[])
