import pytest

from longpath.graph.io import (
    EdgeParseError,
    edgelist_to_graph,
    format_path,
    parse_edge_line,
    parse_edge_lines,
)
from longpath.types import ParseMode


class TestParseEdgeLine:
    def test_valid_line(self):
        assert parse_edge_line("1, 2, 8.54") == (1, 2, 8.54)

    def test_whitespace_is_trimmed(self):
        assert parse_edge_line("  3 ,4,   4  \r\n") == (3, 4, 4.0)

    def test_negative_values(self):
        assert parse_edge_line("-1, 2, -3.5") == (-1, 2, -3.5)

    def test_signs_and_exponents(self):
        assert parse_edge_line("+1, 2, .5") == (1, 2, 0.5)
        assert parse_edge_line("1, 2, 2.5e1") == (1, 2, 25.0)
        assert parse_edge_line("1, 2, 7.") == (1, 2, 7.0)

    def test_blank_line(self):
        assert parse_edge_line("") is None
        assert parse_edge_line("   \t") is None

    @pytest.mark.parametrize(
        "line",
        [
            "1, 2",
            "1, 2, 3, 4",
            "1,, 3",
            "a, 2, 3",
            "1, b, 3",
            "1, 2, c",
            "1.5, 2, 3",
            "1, 2, nan",
            "1, 2, inf",
            "1 2 3",
            "1_0, 2, 3",
            "1, 2_0, 3",
            "1, 2, 1_0.5",
            "\u0661, 2, 3",
            "1, 2, \uff13",
            "1, 2, 1e999",
            "1, 2, .",
        ],
    )
    def test_malformed_line(self, line):
        assert parse_edge_line(line) is None


class TestParseEdgeLines:
    def test_lenient_drops_malformed(self):
        lines = ["1, 2, 3", "", "garbage", "2, 3, 1.5", "4, x, 1"]
        assert parse_edge_lines(lines) == [(1, 2, 3.0), (2, 3, 1.5)]

    def test_lenient_logs_dropped_lines(self, caplog):
        caplog.set_level("DEBUG", logger="longpath")
        parse_edge_lines(["1, 2, 3", "bad"])
        assert any("Dropping malformed line 2" in r.message for r in caplog.records)

    def test_strict_raises_with_line_number(self):
        lines = ["1, 2, 3", "", "1, 2"]
        with pytest.raises(EdgeParseError) as exc_info:
            parse_edge_lines(lines, mode=ParseMode.STRICT)
        assert exc_info.value.line_no == 3
        assert exc_info.value.line == "1, 2"
        assert isinstance(exc_info.value, ValueError)

    def test_strict_rejects_extra_fields(self):
        with pytest.raises(EdgeParseError) as exc_info:
            parse_edge_lines(["1, 2, 3, 4"], mode=ParseMode.STRICT)
        assert "expected 3 comma-separated fields, got 4" in str(exc_info.value)

    def test_lenient_drops_extra_fields(self):
        assert parse_edge_lines(["1, 2, 3, 4", "1, 2, 3"]) == [(1, 2, 3.0)]

    def test_strict_skips_blank_lines(self):
        assert parse_edge_lines(["", "1, 2, 3", "  "], mode=ParseMode.STRICT) == [
            (1, 2, 3.0)
        ]

    def test_duplicates_preserved(self):
        assert parse_edge_lines(["1, 2, 3", "1, 2, 3"]) == [(1, 2, 3.0), (1, 2, 3.0)]


def test_edgelist_to_graph(sample_lines):
    g = edgelist_to_graph(sample_lines + ["not an edge"])
    assert g.vertices() == [1, 2, 3, 4]
    assert g.number_of_edges() == 5
    assert g.adjacency_lists()[3] == [(1, 2.19), (4, 4.0)]


def test_format_path():
    assert format_path([1, 2, 3]) == "1\r\n2\r\n3"
    assert format_path([7]) == "7"
    assert format_path([]) == ""
