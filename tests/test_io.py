"""Tests for the text readers and writer."""

import io

import pytest

from roadtrip.domain.errors import DigraphError, InputFormatError
from roadtrip.domain.models import RoadSegment, Trip, TripMetric
from roadtrip.io import InputReader, read_road_map, read_trips, write_road_map


def _reader(text, comment_prefix="#"):
    return InputReader(io.StringIO(text), comment_prefix=comment_prefix)


class TestInputReader:
    def test_skips_blank_and_comment_lines(self):
        reader = _reader("# header\n\n  first  \n   # indented comment\nsecond\n")
        assert reader.read_line() == "first"
        assert reader.line_number == 3
        assert reader.read_line() == "second"
        assert reader.line_number == 5

    def test_custom_comment_prefix(self):
        reader = _reader("; note\n# kept\n", comment_prefix=";")
        assert reader.read_line() == "# kept"

    def test_end_of_input(self):
        reader = _reader("only\n")
        reader.read_line()
        with pytest.raises(InputFormatError) as exc_info:
            reader.read_line()
        assert exc_info.value.line_number == 1

    def test_read_int(self):
        assert _reader(" 12 \n").read_int() == 12

    def test_read_int_rejects_text(self):
        with pytest.raises(InputFormatError) as exc_info:
            _reader("\ntwelve\n").read_int()
        assert exc_info.value.line_number == 2

    def test_negative_count(self):
        with pytest.raises(InputFormatError):
            _reader("-1\n").read_count("vertex")


class TestReadRoadMap:
    def test_reads_sample_file(self, orange_county_path):
        with orange_county_path.open(encoding="utf-8") as f:
            road_map = read_road_map(InputReader(f))

        assert road_map.vertex_count() == 5
        assert road_map.edge_count() == 12
        assert road_map.vertex_info(2) == "Costa Mesa"
        assert road_map.edge_info(0, 1) == RoadSegment(miles=4.2, miles_per_hour=45.0)

    def test_location_names_keep_inner_spaces(self):
        road_map = read_road_map(_reader("1\n7   Santa   Ana \n0\n"))
        assert road_map.vertex_info(7) == "Santa   Ana"

    def test_tab_separated_vertex_line(self):
        road_map = read_road_map(_reader("2\n0\tIrvine\n1\tCosta Mesa\n0\n"))
        assert road_map.vertex_info(0) == "Irvine"
        assert road_map.vertex_info(1) == "Costa Mesa"

    def test_duplicate_vertex(self):
        with pytest.raises(InputFormatError) as exc_info:
            read_road_map(_reader("2\n0 A\n0 B\n0\n"))
        assert exc_info.value.line_number == 3
        assert isinstance(exc_info.value.cause, DigraphError)

    def test_bad_vertex_id(self):
        with pytest.raises(InputFormatError):
            read_road_map(_reader("1\nzero A\n0\n"))

    def test_edge_to_unknown_vertex(self):
        with pytest.raises(InputFormatError) as exc_info:
            read_road_map(_reader("1\n0 A\n1\n0 5 1.0 30\n"))
        assert isinstance(exc_info.value.cause, DigraphError)

    def test_edge_with_wrong_field_count(self):
        with pytest.raises(InputFormatError):
            read_road_map(_reader("2\n0 A\n1 B\n1\n0 1 1.0\n"))

    def test_edge_with_zero_speed(self):
        with pytest.raises(InputFormatError) as exc_info:
            read_road_map(_reader("2\n0 A\n1 B\n1\n0 1 1.0 0\n"))
        assert isinstance(exc_info.value.cause, ValueError)

    def test_truncated_input(self):
        with pytest.raises(InputFormatError):
            read_road_map(_reader("3\n0 A\n1 B\n"))


class TestReadTrips:
    def test_reads_trips(self):
        trips = read_trips(_reader("2\n0 3 D\n3 0 t\n"))
        assert trips == [
            Trip(0, 3, TripMetric.DISTANCE),
            Trip(3, 0, TripMetric.TIME),
        ]

    def test_no_trips(self):
        assert read_trips(_reader("0\n")) == []

    def test_unknown_metric(self):
        with pytest.raises(InputFormatError) as exc_info:
            read_trips(_reader("1\n0 1 X\n"))
        assert exc_info.value.line_number == 2

    def test_missing_metric(self):
        with pytest.raises(InputFormatError):
            read_trips(_reader("1\n0 1\n"))

    def test_reads_after_road_map_on_same_reader(self, orange_county_path):
        with orange_county_path.open(encoding="utf-8") as f:
            reader = InputReader(f)
            read_road_map(reader)
            trips = read_trips(reader)

        assert [t.metric for t in trips] == [
            TripMetric.DISTANCE,
            TripMetric.TIME,
            TripMetric.DISTANCE,
        ]


class TestWriteRoadMap:
    def test_output_reloads_to_same_graph(self, orange_county_path):
        with orange_county_path.open(encoding="utf-8") as f:
            original = read_road_map(InputReader(f))

        buffer = io.StringIO()
        write_road_map(original, buffer)
        reloaded = read_road_map(_reader(buffer.getvalue()))

        assert sorted(reloaded.vertices()) == sorted(original.vertices())
        assert sorted(reloaded.edges()) == sorted(original.edges())
        for edge in original.edges():
            assert reloaded.edge_info(*edge) == original.edge_info(*edge)
        for vertex in original.vertices():
            assert reloaded.vertex_info(vertex) == original.vertex_info(vertex)

    def test_sorted_output(self):
        road_map = read_road_map(_reader("2\n5 B\n1 A\n1\n5 1 2.5 30\n"))
        buffer = io.StringIO()
        write_road_map(road_map, buffer)
        assert buffer.getvalue() == "2\n1 A\n5 B\n1\n5 1 2.5 30.0\n"
