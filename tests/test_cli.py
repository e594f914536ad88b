"""Tests for the command line entry point."""

import json

import pytest

from main import main, parse_points


class TestParsePoints:

    def test_parses_pairs(self):
        assert parse_points("0:0|50:0|50:50") == [(0.0, 0.0), (50.0, 0.0), (50.0, 50.0)]

    def test_ignores_empty_parts(self):
        assert parse_points("1:2||3:4|") == [(1.0, 2.0), (3.0, 4.0)]

    @pytest.mark.parametrize("text", ["1:2|3", "1:2:3", "a:b"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_points(text)


class TestMain:

    def test_centre(self, capsys):
        assert main(["centre", "--points", "0:0|10:0"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["0.000,0.000", "10.000,0.000"]

    def test_contour_json(self, capsys):
        assert main(["contour", "--points", "0:0|10:0", "--radius", "5", "--json"]) == 0

        points = json.loads(capsys.readouterr().out)
        assert points[0] == pytest.approx([0, -5])

    def test_bounds(self, capsys):
        assert main(["bounds", "--points", "0:0|50:0|50:0|50:50"]) == 0

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["0.000,0.000,50.000,0.000", "50.000,0.000,50.000,50.000"]

    def test_invalid_curve(self):
        assert main(["centre", "--points", "1:1|1:1"]) == 1

    def test_invalid_tolerance(self):
        assert main(["centre", "--points", "0:0|10:0", "--tolerance", "0"]) == 1

    def test_no_command(self):
        assert main([]) == 1
