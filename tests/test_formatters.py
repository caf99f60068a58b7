"""Tests for size formatting and result rendering."""

import json
from pathlib import Path

import pytest

from largest.config import ScanConfig
from largest.formatters import JsonFormatter, TextFormatter, format_size, get_formatter
from largest.models import FileRecord, ScanResult


class TestFormatSize:
    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 bytes"),
            (999, "999 bytes"),
            (1000, "1 KB"),
            (2000, "2 KB"),
            (999999, "999 KB"),
            (1000000, "1 MB"),
            (500000, "500 KB"),
            (1_500_000_000, "1 GB"),
            (10**24, "1 YB"),
        ],
    )
    def test_units(self, size, expected):
        assert format_size(size) == expected

    def test_truncates_instead_of_rounding(self):
        assert format_size(1999) == "1 KB"

    def test_beyond_largest_unit_stays_in_yb(self):
        assert format_size(5 * 10**27) == "5000 YB"

    def test_width_right_aligns_number(self):
        assert format_size(2000, width=3) == "  2 KB"
        assert format_size(7, width=3) == "  7 bytes"
        assert format_size(123456, width=3) == "123 KB"


@pytest.fixture
def result(tmp_path):
    root = tmp_path / "root"
    return ScanResult(
        root=root,
        records=[
            FileRecord(500000, root / "big.iso"),
            FileRecord(2000, root / "sub" / "small.txt"),
        ],
    )


class TestTextFormatter:
    def test_size_prefixed_lines(self, result):
        config = ScanConfig(root=result.root)
        lines = TextFormatter().lines(result, config)
        assert lines == [
            f"500 KB {result.root / 'big.iso'}",
            f"  2 KB {result.root / 'sub' / 'small.txt'}",
        ]

    def test_bare_relative(self, result):
        config = ScanConfig(root=result.root, bare=True, relative=True)
        text = TextFormatter().format(result, config)
        assert text.splitlines() == ["big.iso", str(Path("sub") / "small.txt")]

    def test_render_prints(self, result, capsys):
        config = ScanConfig(root=result.root, bare=True)
        TextFormatter().render(result, config)
        assert capsys.readouterr().out.splitlines() == [str(r.path) for r in result.records]

    def test_render_empty_result_prints_nothing(self, tmp_path, capsys):
        TextFormatter().render(ScanResult(root=tmp_path), ScanConfig(root=tmp_path))
        assert capsys.readouterr().out == ""


class TestJsonFormatter:
    def test_valid_json(self, result):
        config = ScanConfig(root=result.root, relative=True)
        data = json.loads(JsonFormatter().format(result, config))
        assert data == [
            {"size": 500000, "path": "big.iso"},
            {"size": 2000, "path": str(Path("sub") / "small.txt")},
        ]


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("text"), TextFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")
