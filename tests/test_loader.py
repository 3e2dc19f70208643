"""
Tests for preset table loading.

Tests cover:
- Well formed tables (order, blank lines, header handling)
- Column count errors
- File access and decoding errors
- Delimiter and BOM handling
"""

import pytest

from cbct_preset_selector.core.errors import ErrorKind
from cbct_preset_selector.core.loader import load_table
from cbct_preset_selector.core.records import Record


class TestWellFormedTables:
    """Loading tables whose data lines all have three fields."""

    def test_length_matches_non_blank_data_lines(self, sample_csv):
        result = load_table(sample_csv)

        assert result.is_ok
        assert len(result.value) == 5

    def test_file_order_preserved(self, sample_csv):
        records = load_table(sample_csv).value.records()

        assert records[0] == Record("LinacB", "Pelvis", "Pelvis M20")
        assert records[1] == Record("LinacA", "Lung", "Thorax M20")
        assert records[-1] == Record("LinacA", "Abdomen", "Pelvis M15")

    def test_header_is_not_a_record(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("anything,goes,here\nLinacA,Lung,P1\n", encoding="utf-8")

        records = load_table(path).value.records()

        assert records == [Record("LinacA", "Lung", "P1")]

    def test_header_only_gives_empty_table(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("machine,pathology,preset\n", encoding="utf-8")

        result = load_table(path)

        assert result.is_ok
        assert len(result.value) == 0

    def test_empty_file_gives_empty_table(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("", encoding="utf-8")

        result = load_table(path)

        assert result.is_ok
        assert len(result.value) == 0

    def test_quoted_fields_keep_delimiters(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text(
            'machine,pathology,preset\nLinacA,"Head, Neck",P1\n',
            encoding="utf-8"
        )

        records = load_table(path).value.records()

        assert records == [Record("LinacA", "Head, Neck", "P1")]

    def test_byte_order_mark_is_ignored(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_bytes("machine,pathology,preset\nLinacA,Lung,P1\n".encode("utf-8-sig"))

        records = load_table(path).value.records()

        assert records[0].machine == "LinacA"

    def test_custom_delimiter(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("machine;pathology;preset\nLinacA;Lung;P1\n", encoding="utf-8")

        records = load_table(path, delimiter=";").value.records()

        assert records == [Record("LinacA", "Lung", "P1")]

    def test_duplicates_are_kept(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text(
            "machine,pathology,preset\nLinacA,Lung,P1\nLinacA,Lung,P1b\n",
            encoding="utf-8"
        )

        assert len(load_table(path).value) == 2


class TestColumnCountErrors:
    """Rows with a field count other than three abort the load."""

    @pytest.mark.parametrize("row, count", [
        ("LinacA,Lung", 2),
        ("LinacA,Lung,P1,extra", 4),
        ("LinacA", 1),
    ])
    def test_wrong_column_count(self, tmp_path, row, count):
        path = tmp_path / "data.csv"
        path.write_text(f"machine,pathology,preset\nLinacA,Brain,P2\n{row}\n", encoding="utf-8")

        result = load_table(path)

        assert not result.is_ok
        assert result.value is None
        assert result.error.kind is ErrorKind.IO
        assert f"instead were detected: {count}" in result.error.message

    def test_error_reports_line_number(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("machine,pathology,preset\nLinacA,Brain,P2\n\nbad,row\n", encoding="utf-8")

        result = load_table(path)

        assert "line 4" in result.error.message

    def test_error_string_has_kind_prefix(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("machine,pathology,preset\nbad\n", encoding="utf-8")

        assert str(load_table(path).error).startswith("IO error: ")


class TestFileErrors:
    """File access problems are IO errors, never exceptions."""

    def test_missing_file(self, tmp_path):
        result = load_table(tmp_path / "missing.csv")

        assert not result.is_ok
        assert result.error.kind is ErrorKind.IO
        assert "missing.csv" in result.error.message

    def test_directory_instead_of_file(self, tmp_path):
        result = load_table(tmp_path)

        assert result.error.kind is ErrorKind.IO

    def test_undecodable_content(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_bytes(b"machine,pathology,preset\nLinac\xff,Lung,P1\n")

        result = load_table(path)

        assert result.error.kind is ErrorKind.IO
