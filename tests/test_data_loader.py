"""Unit tests for the file loaders."""

from pathlib import Path

import pytest

from core.exceptions import UnboundVariableError
from data.data_loader import load_binding_table, load_expressions, load_variable_values


class TestLoadVariableValues:
    """Tests for load_variable_values."""

    def test_one_value_per_line(self, tmp_path: Path) -> None:
        path = tmp_path / "values.txt"
        path.write_text("8\n4\n2\n1\n3\n2\n")
        bindings = load_variable_values(str(path))
        assert dict(bindings) == {"a": 8, "b": 4, "c": 2, "d": 1, "e": 3, "f": 2}

    def test_reads_at_most_alphabet_length(self, tmp_path: Path) -> None:
        path = tmp_path / "values.txt"
        path.write_text("1\n2\n3\n")
        bindings = load_variable_values(str(path), alphabet="ab")
        assert dict(bindings) == {"a": 1, "b": 2}

    def test_short_file_leaves_identifiers_unbound(self, tmp_path: Path) -> None:
        path = tmp_path / "values.txt"
        path.write_text("5\n")
        bindings = load_variable_values(str(path))
        assert bindings["a"] == 5
        with pytest.raises(UnboundVariableError):
            bindings["b"]

    def test_first_integer_on_line(self, tmp_path: Path) -> None:
        path = tmp_path / "values.txt"
        path.write_text("  -12 apples\n+3\n")
        bindings = load_variable_values(str(path))
        assert bindings["a"] == -12
        assert bindings["b"] == 3

    def test_non_integer_line(self, tmp_path: Path) -> None:
        path = tmp_path / "values.txt"
        path.write_text("1\nabc\n")
        with pytest.raises(ValueError, match="Line 2"):
            load_variable_values(str(path))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_variable_values(str(tmp_path / "nope.txt"))


class TestLoadExpressions:
    """Tests for load_expressions."""

    def test_skips_blank_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "expressions.txt"
        path.write_text("a + b\n\n  (a - b) * c  \n")
        assert load_expressions(str(path)) == ["a + b", "(a - b) * c"]


class TestLoadBindingTable:
    """Tests for load_binding_table."""

    def test_loads_integer_columns(self, tmp_path: Path) -> None:
        path = tmp_path / "bindings.csv"
        path.write_text("a,b\n1,2\n3,4\n")
        table = load_binding_table(str(path))
        assert list(table.columns) == ["a", "b"]
        assert table["b"].tolist() == [2, 4]

    def test_rejects_unknown_columns(self, tmp_path: Path) -> None:
        path = tmp_path / "bindings.csv"
        path.write_text("a,price\n1,2\n")
        with pytest.raises(ValueError, match="price"):
            load_binding_table(str(path))

    def test_rejects_missing_values(self, tmp_path: Path) -> None:
        path = tmp_path / "bindings.csv"
        path.write_text("a,b\n1,\n")
        with pytest.raises(ValueError, match="missing"):
            load_binding_table(str(path))

    def test_rejects_fractional_values(self, tmp_path: Path) -> None:
        path = tmp_path / "bindings.csv"
        path.write_text("a,b\n1,1.5\n2,3\n")
        with pytest.raises(ValueError, match="non-integer"):
            load_binding_table(str(path))

    def test_accepts_integral_floats(self, tmp_path: Path) -> None:
        path = tmp_path / "bindings.csv"
        path.write_text("a\n2.0\n-3\n")
        assert load_binding_table(str(path))["a"].tolist() == [2, -3]

    def test_rejects_non_numeric_values(self, tmp_path: Path) -> None:
        path = tmp_path / "bindings.csv"
        path.write_text("a\nx\n")
        with pytest.raises(ValueError, match="non-numeric"):
            load_binding_table(str(path))
