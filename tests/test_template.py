"""Tests for template evaluation."""

from __future__ import annotations

import pytest

from labelkit.template import TemplateError, run_template


class TestRunTemplate:
    """Tests for run_template."""

    def test_plain_text(self) -> None:
        """Text without placeholders should be returned unchanged."""
        assert run_template("Brand", {"kind": "x"}) == "Brand"

    def test_empty_template(self) -> None:
        """None or empty template should give an empty string."""
        assert run_template(None, {"kind": "x"}) == ""
        assert run_template("", {"kind": "x"}) == ""

    def test_simple_variable(self) -> None:
        """$name should be replaced by the data value."""
        assert run_template("$kind", {"kind": "Brand"}) == "Brand"

    def test_braced_and_dotted(self) -> None:
        """${a.b} and $a.b should walk nested data."""
        data = {"kind": "Brand", "meta": {"name": "Acme"}}

        assert run_template("$kind: ${meta.name}", data) == "Brand: Acme"
        assert run_template("$meta.name!", data) == "Acme!"

    def test_list_index(self) -> None:
        """Numeric path parts should index into lists."""
        assert run_template("$tags.1", {"tags": ["a", "b"]}) == "b"

    def test_non_string_values(self) -> None:
        """Numbers should be rendered with str and None as empty."""
        assert run_template("$count items", {"count": 3}) == "3 items"
        assert run_template("[$note]", {"note": None}) == "[]"

    def test_trailing_dot_is_text(self) -> None:
        """A dot after the variable should stay in the output."""
        assert run_template("Made by $maker.", {"maker": "Acme"}) == "Made by Acme."

    def test_lone_dollar(self) -> None:
        """A dollar sign without a name should be kept."""
        assert run_template("Price in $", {}) == "Price in $"

    def test_digit_after_dollar_is_text(self) -> None:
        """Amounts like $5 should not be read as variables."""
        assert run_template("Under $5", {}) == "Under $5"
        assert run_template("$10 off $kind", {"kind": "shoes"}) == "$10 off shoes"
        assert run_template("${5}", {}) == "${5}"

    def test_missing_variable(self) -> None:
        """A missing variable should raise TemplateError."""
        with pytest.raises(TemplateError, match="kind"):
            run_template("$kind", {"text": "x"})

    def test_index_out_of_range(self) -> None:
        """An index past the end of a list should raise TemplateError."""
        with pytest.raises(TemplateError):
            run_template("$tags.5", {"tags": ["a"]})

    def test_path_through_scalar(self) -> None:
        """Walking into a string should raise TemplateError."""
        with pytest.raises(TemplateError):
            run_template("$kind.name", {"kind": "Brand"})

    def test_none_data(self) -> None:
        """None data should behave like an empty mapping."""
        assert run_template("Brand", None) == "Brand"
        with pytest.raises(TemplateError):
            run_template("$kind", None)

    def test_pure(self) -> None:
        """Evaluation should not modify the data."""
        data = {"meta": {"name": "Acme"}}

        run_template("${meta.name}", data)

        assert data == {"meta": {"name": "Acme"}}
