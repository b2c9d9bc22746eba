"""Tests for pathtemplate.merge — building paths from templates."""

import pytest

from pathtemplate.errors import IncompleteMerge, InvalidArgument
from pathtemplate.matcher import match_path
from pathtemplate.merge import merge_template
from pathtemplate.template import TemplateKey


class TestMergeTemplate:
    def test_show(self) -> None:
        assert merge_template("/{prefix}/{id}", {"prefix": "user", "id": "42"}) == "/user/42"

    def test_literal_segments_kept(self) -> None:
        assert merge_template("/{prefix}/{id}/edit", {"prefix": "user", "id": "42"}) == (
            "/user/42/edit"
        )

    def test_no_placeholders(self) -> None:
        assert merge_template("/static", {}) == "/static"

    def test_unused_values_ignored(self) -> None:
        assert merge_template("/{prefix}", {"prefix": "user", "id": "42"}) == "/user"

    def test_incomplete(self) -> None:
        with pytest.raises(IncompleteMerge) as exc_info:
            merge_template("/{prefix}/{id}", {"prefix": "x"})
        assert exc_info.value.expected == 2
        assert exc_info.value.replaced == 1
        assert exc_info.value.pattern == "/{prefix}/{id}"

    def test_incomplete_message(self) -> None:
        with pytest.raises(IncompleteMerge, match=r"only replaced 0"):
            merge_template("/{prefix}", {})

    @pytest.mark.parametrize("pattern", ["", None])
    def test_empty_pattern(self, pattern: str | None) -> None:
        with pytest.raises(InvalidArgument):
            merge_template(pattern, {"a": "b"})  # type: ignore[arg-type]

    def test_none_values(self) -> None:
        with pytest.raises(InvalidArgument):
            merge_template("/{prefix}", None)  # type: ignore[arg-type]


class TestRoundTrip:
    def test_merge_then_match(self) -> None:
        bindings = {"prefix": "user", "id": "42"}
        path = merge_template("/{prefix}/{id}", bindings)
        match = match_path(path)
        assert match is not None
        assert match.key is TemplateKey.SHOW
        assert match.bindings == bindings
        assert match.extension is None

    def test_merge_then_match_edit(self) -> None:
        bindings = {"prefix": "site", "id": "a-1"}
        match = match_path(merge_template("/{prefix}/{id}/edit", bindings))
        assert match is not None
        assert match.key is TemplateKey.EDIT
        assert match.bindings == bindings


class TestValuesAreNotRescanned:
    def test_value_holding_placeholder_text(self) -> None:
        assert merge_template("/{a}", {"a": "{b}", "b": "x"}) == "/{b}"

    def test_independent_of_value_order(self) -> None:
        assert merge_template("/{a}", {"b": "x", "a": "{b}"}) == "/{b}"

    def test_value_naming_another_placeholder(self) -> None:
        forward = merge_template("/{a}/{b}", {"a": "{b}", "b": "x"})
        backward = merge_template("/{a}/{b}", {"b": "x", "a": "{b}"})
        assert forward == backward == "/{b}/x"
