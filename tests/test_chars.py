"""Tests for pathtemplate.chars — ASCII-only character classes."""

import re

from pathtemplate.chars import VARIABLE_CHARS, VARIABLE_CLASS, input_re, template_re


class TestVariableChars:
    def test_punctuation(self) -> None:
        assert set("_-.=:;") <= VARIABLE_CHARS

    def test_excludes_separator_and_braces(self) -> None:
        assert not set("/{}") & VARIABLE_CHARS

    def test_class_agrees_with_set(self) -> None:
        for code in range(128):
            char = chr(code)
            assert (re.fullmatch(VARIABLE_CLASS, char) is not None) == (char in VARIABLE_CHARS)

    def test_ascii_only(self) -> None:
        assert re.fullmatch(VARIABLE_CLASS, "é") is None
        assert re.fullmatch(VARIABLE_CLASS, "٣") is None


class TestInputAndTemplate:
    def test_input_includes_separator(self) -> None:
        assert input_re("/").fullmatch("/user/42.xml")
        assert input_re("/").fullmatch("/user/{id}") is None

    def test_template_includes_braces(self) -> None:
        assert template_re("/").fullmatch("/{prefix}/{id}")

    def test_escaped_separator(self) -> None:
        assert input_re("|").fullmatch("|a|b")
        assert input_re("|").fullmatch("/a") is None

    def test_cached(self) -> None:
        assert input_re("/") is input_re("/")
