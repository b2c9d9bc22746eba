"""Tests for pathtemplate.extension — trailing extension detection."""

import pytest

from pathtemplate.extension import SplitPath, extract_extension


class TestExtractExtension:
    def test_extension(self) -> None:
        assert extract_extension("/user/42.xml") == SplitPath(base="/user/42", extension="xml")

    def test_no_dot(self) -> None:
        assert extract_extension("/user/42") == SplitPath(base="/user/42", extension=None)

    def test_dot_at_index_zero(self) -> None:
        assert extract_extension(".42") == SplitPath(base=".42", extension=None)

    def test_dot_is_final_character(self) -> None:
        assert extract_extension("42.") == SplitPath(base="42.", extension=None)

    def test_dot_at_start_of_segment(self) -> None:
        # Only index 0 of the whole input is excluded
        assert extract_extension("/user/.42") == SplitPath(base="/user/", extension="42")

    def test_last_dot_wins(self) -> None:
        assert extract_extension("/a/b.tar.gz") == SplitPath(base="/a/b.tar", extension="gz")

    def test_dot_in_earlier_segment(self) -> None:
        assert extract_extension("/v1.2/x") == SplitPath(base="/v1", extension="2/x")

    def test_empty(self) -> None:
        assert extract_extension("") == SplitPath(base="", extension=None)


class TestSplitPath:
    def test_default_extension(self) -> None:
        assert SplitPath(base="/a").extension is None

    def test_frozen(self) -> None:
        split = SplitPath(base="/a")
        with pytest.raises(AttributeError):
            split.base = "/b"  # type: ignore[misc]
