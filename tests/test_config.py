"""Tests for pathtemplate.config — TemplateConfig frozen dataclass."""

import pytest

from pathtemplate.config import DEFAULT_MAX_INPUT_LENGTH, SEPARATOR, TemplateConfig
from pathtemplate.errors import ConfigurationError


class TestTemplateConfig:
    def test_defaults(self) -> None:
        cfg = TemplateConfig()

        assert cfg.separator == SEPARATOR == "/"
        assert cfg.max_input_length == DEFAULT_MAX_INPUT_LENGTH

    def test_override(self) -> None:
        cfg = TemplateConfig(separator="|", max_input_length=64)

        assert cfg.separator == "|"
        assert cfg.max_input_length == 64

    def test_frozen(self) -> None:
        cfg = TemplateConfig()

        with pytest.raises(AttributeError):
            cfg.separator = "|"  # type: ignore[misc]

    @pytest.mark.parametrize("separator", ["", "//", "a", "7", "-", ".", ":", "{", "}"])
    def test_rejects_separator(self, separator: str) -> None:
        with pytest.raises(ConfigurationError):
            TemplateConfig(separator=separator)

    @pytest.mark.parametrize("length", [0, -1])
    def test_rejects_max_length(self, length: int) -> None:
        with pytest.raises(ConfigurationError, match="max_input_length"):
            TemplateConfig(max_input_length=length)
