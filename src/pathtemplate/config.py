"""Matcher configuration.

TemplateConfig is a frozen dataclass: immutable after creation, shared
freely between registries and threads.
"""

from dataclasses import dataclass

from pathtemplate.chars import VARIABLE_CHARS
from pathtemplate.errors import ConfigurationError

SEPARATOR = "/"
DEFAULT_MAX_INPUT_LENGTH = 2048


@dataclass(frozen=True, slots=True)
class TemplateConfig:
    """Configuration for validating, compiling and matching templates.

    All fields have sensible defaults. Override what you need::

        config = TemplateConfig(separator="|", max_input_length=256)
    """

    # Single character delimiting path segments
    separator: str = SEPARATOR

    # Longer inputs are rejected before any regex work
    max_input_length: int = DEFAULT_MAX_INPUT_LENGTH

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            msg = f"separator must be a single character, got {self.separator!r}"
            raise ConfigurationError(msg)
        if self.separator in VARIABLE_CHARS or self.separator in "{}":
            msg = (
                f"separator {self.separator!r} cannot be a placeholder character "
                f"or a brace"
            )
            raise ConfigurationError(msg)
        if self.max_input_length <= 0:
            msg = f"max_input_length must be positive, got {self.max_input_length}"
            raise ConfigurationError(msg)
