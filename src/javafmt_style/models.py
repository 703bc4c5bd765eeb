"""
Formatter options - named style presets and the immutable options object
handed to the formatting engine.

Like gofmt, the formatter exposes no individual settings: callers pick one
of the presets below and every layout parameter follows from it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from .exceptions import UnknownStyleError


class StyleParameters(NamedTuple):
    indentation_multiplier: int
    max_line_length: int
    wrap_line_comments: bool
    single_line_javadoc: bool
    indent_lambda_statement_as_block: bool
    leading_blank_block: bool
    null_annotations: bool
    max_preserve_blanks: int


class StylePreset(Enum):
    """Available code styles"""

    # The default Google Java Style configuration
    GOOGLE = StyleParameters(1, 100, True, True, False, True, False, 1)
    # The AOSP-compliant configuration
    AOSP = StyleParameters(2, 100, True, True, False, True, False, 1)
    ATACCAMA = StyleParameters(2, 140, False, False, True, False, True, 2)

    @property
    def parameters(self) -> StyleParameters:
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        return [preset.name.lower() for preset in cls]

    @classmethod
    def from_name(cls, name: str) -> "StylePreset":
        """Look up a preset by name, ignoring case"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownStyleError(name, cls.names()) from None


@dataclass(frozen=True)
class FormatterOptions:
    """Options for a formatter invocation. Build through builder()."""

    style: StylePreset

    def __post_init__(self):
        if not isinstance(self.style, StylePreset):
            raise TypeError(f"style must be a StylePreset, got {type(self.style).__name__}")

    @property
    def indentation_multiplier(self) -> int:
        """Multiplier for the unit of indent"""
        return self.style.parameters.indentation_multiplier

    @property
    def max_line_length(self) -> int:
        return self.style.parameters.max_line_length

    @property
    def wrap_line_comments(self) -> bool:
        return self.style.parameters.wrap_line_comments

    @property
    def single_line_javadoc(self) -> bool:
        return self.style.parameters.single_line_javadoc

    @property
    def indent_lambda_statement_as_block(self) -> bool:
        return self.style.parameters.indent_lambda_statement_as_block

    @property
    def leading_blank_block(self) -> bool:
        return self.style.parameters.leading_blank_block

    @property
    def null_annotations(self) -> bool:
        return self.style.parameters.null_annotations

    @property
    def max_preserve_blanks(self) -> int:
        return self.style.parameters.max_preserve_blanks

    def as_dict(self) -> dict[str, int | bool]:
        return self.style.parameters._asdict()


class Builder:
    """Staging object for FormatterOptions. Not safe to share across threads."""

    def __init__(self):
        self._style = StylePreset.GOOGLE

    def style(self, style: StylePreset | str) -> "Builder":
        if isinstance(style, str):
            style = StylePreset.from_name(style)
        elif not isinstance(style, StylePreset):
            raise TypeError(f"style must be a StylePreset or name, got {type(style).__name__}")
        self._style = style
        return self

    def build(self) -> FormatterOptions:
        return FormatterOptions(self._style)


def builder() -> Builder:
    return Builder()


def default_options() -> FormatterOptions:
    """Returns the default formatting options (Google style)"""
    return builder().build()
