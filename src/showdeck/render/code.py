"""Syntax-highlighted code blocks: per-line styled spans and cached measurement."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

logger = logging.getLogger("ShowDeck.render.code")

DEFAULT_CODE_STYLE = "monokai"
FALLBACK_COLOR = "#F8F8F2"


class UnknownLanguage(ValueError):
    """No syntax definition matches the requested language tag."""


def find_lexer(language: str) -> Lexer:
    """Resolve a language tag by lexer alias ("python") or file extension ("rs")."""
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        pass
    try:
        return get_lexer_for_filename(f"source.{language}")
    except ClassNotFound as e:
        raise UnknownLanguage(f"No syntax definition for language '{language}'") from e


@dataclass
class StyledSpan:
    text: str
    color: str
    bold: bool = False
    italic: bool = False


@dataclass
class MeasuredSpan:
    span: StyledSpan
    x: float
    width: float


@dataclass
class MeasuredCode:
    text_size: float
    line_height: float
    width: float
    height: float
    lines: list[list[MeasuredSpan]] = field(default_factory=list)


def validate_code_style(style: str) -> str:
    """Reject pygments style names that do not exist."""
    try:
        get_style_by_name(style)
    except ClassNotFound as e:
        raise ValueError(f"Unknown code style '{style}'") from e
    return style


class CodeView:
    """Highlights source once, re-measures whenever the text size changes."""

    def __init__(self, language: str, source: str, style: str = DEFAULT_CODE_STYLE):
        self.language = language
        self.source = source
        self.style = style
        self._lexer = find_lexer(language)
        self._lines: Optional[list[list[StyledSpan]]] = None
        self._measured: Optional[MeasuredCode] = None
        self._measured_key: Optional[tuple[float, float, float]] = None

    def lines(self) -> list[list[StyledSpan]]:
        if self._lines is None:
            self._lines = self._highlight()
        return self._lines

    def _highlight(self) -> list[list[StyledSpan]]:
        if not self.source:
            return []
        style = get_style_by_name(self.style)
        default = style.style_for_token(Token)
        default_color = f"#{default['color']}".upper() if default["color"] else FALLBACK_COLOR

        lines: list[list[StyledSpan]] = [[]]
        for token_type, value in self._lexer.get_tokens(self.source):
            token_style = style.style_for_token(token_type)
            color = f"#{token_style['color']}".upper() if token_style["color"] else default_color
            for i, part in enumerate(value.split("\n")):
                if i > 0:
                    lines.append([])
                if part:
                    lines[-1].append(StyledSpan(
                        text=part,
                        color=color,
                        bold=bool(token_style["bold"]),
                        italic=bool(token_style["italic"]),
                    ))
        # get_tokens() always terminates the source with a newline
        if lines and not lines[-1]:
            lines.pop()
        logger.debug(f"Highlighted {len(lines)} lines of {self.language}")
        return lines

    def measure(self, text_size: float, char_width_ratio: float = 0.6,
                line_height_ratio: float = 34 / 28) -> MeasuredCode:
        """Measure every span at text_size.

        The last measurement is cached per (text_size, char_width_ratio,
        line_height_ratio).
        """
        key = (text_size, char_width_ratio, line_height_ratio)
        if self._measured is not None and self._measured_key == key:
            return self._measured

        char_width = text_size * char_width_ratio
        line_height = text_size * line_height_ratio
        measured_lines: list[list[MeasuredSpan]] = []
        max_x = 0.0
        for line in self.lines():
            x = 0.0
            spans = []
            for span in line:
                width = len(span.text) * char_width
                spans.append(MeasuredSpan(span=span, x=x, width=width))
                x += width
            measured_lines.append(spans)
            max_x = max(max_x, x)

        self._measured_key = key
        self._measured = MeasuredCode(
            text_size=text_size,
            line_height=line_height,
            width=max_x,
            height=line_height * len(measured_lines),
            lines=measured_lines,
        )
        return self._measured

    def plain_lines(self) -> list[str]:
        return ["".join(span.text for span in line) for line in self.lines()]
