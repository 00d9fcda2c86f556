import logging
import re
from dataclasses import dataclass
from typing import List

from ..keywords import JOIN_KEYWORDS, MAJOR_KEYWORDS, SELECT_MODIFIERS
from ..models import FormatterConfig
from ..tokens import WHITESPACE, Token, tokenize
from .base import FormattingContext, FormattingRule
from .indentation import indent_for

logger = logging.getLogger(__name__)

_TRAILING_COMMENT_RE = re.compile(r"___COMMENT_\d+___$")


class TokenizeRule(FormattingRule):
    """Splits the cased source into the token stream consumed by the layout pass."""

    @property
    def rule_id(self) -> str: return "F004"
    @property
    def name(self) -> str: return "tokenize"

    def apply(self, context: FormattingContext) -> None:
        context.tokens = tokenize(context.source)
        logger.debug("tokenized into %d tokens", len(context.tokens))


@dataclass
class LayoutState:
    indent_level: int = 0
    in_select: bool = False
    in_from: bool = False
    just_after_select: bool = False
    line_comment_open: bool = False


class LineBuffer:
    """Accumulates output lines; a line holding only indentation counts as empty."""

    def __init__(self):
        self.lines: List[str] = []
        self.current = ""
        self.has_content = False

    @property
    def at_line_start(self) -> bool:
        return not self.has_content

    def start_line(self, indent: str) -> None:
        if self.has_content:
            self.lines.append(self.current.rstrip(WHITESPACE))
        self.current = indent
        self.has_content = False

    def write(self, text: str) -> None:
        self.current += text
        self.has_content = True

    def ends_with(self, suffix: str) -> bool:
        return self.has_content and self.current.endswith(suffix)

    def getvalue(self) -> str:
        lines = self.lines + [self.current] if self.has_content else self.lines
        return "\n".join(lines).rstrip(WHITESPACE)


class StructureRule(FormattingRule):
    """Single left-to-right layout pass over the token stream.

    Clause boundaries are tracked lexically with a handful of flags; there
    is no parse tree.
    """

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "F005"
    @property
    def name(self) -> str: return "structure"

    def apply(self, context: FormattingContext) -> None:
        if not context.tokens and context.source:
            context.tokens = tokenize(context.source)

        state = LayoutState()
        out = LineBuffer()
        for token in context.tokens:
            if state.line_comment_open:
                out.start_line(self._indent(state.indent_level + 1))
                state.line_comment_open = False
            self._emit(token, state, out)
            state.line_comment_open = self._ends_with_line_comment(token, context)

        context.source = out.getvalue()

    def _indent(self, level: int) -> str:
        return indent_for(level, self.config)

    def _ends_with_line_comment(self, token: Token, context: FormattingContext) -> bool:
        match = _TRAILING_COMMENT_RE.search(token.text)
        return bool(match) and match.group() in context.line_comments

    def _emit(self, token: Token, state: LayoutState, out: LineBuffer) -> None:
        text = token.text
        upper = token.upper

        if upper in MAJOR_KEYWORDS:
            out.start_line(self._indent(state.indent_level))
            out.write(text)
            state.in_select = upper == "SELECT"
            state.just_after_select = state.in_select
            state.in_from = upper == "FROM"

        elif text == "," and state.in_select:
            out.write(",")
            out.start_line(self._indent(state.indent_level + 1))
            state.just_after_select = False

        elif upper in JOIN_KEYWORDS or (upper == "ON" and state.in_from):
            out.start_line(self._indent(state.indent_level + 1))
            out.write(text)

        elif text == "(":
            if not out.at_line_start and not out.ends_with("("):
                out.write(" ")
            out.write("(")
            state.indent_level += 1

        elif text == ")":
            state.indent_level = max(0, state.indent_level - 1)
            out.write(")")

        else:
            # First select-list item goes on its own line under SELECT.
            if state.just_after_select and upper not in SELECT_MODIFIERS:
                out.start_line(self._indent(state.indent_level + 1))
                state.just_after_select = False
            if not (out.at_line_start or token.is_punctuation
                    or out.ends_with("(") or out.ends_with(" ")):
                out.write(" ")
            out.write(text)
