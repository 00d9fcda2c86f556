import logging
import re
from typing import List

from .base import FormattingContext, FormattingRule, Transformation, apply_transformations

logger = logging.getLogger(__name__)

STRING_PATTERN = r"'(?:[^'\\]|\\[\s\S]|'')*'"
IDENTIFIER_PATTERN = r'"(?:[^"\\]|\\[\s\S]|"")*"'
COMMENT_PATTERN = r"--[^\r\n]*|/\*[\s\S]*?\*/"

# Group names double as the placeholder kind.
LITERAL_RE = re.compile(
    rf"(?P<STRING>{STRING_PATTERN})"
    rf"|(?P<IDENTIFIER>{IDENTIFIER_PATTERN})"
    rf"|(?P<COMMENT>{COMMENT_PATTERN})"
)
PLACEHOLDER_RE = re.compile(r"___(?:STRING|IDENTIFIER|COMMENT)_\d+___")


def make_placeholder(kind: str, index: int) -> str:
    return f"___{kind}_{index}___"


class LiteralPreservationRule(FormattingRule):
    """Swaps string literals, quoted identifiers and comments for placeholders.

    Matches are spliced in by position, so two identical literals get two
    distinct placeholders.
    """

    @property
    def rule_id(self) -> str: return "F001"
    @property
    def name(self) -> str: return "literal-preservation"

    def apply(self, context: FormattingContext) -> None:
        transformations: List[Transformation] = []
        counter = len(context.literals)

        for match in LITERAL_RE.finditer(context.source):
            kind = match.lastgroup
            placeholder = make_placeholder(kind, counter)
            counter += 1

            context.literals[placeholder] = match.group()
            if kind == "COMMENT" and match.group().startswith("--"):
                context.line_comments.add(placeholder)
            transformations.append(Transformation(match.start(), match.end(), placeholder))

        logger.debug("preserved %d literals", len(transformations))
        context.source = apply_transformations(context.source, transformations)


class LiteralRestorationRule(FormattingRule):
    """Puts the original literal text back in place of each placeholder."""

    @property
    def rule_id(self) -> str: return "F006"
    @property
    def name(self) -> str: return "literal-restoration"

    def apply(self, context: FormattingContext) -> None:
        if not context.literals:
            return
        # Single pass: restored text is never rescanned for placeholders.
        context.source = PLACEHOLDER_RE.sub(
            lambda m: context.literals.get(m.group(), m.group()), context.source
        )
