import re

from ..keywords import WordClass, classify_word
from ..models import CaseStyle, FormatterConfig
from .base import FormattingContext, FormattingRule
from .literals import PLACEHOLDER_RE

WORD_RE = re.compile(r"\b[a-zA-Z_][a-zA-Z0-9_]*\b")


class CaseTransformRule(FormattingRule):
    """Re-cases reserved words, function names and identifiers."""

    def __init__(self, config: FormatterConfig):
        self.config = config

    @property
    def rule_id(self) -> str: return "F003"
    @property
    def name(self) -> str: return "case-transform"

    def style_for(self, word: str) -> CaseStyle:
        word_class = classify_word(word)
        if word_class is WordClass.RESERVED:
            return self.config.reserved_word_case
        if word_class is WordClass.FUNCTION:
            return self.config.function_case
        return self.config.object_case

    def _recase(self, text: str) -> str:
        return WORD_RE.sub(lambda m: self.style_for(m.group()).apply(m.group()), text)

    def apply(self, context: FormattingContext) -> None:
        # Placeholders are word-shaped, so cut them out before matching words.
        source = context.source
        parts = []
        last = 0
        for m in PLACEHOLDER_RE.finditer(source):
            parts.append(self._recase(source[last:m.start()]))
            parts.append(m.group())
            last = m.end()
        parts.append(self._recase(source[last:]))
        context.source = "".join(parts)
