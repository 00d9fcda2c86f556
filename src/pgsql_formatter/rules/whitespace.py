import re

from ..tokens import WHITESPACE
from .base import FormattingContext, FormattingRule

_WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)


class WhitespaceCollapseRule(FormattingRule):
    """Collapses every whitespace run to one space and trims both ends.

    Runs before case transformation and after literal preservation, so the
    inside of literals and comments is never touched.
    """

    @property
    def rule_id(self) -> str: return "F002"
    @property
    def name(self) -> str: return "whitespace-collapse"

    def apply(self, context: FormattingContext) -> None:
        context.source = _WHITESPACE_RUN.sub(" ", context.source).strip(WHITESPACE)
