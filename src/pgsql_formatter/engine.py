import logging
import traceback
from typing import List

from .models import FormatterConfig, FormatResult
from .rules.base import FormattingContext, FormattingRule
from .tokens import WHITESPACE

logger = logging.getLogger(__name__)


class FormatterEngine:
    """Runs an ordered list of formatting rules over one shared context."""

    def __init__(self, config: FormatterConfig):
        self.config = config
        self.rules: List[FormattingRule] = []

    def add_rule(self, rule: FormattingRule) -> None:
        """Register a new formatting rule."""
        self.rules.append(rule)

    def format_string(self, source: str) -> FormatResult:
        """Runs every rule in registration order; failures are reported, not raised."""
        if not source or not source.strip(WHITESPACE):
            return FormatResult(source=source, modified=False)

        context = FormattingContext(source=source)
        errors = []

        try:
            for rule in self.rules:
                logger.debug("applying %s (%s)", rule.rule_id, rule.name)
                rule.apply(context)
        except Exception as e:
            errors.append(f"{str(e)}\n{traceback.format_exc()}")
            return FormatResult(source=source, modified=False, errors=errors)

        return FormatResult(source=context.source, modified=context.source != source, errors=errors)
