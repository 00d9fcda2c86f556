import logging
from typing import Optional

from .engine import FormatterEngine
from .models import FormatterConfig
from .rules import (
    CaseTransformRule,
    LiteralPreservationRule,
    LiteralRestorationRule,
    StructureRule,
    TokenizeRule,
    WhitespaceCollapseRule,
)

logger = logging.getLogger(__name__)


def build_engine(config: FormatterConfig) -> FormatterEngine:
    """Engine wired with the full pipeline, in the order the stages depend on."""
    engine = FormatterEngine(config)
    engine.add_rule(LiteralPreservationRule())
    engine.add_rule(WhitespaceCollapseRule())
    engine.add_rule(CaseTransformRule(config))
    engine.add_rule(TokenizeRule())
    engine.add_rule(StructureRule(config))
    engine.add_rule(LiteralRestorationRule())
    return engine


class SQLFormatter:
    """Best-effort lexical SQL pretty-printer.

    Holds nothing but its frozen configuration, so one instance can be
    shared between threads.

        >>> SQLFormatter().format("select id from users;")
        'SELECT\\n    id\\nFROM users;'
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self._engine = build_engine(self.config)

    def format(self, sql: Optional[str]) -> Optional[str]:
        if sql is None:
            return None
        result = self._engine.format_string(sql)
        if result.errors:
            logger.warning("formatting failed, returning input unchanged: %s", result.errors[0].splitlines()[0])
            return sql
        return result.source


def format_sql(sql: Optional[str], config: Optional[FormatterConfig] = None) -> Optional[str]:
    """Format ``sql`` with a throwaway :class:`SQLFormatter`."""
    return SQLFormatter(config).format(sql)
