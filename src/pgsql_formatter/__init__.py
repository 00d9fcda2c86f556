"""
pgsql-formatter - lexical pretty-printer for PostgreSQL statements

Literals, quoted identifiers and comments come out byte-identical; keywords,
function names and identifiers are re-cased; clauses are broken onto
indented lines by a single pass over the token stream.
"""

__version__ = "0.1.0"

from .engine import FormatterEngine
from .formatter import SQLFormatter, build_engine, format_sql
from .keywords import FUNCTIONS, RESERVED_WORDS, WordClass, classify_word
from .models import CaseStyle, FormatResult, FormatterConfig
from .settings import FormatterSettings, load_config
from .tokens import Token, tokenize

__all__ = [
    "SQLFormatter",
    "format_sql",
    "build_engine",
    "FormatterEngine",
    "FormatterConfig",
    "FormatResult",
    "CaseStyle",
    "FormatterSettings",
    "load_config",
    "RESERVED_WORDS",
    "FUNCTIONS",
    "WordClass",
    "classify_word",
    "Token",
    "tokenize",
]
