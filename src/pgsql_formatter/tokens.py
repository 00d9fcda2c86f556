from dataclasses import dataclass
from typing import List

PUNCTUATION = frozenset("(),;")
QUOTE_CHARS = frozenset("'\"")
# ASCII only: NBSP and other Unicode spaces stay inside words.
WHITESPACE = " \t\n\r\f\v"


@dataclass(frozen=True)
class Token:
    """A lexical unit of the layout pass: quoted span, punctuation or bare word."""
    text: str

    @property
    def upper(self) -> str:
        return self.text.upper()

    @property
    def is_punctuation(self) -> bool:
        return self.text in PUNCTUATION


def _quoted_span_end(sql: str, start: int) -> int:
    """Index just past the quote closing the span opened at ``start``.

    Backslash escapes and doubled quotes stay inside the span. An
    unterminated span runs to the end of the input.
    """
    quote = sql[start]
    i = start + 1
    while i < len(sql):
        ch = sql[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            if i + 1 < len(sql) and sql[i + 1] == quote:
                i += 2
                continue
            return i + 1
        i += 1
    return len(sql)


def tokenize(sql: str) -> List[Token]:
    tokens: List[Token] = []
    current: List[str] = []

    def flush():
        if current:
            tokens.append(Token("".join(current)))
            current.clear()

    i = 0
    while i < len(sql):
        ch = sql[i]
        if ch in QUOTE_CHARS:
            flush()
            end = _quoted_span_end(sql, i)
            tokens.append(Token(sql[i:end]))
            i = end
            continue
        if ch in WHITESPACE:
            flush()
        elif ch in PUNCTUATION:
            flush()
            tokens.append(Token(ch))
        else:
            current.append(ch)
        i += 1

    flush()
    return tokens
