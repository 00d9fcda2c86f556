from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Union


class CaseStyle(str, Enum):
    UPPERCASE = "UPPERCASE"
    LOWERCASE = "LOWERCASE"
    CAPITALIZE = "CAPITALIZE"

    @classmethod
    def parse(cls, value: Union["CaseStyle", str]) -> "CaseStyle":
        """Accept an enum member or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown case style {value!r} (expected one of {choices})") from None

    def apply(self, word: str) -> str:
        if self is CaseStyle.UPPERCASE:
            return word.upper()
        if self is CaseStyle.LOWERCASE:
            return word.lower()
        return word[:1].upper() + word[1:].lower()


@dataclass(frozen=True)
class FormatterConfig:
    reserved_word_case: CaseStyle = CaseStyle.UPPERCASE
    object_case: CaseStyle = CaseStyle.LOWERCASE
    function_case: CaseStyle = CaseStyle.LOWERCASE
    indent_size: int = 4
    base_indent: int = 0
    indent_char: str = " "

    def __post_init__(self):
        for name in ("reserved_word_case", "object_case", "function_case"):
            object.__setattr__(self, name, CaseStyle.parse(getattr(self, name)))
        for name in ("indent_size", "base_indent"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if not isinstance(self.indent_char, str):
            raise ValueError(f"indent_char must be a string, got {self.indent_char!r}")

    def with_options(self, **changes) -> "FormatterConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass
class FormatResult:
    source: str
    modified: bool
    errors: List[str] = field(default_factory=list)
