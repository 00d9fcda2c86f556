from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..tokens import Token


@dataclass
class FormattingContext:
    """State shared by the rules of a single format call."""
    source: str
    literals: Dict[str, str] = field(default_factory=dict)
    line_comments: Set[str] = field(default_factory=set)
    tokens: List[Token] = field(default_factory=list)


@dataclass
class Transformation:
    start: int
    end: int
    new_content: str


def apply_transformations(source: str, transforms: List[Transformation]) -> str:
    """Applies non-overlapping character-based transformations in a single pass."""
    result = []
    last_offset = 0
    for t in sorted(transforms, key=lambda t: (t.start, t.end)):
        if t.start < last_offset:
            continue
        result.append(source[last_offset:t.start])
        result.append(t.new_content)
        last_offset = t.end
    result.append(source[last_offset:])
    return "".join(result)


class FormattingRule(ABC):
    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g. 'F001')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def apply(self, context: FormattingContext) -> None:
        """Apply the formatting rule to the context."""
        pass
