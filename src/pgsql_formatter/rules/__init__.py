from .base import FormattingContext, FormattingRule, Transformation, apply_transformations
from .case import CaseTransformRule
from .indentation import indent_for
from .literals import LiteralPreservationRule, LiteralRestorationRule
from .structure import StructureRule, TokenizeRule
from .whitespace import WhitespaceCollapseRule

__all__ = [
    "FormattingRule",
    "FormattingContext",
    "Transformation",
    "apply_transformations",
    "LiteralPreservationRule",
    "WhitespaceCollapseRule",
    "CaseTransformRule",
    "TokenizeRule",
    "StructureRule",
    "LiteralRestorationRule",
    "indent_for",
]
