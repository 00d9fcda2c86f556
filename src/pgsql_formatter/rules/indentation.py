from ..models import FormatterConfig


def indent_for(level: int, config: FormatterConfig) -> str:
    """Indentation text for nesting ``level``: base indent plus one unit per level."""
    return config.indent_char * (config.base_indent + max(level, 0) * config.indent_size)
