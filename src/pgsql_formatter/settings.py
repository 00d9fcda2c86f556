import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import CaseStyle, FormatterConfig

logger = logging.getLogger(__name__)

PYPROJECT_TABLE = "pgsql-formatter"
DEFAULT_CONFIG_FILES = (".pgsql-format.toml", "pyproject.toml")


class FormatterSettings(BaseModel):
    """File-level formatter options, validated before they become a FormatterConfig."""

    model_config = ConfigDict(extra="forbid")

    reserved_word_case: CaseStyle = CaseStyle.UPPERCASE
    object_case: CaseStyle = CaseStyle.LOWERCASE
    function_case: CaseStyle = CaseStyle.LOWERCASE
    indent_size: int = Field(default=4, ge=0)
    base_indent: int = Field(default=0, ge=0)
    indent_char: str = " "

    @field_validator("reserved_word_case", "object_case", "function_case", mode="before")
    @classmethod
    def _parse_case(cls, value: Any) -> CaseStyle:
        return CaseStyle.parse(value)

    def to_config(self) -> FormatterConfig:
        return FormatterConfig(**self.model_dump())


def _settings_table(path: Path, data: Dict[str, Any]) -> Dict[str, Any]:
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get(PYPROJECT_TABLE, {})
    return data


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """First config file in ``start`` (default: cwd) that exists."""
    directory = start or Path.cwd()
    for name in DEFAULT_CONFIG_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Optional[Path] = None) -> FormatterConfig:
    """Load a FormatterConfig from TOML, falling back to defaults.

    ``path`` may be a ``pyproject.toml`` (options under
    ``[tool.pgsql-formatter]``) or a dedicated ``.pgsql-format.toml``
    (options at top level). Without a path the current directory is searched.
    """
    if path is None:
        path = find_config_file()
    if path is None or not path.exists():
        return FormatterConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        settings = FormatterSettings.model_validate(_settings_table(path, data))
    except (OSError, tomllib.TOMLDecodeError, ValidationError, ValueError) as e:
        logger.warning("ignoring formatter config %s: %s", path, e)
        return FormatterConfig()

    return settings.to_config()
