import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from stanza_formatter.models import FormatterConfig

from .models import FormatterSettings

logger = logging.getLogger(__name__)


class FormatConfig:
    """Handles loading and validation of .stanza.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.settings = FormatterSettings()
        self.source: Path | None = None

        path = config_path if config_path and config_path.exists() else None
        if path is None:
            fallback = Path.cwd() / "pyproject.toml"
            path = fallback if fallback.exists() else None
        if path is not None:
            self._load_from_file(path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            return

        section = data.get("tool", {}).get("stanza")
        if section is None:
            return
        try:
            self.settings = FormatterSettings(**section)
            self.source = path
        except ValidationError as e:
            # Fallback to defaults if the section is invalid
            logger.warning("Invalid [tool.stanza] section in %s: %s", path, e)

    def override(self, **values: Any) -> None:
        """Apply command-line overrides; None means 'not given'."""
        given = {key: value for key, value in values.items() if value is not None}
        if given:
            self.settings = FormatterSettings(**{**self.settings.model_dump(), **given})

    def to_formatter_config(self) -> FormatterConfig:
        return FormatterConfig(**self.settings.model_dump())
