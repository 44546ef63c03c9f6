"""Configuration loading with Pydantic validation and env var substitution."""

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from sqlplusplus.pager import DEFAULT_PAGE_SIZE
from sqlplusplus.repl.history import DEFAULT_MAX_HISTORY

HISTORY_FILE_NAME = ".sqlplusplus_history"


def default_history_path() -> Optional[Path]:
    """$HOME/.sqlplusplus_history, or None when HOME is not set."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / HISTORY_FILE_NAME


class ClientConfig(BaseModel):
    """Connection and REPL settings."""
    model_config = {"extra": "ignore"}

    connection_string: Optional[str] = None  # SQLAlchemy URL
    username: Optional[str] = None
    password: Optional[str] = None
    history_file: Optional[Path] = None
    max_history_size: int = Field(default=DEFAULT_MAX_HISTORY, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """Load config from YAML file with env var substitution."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            raw_content = f.read()

        # Substitute environment variables: ${VAR_NAME}
        substituted = _substitute_env_vars(raw_content)

        data = yaml.safe_load(substituted) or {}
        return cls.model_validate(data)

    def merged(self, **overrides: Any) -> "ClientConfig":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return self.model_validate({**self.model_dump(), **values})

    def resolve_history_path(self) -> Optional[Path]:
        if self.history_file is not None:
            return Path(self.history_file).expanduser()
        return default_history_path()


def _substitute_env_vars(content: str) -> str:
    """Replace ${VAR_NAME} with environment variable values."""
    pattern = re.compile(r'\$\{([^}]+)\}')

    def replacer(match: re.Match) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable not set: {var_name}")
        return value

    return pattern.sub(replacer, content)
