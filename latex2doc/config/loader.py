"""Locate, read and validate latex2doc.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import Latex2DocConfig

PROJECT_CONFIG = "latex2doc.yaml"

# ${NAME} or ${NAME:-fallback}
_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def _candidate_paths(cli_path: str | None) -> list[Path]:
    """Config files in priority order: explicit, project-local, user-global."""
    if cli_path:
        explicit = Path(cli_path)
        if not explicit.exists():
            raise ValueError(f"Config file not found: {cli_path}")
        return [explicit]
    return [Path(PROJECT_CONFIG), Path.home() / ".latex2doc" / "config.yaml"]


def _read_config_file(path: Path) -> Latex2DocConfig | None:
    """Parse one file. Returns None for an empty file."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    try:
        return Latex2DocConfig.model_validate(_expand_env_vars(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def load_config(cli_path: str | None = None) -> Latex2DocConfig:
    """Return the first non-empty config found, or the defaults.

    An explicit ``cli_path`` that does not exist is an error; the project
    and user files are optional.
    """
    for path in _candidate_paths(cli_path):
        if not path.exists():
            continue
        config = _read_config_file(path)
        if config is not None:
            return config
    return Latex2DocConfig()


def _expand_env_vars(obj: object) -> object:
    """Substitute ${VAR} references in every string of a parsed YAML tree.

    Unset variables become their ``:-`` fallback, or an empty string.
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(value) for value in obj]
    if isinstance(obj, str):
        return _ENV_REF.sub(
            lambda m: os.environ.get(m.group(1), m.group(2) or ""), obj
        )
    return obj


# Default YAML template for `latex2doc config init`
DEFAULT_CONFIG_TEMPLATE = """\
# latex2doc.yaml

# Generative model used for the conversion
llm:
  provider: "google"
  model: "gemini-3-pro-preview"
  api_key_env: "API_KEY"
  max_tokens: 32768
  temperature: 0.2
  timeout: 300                 # seconds, null disables the deadline

# Source files
upload:
  extensions: [".tex"]
  max_file_size_mb: 5
  encoding: "utf-8"

# Default conversion options
options:
  strict_formatting: true
  math_priority: false
  no_image_placeholders: false

# Word export
export:
  output_dir: "."
  extension: ".doc"
  fallback_name: "converted-document"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
