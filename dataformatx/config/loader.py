"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DataFormatXConfig

CONFIG_FILENAME = "dataformatx.yaml"


def config_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".dataformatx" / "config.yaml",
    ]
    return [p for p in paths if p is not None]


def load_config(cli_path: str | None = None) -> DataFormatXConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    for path in config_paths(cli_path):
        if path.exists():
            config = read_config_file(path)
            if config is not None:
                return config

    return DataFormatXConfig()


def read_raw_config(path: str | Path, expand_env: bool = True) -> dict | None:
    """Parse one config file into a plain dict. Returns None if the file is empty.

    With ``expand_env=False`` the ``${VAR}`` references are left as written,
    which is what a caller editing and re-saving the file needs.
    """
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    return expand_env_vars(raw) if expand_env else raw


def read_config_file(path: str | Path) -> DataFormatXConfig | None:
    """Parse one config file. Returns None if the file is empty."""
    raw = read_raw_config(path)
    if raw is None:
        return None
    try:
        return DataFormatXConfig(**raw)
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def save_config(config: DataFormatXConfig | dict, path: str | Path) -> Path:
    """Write config as YAML, creating parent directories.

    A dict is written as given, so unexpanded ``${VAR}`` references survive.
    """
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    data = config if isinstance(config, dict) else config.model_dump(mode="json")
    with open(dest, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    return dest


def expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `dataformatx config init`
DEFAULT_CONFIG_TEMPLATE = """\
# dataformatx.yaml

# LLM Provider
llm:
  provider: "managed"              # managed (Gemini) | openai_compatible
  model: "gemini-2.5-flash"        # e.g. gpt-4o, llama3 for openai_compatible
  api_key_env: "GEMINI_API_KEY"    # env var holding the key
  # api_key: ""                    # or set the key directly
  # base_url: "http://localhost:1234"   # openai_compatible only; blank = api.openai.com
  timeout: 120

# Inputs longer than this are rejected before any request is made
max_input_chars: 100000

# Logging
log_level: "info"                  # debug | info | warn | error
"""
