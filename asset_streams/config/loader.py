"""Locates, reads and validates asset-streams.yaml."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import AssetStreamsConfig

CONFIG_FILENAME = "asset-streams.yaml"
CONFIG_ENV = "ASSET_STREAMS_CONFIG"

# ${VAR} or ${VAR:-fallback}
_ENV_REF_RE = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def config_candidates(cli_path: str | None = None) -> list[Path]:
    """Paths to try, in order: --config > $ASSET_STREAMS_CONFIG > ./ > ~/.asset-streams/.

    An explicitly named file must exist.
    """
    candidates = [Path(CONFIG_FILENAME), Path.home() / ".asset-streams" / "config.yaml"]
    explicit = cli_path or os.environ.get(CONFIG_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ValueError(f"Config file not found: {explicit}")
        candidates.insert(0, path)
    return candidates


def load_config(cli_path: str | None = None) -> AssetStreamsConfig:
    """Return the first non-empty config found, or defaults."""
    for path in config_candidates(cli_path):
        raw = _read_yaml(path)
        if not raw:
            continue
        try:
            return AssetStreamsConfig.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
    return AssetStreamsConfig()


def _read_yaml(path: Path) -> dict | None:
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: top level must be a mapping")
    return _expand_env_vars(raw)


def _expand_env_vars(obj):
    """Recursively expand ${VAR} and ${VAR:-fallback} in strings."""
    if isinstance(obj, str):
        return _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `asset-streams config init`
DEFAULT_CONFIG_TEMPLATE = """\
# asset-streams.yaml

optimize:
  html:
    minify: true
  css:
    minify: true
  js:
    compile: true
    # minify:
    #   exclude: ["vendor/**"]

  # Files under these paths are never optimized
  protected:
    - "**/webcomponentsjs/**"

# Logging
log_level: "info"              # debug | info | warn | error
"""
