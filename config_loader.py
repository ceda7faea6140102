"""Helpers for resolving configuration files and runtime paths."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from courseware import layout
from courseware.models import PackageLayout

DEFAULT_CONFIG_NAME = "courseware.json"
PATH_KEYS = ("base_dir", "output_dir", "manifest_path", "index_path")


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, honoring overrides and defaults.

    Only an explicitly requested file is required to exist.
    """
    env_override = os.environ.get("COURSEWARE_CONFIG")
    explicit = path or env_override
    candidate = explicit or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded) and os.path.isfile(expanded):
        return expanded

    search_roots = [os.getcwd(), str(layout.PROGRAM_DIR)]
    for root in search_roots:
        resolved = os.path.abspath(os.path.join(root, expanded))
        if os.path.isfile(resolved):
            return resolved

    if explicit:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load a JSON config file and normalize any filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {config_path}")
    for key in PATH_KEYS:
        if key in data and not isinstance(data[key], str):
            raise ConfigError(
                f"Expected a path string for {key!r} in {config_path}"
            )

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith(("_dir", "_path")):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def resolve_runtime_paths(
    *,
    input_dir: str,
    config_path: Optional[str] = None,
    base_dir: Optional[str] = None,
) -> PackageLayout:
    """Resolve runtime arguments by combining CLI overrides with config."""
    config = load_config(config_path)

    resolved_base = base_dir or config.get("base_dir")
    base = (
        Path(_resolve_path(resolved_base, os.getcwd()))
        if resolved_base
        else layout.base_dir()
    )
    defaults = layout.default_layout(
        _resolve_path(input_dir, os.getcwd()), base
    )

    output_dir = config.get("output_dir")
    manifest_path = config.get("manifest_path")
    index_path = config.get("index_path")

    return PackageLayout(
        base_dir=defaults.base_dir,
        input_dir=defaults.input_dir,
        output_dir=Path(output_dir) if output_dir else defaults.output_dir,
        manifest_path=(
            Path(manifest_path) if manifest_path else defaults.manifest_path
        ),
        index_path=Path(index_path) if index_path else defaults.index_path,
    )
