"""Load WhiskerConfig from whisker.yaml / whisker.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from whisker._errors import ConfigError
from whisker.config import WhiskerConfig

_CONFIG_KEYS = frozenset(f.name for f in fields(WhiskerConfig)) - {"root"}


def load_config(
    root: Path,
    *,
    defaults: dict[str, object] | None = None,
    **overrides: object,
) -> WhiskerConfig:
    """Load WhiskerConfig from root, optionally merging whisker.yaml.

    Looks for whisker.yaml, whisker.yml, or whisker.toml in root. If found,
    loads and merges with overrides. Precedence, lowest first: *defaults*,
    the file, then overrides. An override of ``None`` means "not given" and
    leaves the file value in place.

    Raises:
        ConfigError: If the config file cannot be parsed or names unknown keys.

    """
    file_config = _read_whisker_config(root)
    merged = {
        **(defaults or {}),
        **file_config,
        **{k: v for k, v in overrides.items() if v is not None},
    }

    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"Unknown config key(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    if "output" in merged and not isinstance(merged["output"], Path):
        merged["output"] = Path(str(merged["output"]))
    return WhiskerConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_whisker_config(root: Path) -> dict[str, object]:
    """Read whisker config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("whisker.yaml", "whisker.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "whisker.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_whisker_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_whisker_section(data)


def _flatten_whisker_section(data: dict[str, object]) -> dict[str, object]:
    """Extract whisker.* keys into top-level config."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k != "whisker":
            result[k] = v
    section = data.get("whisker")
    if isinstance(section, dict):
        result.update(section)
    return result
