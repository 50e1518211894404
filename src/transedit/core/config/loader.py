"""Project configuration loading.

Configuration layers (lowest priority first):

1. Bundled defaults: ``transedit/data/config/defaults.yaml``
2. Project file: ``transedit.yaml`` / ``transedit.yml`` in the project root,
   or an explicit ``--config`` path
3. Environment: ``TRANSEDIT_<KEY>`` (values parsed as YAML scalars)

The merged mapping is validated with jsonschema against
``transedit/data/schemas/config.schema.yaml``.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml
from jsonschema import Draft202012Validator

from transedit.core.config.model import EditConfig
from transedit.core.exceptions import ConfigError, UsageError
from transedit.core.formats.types import FileType
from transedit.core.locale import Locale
from transedit.core.utils.io import parse_yaml_string, read_yaml
from transedit.core.utils.merge import deep_merge
from transedit.data import read_yaml as read_data_yaml

logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAMES = ("transedit.yaml", "transedit.yml")
ENV_PREFIX = "TRANSEDIT_"


def find_project_config(repo_root: Path) -> Optional[Path]:
    for name in PROJECT_CONFIG_NAMES:
        candidate = Path(repo_root) / name
        if candidate.exists():
            return candidate
    return None


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Collect ``TRANSEDIT_<KEY>`` values for keys the config schema defines."""
    known = set(read_data_yaml("schemas", "config.schema.yaml").get("properties", {}))
    overrides: Dict[str, Any] = {}
    for key, raw in environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        name = key[len(ENV_PREFIX):].lower()
        if name not in known:
            logger.debug("Ignoring %s: not a config key", key)
            continue
        try:
            overrides[name] = parse_yaml_string(raw, default=raw)
        except yaml.YAMLError:
            overrides[name] = raw
    return overrides


def validate_config_data(data: Mapping[str, Any]) -> None:
    """Validate merged config data against the bundled schema.

    Raises:
        ConfigError: Listing every schema violation.
    """
    schema = read_data_yaml("schemas", "config.schema.yaml")
    errors: List[str] = []
    for err in Draft202012Validator(schema).iter_errors(dict(data)):
        where = ".".join(str(p) for p in err.path) or "<root>"
        errors.append(f"{where}: {err.message}")
    if errors:
        raise ConfigError(
            "Invalid configuration:\n" + "\n".join(f"- {e}" for e in sorted(errors)),
            context={"errors": errors},
        )


def load_config_data(
    repo_root: Path,
    config_path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return the merged, validated configuration mapping."""
    data: Dict[str, Any] = dict(read_data_yaml("config", "defaults.yaml"))

    path = Path(config_path) if config_path else find_project_config(repo_root)
    if config_path and not Path(config_path).exists():
        raise ConfigError(f"Config file not found: {config_path}", context={"path": str(config_path)})
    if path is not None:
        try:
            project = read_yaml(path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(project, dict):
            raise ConfigError(f"Config file must be a mapping: {path}", context={"path": str(path)})
        data = deep_merge(data, project)
        logger.debug("Loaded project config from %s", path)

    data = deep_merge(data, _env_overrides(os.environ if environ is None else environ))
    validate_config_data(data)
    return data


def build_config(data: Mapping[str, Any]) -> EditConfig:
    pattern = str(data["input_file_pattern"])
    try:
        file_type = FileType.from_name(data.get("file_type") or pattern.rsplit(".", 1)[-1])
        base_locale = Locale.from_string(str(data["base_locale"]))
    except UsageError as exc:
        raise ConfigError(str(exc), context=exc.context) from exc
    return EditConfig(
        file_type=file_type,
        base_locale=base_locale,
        namespaces=bool(data["namespaces"]),
        input_directory=Path(str(data["input_directory"])),
        input_file_pattern=pattern,
    )


def load_config(
    repo_root: Path,
    config_path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> EditConfig:
    """Load the project configuration as an :class:`EditConfig`."""
    return build_config(load_config_data(repo_root, config_path, environ=environ))


__all__ = [
    "PROJECT_CONFIG_NAMES",
    "ENV_PREFIX",
    "find_project_config",
    "validate_config_data",
    "load_config_data",
    "build_config",
    "load_config",
]
