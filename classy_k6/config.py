"""Configuration loading for classy-k6 (.classy-k6.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_EXECUTOR,
    DEFAULT_INDENT,
    DEFAULT_SUFFIX,
    EXCLUDED_IMPORT_MARKERS,
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where and how generated scripts are written."""

    directory: Optional[Path] = None
    suffix: str = DEFAULT_SUFFIX
    indent: int = DEFAULT_INDENT
    templates_dir: Optional[Path] = None


@dataclass
class CodegenConfig:
    """Represents the settings defined in .classy-k6.yml."""

    root: Path
    exclude_imports: List[str] = field(default_factory=lambda: list(EXCLUDED_IMPORT_MARKERS))
    executor: str = DEFAULT_EXECUTOR
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> CodegenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CodegenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = CodegenConfig(root=root)

    imports_data = _as_dict(data.get("imports"))
    for marker in _as_str_list(imports_data.get("exclude")):
        if marker not in config.exclude_imports:
            config.exclude_imports.append(marker)

    scenarios_data = _as_dict(data.get("scenarios"))
    executor = scenarios_data.get("executor")
    if executor is not None:
        if not isinstance(executor, str) or not executor.strip():
            raise ConfigError("scenarios.executor must be a non-empty string")
        config.executor = executor.strip()

    output_data = _as_dict(data.get("output"))
    if output_data:
        directory = _as_str(output_data.get("directory"))
        templates_dir = _as_str(output_data.get("templates_dir"))
        suffix = output_data.get("suffix")
        if suffix is not None and (not isinstance(suffix, str) or not suffix.strip(".").strip()):
            raise ConfigError("output.suffix must be a non-empty string")
        indent = output_data.get("indent", DEFAULT_INDENT)
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 1:
            raise ConfigError("output.indent must be a positive integer")
        config.output = OutputConfig(
            directory=root / directory if directory else None,
            suffix=suffix.strip(".") if suffix else DEFAULT_SUFFIX,
            indent=indent,
            templates_dir=root / templates_dir if templates_dir else None,
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid UTF-8: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("Expected a mapping in configuration")
    return value


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError("Expected a list of strings in configuration")
    return [str(item).strip() for item in value if str(item).strip()]


__all__ = ["CodegenConfig", "ConfigError", "OutputConfig", "load_config"]
