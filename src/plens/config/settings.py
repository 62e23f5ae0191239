"""Application configuration for plens."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
import types
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints


_DEFAULT_CONFIG_LOCATIONS = (
    Path("plens.json"),
    Path.home() / ".config" / "plens" / "config.json",
)


@dataclass(slots=True)
class SourcesConfig:
    """Where the archive documents are read from.

    ``base_url`` takes precedence over ``data_dir`` when both are set.
    """

    data_dir: str = "data"
    base_url: Optional[str] = None
    timeout: float = 30.0
    max_retries: int = 3


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(slots=True)
class AppConfig:
    """High level application configuration."""

    sources: SourcesConfig
    logging: LoggingConfig


_SECTIONS: Dict[str, Type[Any]] = {
    "sources": SourcesConfig,
    "logging": LoggingConfig,
}


def _env_section(section: str) -> Dict[str, Any]:
    """Collect ``PLENS_<SECTION>_<FIELD>`` variables for ``section``."""

    prefix = f"PLENS_{section.upper()}_"
    return {
        key.removeprefix(prefix).lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix)
    }


def _overlay(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = target.copy()
    merged.update({k: v for k, v in updates.items() if v is not None})
    return merged


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf8") as fh:
        return json.load(fh)


T = TypeVar("T")


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to int")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, str)):
        return int(float(value))
    raise ValueError(f"Cannot convert {value!r} to int")


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"Cannot convert {value!r} to float")
    return float(value)


_CONVERTERS = {int: _to_int, float: _to_float, str: str}


def _coerce(value: Any, annotation: Any) -> Any:
    """Convert ``value`` to the type described by ``annotation``."""

    if value is None:
        return None

    if get_origin(annotation) in (Union, types.UnionType):
        candidates = [arg for arg in get_args(annotation) if arg is not type(None)]  # noqa: E721 - Optional
        last_error: Exception | None = None
        for candidate in candidates:
            try:
                return _coerce(value, candidate)
            except (TypeError, ValueError) as exc:
                last_error = exc
        raise ValueError(f"Cannot convert {value!r} to {annotation}") from last_error

    converter = _CONVERTERS.get(get_origin(annotation) or annotation)
    if converter is None:
        return value
    return converter(value)


def _build_section(cls: Type[T], data: Dict[str, Any]) -> T:
    kwargs: Dict[str, Any] = {}
    hints = get_type_hints(cls)
    for field in fields(cls):
        if field.name not in data:
            continue
        try:
            kwargs[field.name] = _coerce(data[field.name], hints.get(field.name, field.type))
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid value for {cls.__name__}.{field.name}: {data[field.name]!r}"
            ) from exc
    return cls(**kwargs)


def resolve_config_path(explicit_path: Optional[Path] = None) -> Path:
    """Return the effective configuration file path.

    An explicit path wins; otherwise the first existing default location is
    used, falling back to ``~/.config/plens/config.json``.
    """

    if explicit_path:
        return explicit_path

    for candidate in _DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return _DEFAULT_CONFIG_LOCATIONS[-1]


def load_config(explicit_path: Optional[Path] = None) -> AppConfig:
    """Combine defaults, an optional JSON file and ``PLENS_*`` environment variables.

    Variables follow ``PLENS_SECTION_FIELD``, e.g. ``PLENS_SOURCES_BASE_URL``.
    """

    file_data: Dict[str, Any] = {}
    if explicit_path:
        file_data = _read_config_file(explicit_path)
    else:
        for candidate in _DEFAULT_CONFIG_LOCATIONS:
            file_data = _read_config_file(candidate)
            if file_data:
                break

    sections: Dict[str, Any] = {}
    for name, cls in _SECTIONS.items():
        data = _overlay(asdict(cls()), file_data.get(name) or {})
        data = _overlay(data, _env_section(name))
        sections[name] = _build_section(cls, data)
    return AppConfig(**sections)


def save_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """Persist ``config`` as JSON and return the target path."""

    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    data = {name: asdict(getattr(config, name)) for name in _SECTIONS}
    with target.open("w", encoding="utf8") as fh:
        json.dump(data, fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return target


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "SourcesConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
