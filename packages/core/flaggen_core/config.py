"""Persistent generator settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
MIN_DIMENSION = 1
MAX_DIMENSION = 8192
OUTPUT_FORMATS = ("PNG", "BMP", "PPM", "TIFF", "JPEG")


@dataclass
class OutputConfig:
    width: int = 640
    height: int = 360
    path: str = "flag.png"
    format: str = "PNG"


@dataclass
class PreviewConfig:
    width: int = 640
    height: int = 360
    title: str = "flag generator!"
    save_on_regenerate: bool = True
    resize_debounce_ms: int = 150


@dataclass
class GeneratorConfig:
    seed: int | None = None


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    output: OutputConfig = field(default_factory=OutputConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "FlagGen"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "FlagGen"
    return Path.home() / ".config" / "flaggen"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback


def clamp_dimension(value: Any, fallback: int) -> int:
    return max(MIN_DIMENSION, min(MAX_DIMENSION, _as_int(value, fallback)))


def _normalize_output(cfg: AppConfig) -> None:
    cfg.output.width = clamp_dimension(cfg.output.width, OutputConfig.width)
    cfg.output.height = clamp_dimension(cfg.output.height, OutputConfig.height)
    cfg.output.format = str(cfg.output.format).upper()
    if cfg.output.format not in OUTPUT_FORMATS:
        cfg.output.format = "PNG"
    if not cfg.output.path:
        cfg.output.path = OutputConfig.path


def _normalize_preview(cfg: AppConfig) -> None:
    cfg.preview.width = clamp_dimension(cfg.preview.width, PreviewConfig.width)
    cfg.preview.height = clamp_dimension(cfg.preview.height, PreviewConfig.height)
    cfg.preview.save_on_regenerate = bool(cfg.preview.save_on_regenerate)
    cfg.preview.resize_debounce_ms = max(0, min(2000, _as_int(cfg.preview.resize_debounce_ms, PreviewConfig.resize_debounce_ms)))


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(1, _as_int(cfg.diagnostics.keep_log_files, DiagnosticsConfig.keep_log_files))


def _normalize_generator(cfg: AppConfig) -> None:
    if cfg.generator.seed is not None:
        try:
            cfg.generator.seed = int(cfg.generator.seed)
        except (TypeError, ValueError):
            cfg.generator.seed = None


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_as_int(data.get("config_version", CONFIG_VERSION), CONFIG_VERSION),
        output=_merge(OutputConfig, data.get("output", {})),
        preview=_merge(PreviewConfig, data.get("preview", {})),
        generator=_merge(GeneratorConfig, data.get("generator", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_output(cfg)
    _normalize_preview(cfg)
    _normalize_generator(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
