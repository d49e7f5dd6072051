"""
配置文件加载
支持 YAML 与 JSON（JSON 是 YAML 的子集），时长字段以秒数或 ISO 8601 表示
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .core.errors import ConfigLoadError
from .core.models import Config
from .utils.logging import get_logger

logger = get_logger(__name__)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


def parse_config(data: Dict[str, Any], source: Union[str, Path] = "<memory>") -> Config:
    """从字典构造原始配置"""
    if not isinstance(data, dict):
        raise ConfigLoadError(source, f"top level must be a mapping, got {type(data).__name__}")
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(source, _format_validation_error(e)) from e


def load_config(path: Union[str, Path]) -> Config:
    """读取并解析配置文件"""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(path, e.strerror or str(e)) from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigLoadError(path, f"invalid yaml: {e}") from e

    config = parse_config(data, path)
    logger.info("config_loaded", path=str(path), enabled=config.enabled, interfaces=config.interface_names)
    return config


__all__ = ["load_config", "parse_config"]
