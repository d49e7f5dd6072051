from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import JSON_LOGS_DEFAULT, VERBOSE_DEFAULT


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix="DHCP_TOPO_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 日志
    verbose: bool = Field(default=VERBOSE_DEFAULT, description="详细日志输出")
    json_logs: bool = Field(default=JSON_LOGS_DEFAULT, description="以JSON格式输出日志")

    # 未在命令行给出时使用的配置文件
    config_file: Optional[Path] = Field(default=None, description="DHCP配置文件路径 (YAML/JSON)")


__all__ = ["AppSettings"]
