import json
from pathlib import Path
from typing import Optional

import toml
import yaml

from cursetool.exceptions import ConfigError
from cursetool.models import CursetoolConfig


def load_config(config_path: str) -> dict:
    """加载配置文件"""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"配置文件不存在: {config_path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            return toml.load(config_path)
        elif suffix == ".json":
            return json.loads(path.read_text(encoding="utf-8"))
        elif suffix in (".yaml", ".yml"):
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(
            f"配置文件解析失败: {e}", context={"path": config_path}
        ) from e
    except OSError as e:
        raise ConfigError(
            f"无法读取配置文件: {e}", context={"path": config_path}
        ) from e

    raise ConfigError(f"不支持的配置文件格式: {suffix}")


def get_config(config_path: Optional[str] = None) -> CursetoolConfig:
    if config_path is None:
        return CursetoolConfig()
    return CursetoolConfig.from_dict(load_config(config_path))
