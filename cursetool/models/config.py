"""
配置模型

定义 cursetool 的运行配置及其从字典构建的方法。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from cursetool.exceptions import ConfigError
from cursetool.models.manifest import ENTRY_FIELDS

# Nix 输出中可以要求存在的字段（id 是属性名，不在其中）
NIX_VALUE_FIELDS = ENTRY_FIELDS[1:]


@dataclass
class NixConfig:
    """Nix 输出配置"""

    required_fields: Tuple[str, ...] = ("download_url",)
    indent: int = 2

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NixConfig":
        required = data.get("required_fields", list(cls.required_fields))
        if not isinstance(required, list) or not all(
            isinstance(item, str) for item in required
        ):
            raise ConfigError("nix.required_fields 必须是字符串列表")
        unknown = [item for item in required if item not in NIX_VALUE_FIELDS]
        if unknown:
            raise ConfigError(
                f"nix.required_fields 包含未知字段: {', '.join(unknown)}",
                context={"allowed": list(NIX_VALUE_FIELDS)},
            )

        indent = data.get("indent", cls.indent)
        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
            raise ConfigError("nix.indent 必须是非负整数")

        return cls(required_fields=tuple(required), indent=indent)


@dataclass
class CursetoolConfig:
    """cursetool 主配置"""

    nix: NixConfig = field(default_factory=NixConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CursetoolConfig":
        if not isinstance(data, dict):
            raise ConfigError("配置文件顶层必须是表/对象")

        nix = data.get("nix", {})
        if not isinstance(nix, dict):
            raise ConfigError("配置节 [nix] 必须是表/对象")

        return cls(nix=NixConfig.from_dict(nix))
