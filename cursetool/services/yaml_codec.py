"""
YAML 清单编解码服务

YAML 清单是本工具自有的格式，带有格式版本号：

    format: 1
    minecraft: 1.12.2
    mods:
    - id: jei
      name: Just Enough Items
      version: '2995631'
      download_url: https://...
      checksum: ...

也接受只有条目列表的简写形式。
"""

import re
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger

from cursetool.exceptions import DecodeError
from cursetool.models import ENTRY_FIELDS, Manifest, ModEntry

FORMAT_VERSION = 1

# 字段名 -> (允许的类型, 是否必需)
_ENTRY_SCHEMA = {
    "id": ((str, int), True),
    "name": ((str,), False),
    "version": ((str, int), True),
    "download_url": ((str,), False),
    "checksum": ((str,), False),
}

_INT_TAG = "tag:yaml.org,2002:int"


class _ManifestLoader(yaml.SafeLoader):
    """只把十进制写法解析为整数的 SafeLoader，010、0x1F、1_000 等保留为字符串"""


_ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _INT_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_ManifestLoader.add_implicit_resolver(
    _INT_TAG, re.compile(r"^-?(?:0|[1-9][0-9]*)$"), list("-0123456789")
)


class YamlCodec:
    """YAML 清单编解码器"""

    @staticmethod
    def encode(manifest: Manifest) -> bytes:
        """
        将 Manifest 编码为 YAML

        条目顺序与清单一致，条目内的键顺序固定，输出是确定的。
        """
        document: Dict[str, Any] = {"format": FORMAT_VERSION}
        if manifest.minecraft_version is not None:
            document["minecraft"] = manifest.minecraft_version
        document["mods"] = [entry.to_dict() for entry in manifest]

        return yaml.safe_dump(
            document,
            encoding="utf-8",
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )

    @staticmethod
    def decode(data: Union[bytes, str]) -> Manifest:
        """
        将 YAML 内容解码为 Manifest

        Raises:
            DecodeError: YAML 格式错误、缺少 id/version 或字段类型错误
            DuplicateEntryError: 同一 ID 出现多次
        """
        try:
            document = yaml.load(data, Loader=_ManifestLoader)
        except yaml.YAMLError as e:
            raise DecodeError(f"YAML 格式错误: {e}") from e

        minecraft_version: Optional[str] = None
        if document is None:
            mods: Any = []
        elif isinstance(document, list):
            mods = document
        elif isinstance(document, dict):
            YamlCodec._check_format(document.get("format", FORMAT_VERSION))
            minecraft_version = document.get("minecraft")
            if minecraft_version is not None and not isinstance(
                minecraft_version, str
            ):
                raise DecodeError(
                    f"'minecraft' 必须是字符串，实际为 "
                    f"{type(minecraft_version).__name__}",
                    context={"field": "minecraft"},
                )
            if "mods" not in document:
                raise DecodeError("缺少必需字段 'mods'", context={"field": "mods"})
            mods = document["mods"]
            if mods is None:
                mods = []
        else:
            raise DecodeError(
                f"YAML 清单顶层必须是映射或列表，实际为 {type(document).__name__}"
            )

        if not isinstance(mods, list):
            raise DecodeError(
                f"'mods' 必须是列表，实际为 {type(mods).__name__}",
                context={"field": "mods"},
            )

        entries = [YamlCodec._decode_entry(item, i) for i, item in enumerate(mods)]
        logger.debug(f"YAML 清单中共有 {len(entries)} 个模组")
        return Manifest.from_entries(entries, minecraft_version=minecraft_version)

    @staticmethod
    def _check_format(version: Any):
        if isinstance(version, bool) or not isinstance(version, int):
            raise DecodeError(
                "'format' 必须是整数", context={"field": "format"}
            )
        if version > FORMAT_VERSION:
            raise DecodeError(
                f"不支持的清单格式版本 {version}（最高支持 {FORMAT_VERSION}）",
                context={"field": "format", "format": version},
            )

    @staticmethod
    def _decode_entry(item: Any, index: int) -> ModEntry:
        if not isinstance(item, dict):
            raise DecodeError(
                f"模组条目必须是映射，实际为 {type(item).__name__}",
                context={"index": index},
            )

        context: Dict[str, Any] = {"index": index}
        if isinstance(item.get("id"), (str, int)):
            context["id"] = str(item["id"])

        values = {}
        for key in ENTRY_FIELDS:
            kinds, required = _ENTRY_SCHEMA[key]
            value = item.get(key)
            if value is None:
                if required:
                    raise DecodeError(
                        f"缺少必需字段 '{key}'", context={**context, "field": key}
                    )
                continue
            if isinstance(value, bool) or not isinstance(value, kinds):
                raise DecodeError(
                    f"字段 '{key}' 类型错误: 实际为 {type(value).__name__}",
                    context={**context, "field": key},
                )
            values[key] = str(value)

        return ModEntry.from_dict(values)


def encode_yaml(manifest: Manifest) -> bytes:
    return YamlCodec.encode(manifest)


def decode_yaml(data: Union[bytes, str]) -> Manifest:
    return YamlCodec.decode(data)
