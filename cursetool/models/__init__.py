"""
cursetool 数据模型包

包含清单模型、Curse 清单模型和配置模型定义。
"""

from cursetool.models.manifest import ENTRY_FIELDS, ModEntry, Manifest
from cursetool.models.curse import (
    CurseField,
    CurseFile,
    CurseManifest,
    slug_from_url,
)
from cursetool.models.config import NixConfig, CursetoolConfig

__all__ = [
    # 清单模型
    "ENTRY_FIELDS",
    "ModEntry",
    "Manifest",
    # Curse 模型
    "CurseField",
    "CurseFile",
    "CurseManifest",
    "slug_from_url",
    # 配置模型
    "NixConfig",
    "CursetoolConfig",
]
