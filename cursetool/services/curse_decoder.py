"""
Curse 清单解析服务

负责将 Curse 导出的 manifest.json 解析为 Manifest。
"""

import json
from typing import Union

from loguru import logger

from cursetool.exceptions import DecodeError
from cursetool.models import CurseManifest, Manifest, ModEntry


class CurseDecoder:
    """Curse manifest.json 解析器"""

    @staticmethod
    def decode(data: Union[bytes, str]) -> Manifest:
        """
        将 Curse 清单内容解析为 Manifest

        Args:
            data: manifest.json 的内容

        Returns:
            Manifest: 保持原有顺序的清单

        Raises:
            DecodeError: JSON 格式错误、缺少必需字段或字段类型错误
            DuplicateEntryError: 同一项目 ID 出现多次
        """
        try:
            raw = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"JSON 格式错误: {e}") from e

        curse_manifest = CurseManifest.from_curse(raw)
        logger.info(f"Curse 清单中共有 {len(curse_manifest.files)} 个模组")

        entries = []
        for curse_file in curse_manifest.files:
            if not curse_file.required:
                logger.debug(f"项目 {curse_file.project_id} 标记为可选，仍然保留")
            entries.append(
                ModEntry(
                    id=str(curse_file.project_id),
                    name=curse_file.display_name,
                    version=str(curse_file.file_id),
                    download_url=curse_file.download_url,
                    checksum=curse_file.md5,
                )
            )

        return Manifest.from_entries(
            entries, minecraft_version=curse_manifest.minecraft_version
        )


def decode_curse(data: Union[bytes, str]) -> Manifest:
    return CurseDecoder.decode(data)
