"""
模式调度器

按模式选择转换流程：读取输入文件，经过一个解析器和一个生成器，
最后写出输出文件。
"""

import asyncio
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import aiofiles
from loguru import logger

from cursetool.exceptions import (
    CursetoolError,
    FileAccessError,
    InputNotFoundError,
    InvalidModeError,
)
from cursetool.generator import NixGenerator
from cursetool.models import CursetoolConfig, Manifest
from cursetool.services import CurseDecoder, YamlCodec

PathLike = Union[str, os.PathLike]


class Mode(Enum):
    """转换模式"""

    CURSE = "curse"  # Curse JSON -> YAML
    YAML = "yaml"  # YAML -> Nix

    @classmethod
    def parse(cls, value: Union[str, "Mode"]) -> "Mode":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(str(value)) from None


@dataclass
class ConversionResult:
    """一次转换的结果"""

    mode: Mode
    entries: int
    output_path: Path


class Dispatcher:
    """模式调度器"""

    def __init__(self, config: Optional[CursetoolConfig] = None):
        self.config = config or CursetoolConfig()
        self.nix_generator = NixGenerator(
            required_fields=self.config.nix.required_fields,
            indent=self.config.nix.indent,
        )

    async def run(
        self, mode: Union[str, Mode], input_path: PathLike, output_path: PathLike
    ) -> ConversionResult:
        """
        执行一次完整的转换

        Args:
            mode: 转换模式 (curse / yaml)
            input_path: 输入文件路径
            output_path: 输出文件路径

        Returns:
            ConversionResult: 转换结果

        Raises:
            InvalidModeError: 模式无效（此时不会进行任何文件操作）
            InputNotFoundError: 输入文件不存在
            FileAccessError: 其他读写错误
            DecodeError: 输入内容无法解析
            GenerationError: 清单无法生成为目标格式
        """
        mode = Mode.parse(mode)
        input_path = Path(input_path)
        output_path = Path(output_path)

        logger.info(f"读取输入文件: {input_path}")
        data = await self._read_input(input_path)

        try:
            if mode is Mode.CURSE:
                manifest = CurseDecoder.decode(data)
                output = YamlCodec.encode(manifest)
            else:
                manifest = YamlCodec.decode(data)
                output = self.nix_generator.generate(manifest).encode("utf-8")
        except CursetoolError as e:
            e.context.setdefault("path", str(input_path))
            raise

        self._log_manifest(manifest)

        logger.info(f"写入输出文件: {output_path}")
        await self._write_output(output_path, output)
        logger.success(f"转换完成: {len(manifest)} 个模组 -> {output_path}")

        return ConversionResult(mode=mode, entries=len(manifest), output_path=output_path)

    def _log_manifest(self, manifest: Manifest):
        if manifest.minecraft_version:
            logger.debug(f"Minecraft 版本: {manifest.minecraft_version}")
        for entry in manifest:
            logger.debug(f"  {entry.id}: {entry.name} @ {entry.version}")

    async def _read_input(self, path: Path) -> bytes:
        """读取整个输入文件"""
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise InputNotFoundError(
                f"输入文件不存在: {path}", context={"path": str(path)}
            ) from e
        except OSError as e:
            raise FileAccessError(
                f"无法读取输入文件 {path}: {e.strerror or e}",
                context={"path": str(path)},
            ) from e

    async def _write_output(self, path: Path, data: bytes):
        """先写入临时文件，成功后再替换目标文件"""
        temp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
        replaced = False
        try:
            async with aiofiles.open(temp_path, "wb") as f:
                await f.write(data)
            os.replace(temp_path, path)
            replaced = True
        except OSError as e:
            raise FileAccessError(
                f"无法写入输出文件 {path}: {e.strerror or e}",
                context={"path": str(path)},
            ) from e
        finally:
            if not replaced and temp_path.exists():
                temp_path.unlink()


def convert(
    mode: Union[str, Mode],
    input_path: PathLike,
    output_path: PathLike,
    config: Optional[CursetoolConfig] = None,
) -> ConversionResult:
    """同步执行一次转换"""
    return asyncio.run(Dispatcher(config).run(mode, input_path, output_path))
