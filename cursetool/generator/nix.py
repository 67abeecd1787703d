"""
Nix 表达式生成器

将 Manifest 生成为以模组 ID 为键的 Nix 属性集：

    {
      jei = { name = "Just Enough Items"; version = "2995631"; download_url = "..."; };
    }
"""

import re
from typing import Iterable, List

from cursetool.exceptions import GenerationError
from cursetool.models import ENTRY_FIELDS, Manifest, ModEntry

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_'-]*$")

_KEYWORDS = frozenset(
    ["assert", "else", "if", "in", "inherit", "let", "or", "rec", "then", "with"]
)

_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("${", "\\${"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)

# 属性集中的值字段（id 作为属性名）
VALUE_FIELDS = ENTRY_FIELDS[1:]


def nix_string(value: str) -> str:
    """生成 Nix 双引号字符串字面量"""
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return f'"{value}"'


def nix_attr_name(name: str) -> str:
    """生成属性名，不是合法标识符时使用字符串形式"""
    if _IDENTIFIER_RE.match(name) and name not in _KEYWORDS:
        return name
    return nix_string(name)


class NixGenerator:
    """Nix 表达式生成器"""

    def __init__(
        self,
        required_fields: Iterable[str] = ("download_url",),
        indent: int = 2,
    ):
        self.required_fields = tuple(required_fields)
        self.indent = indent

    def generate(self, manifest: Manifest) -> str:
        """
        生成 Nix 表达式

        Args:
            manifest: 模组清单

        Returns:
            Nix 属性集表达式文本

        Raises:
            GenerationError: 某个条目缺少必需字段
        """
        for entry in manifest:
            self._check_required(entry)

        if not len(manifest):
            return "{ }\n"

        prefix = " " * self.indent
        lines = ["{"]
        lines.extend(prefix + self._format_entry(entry) for entry in manifest)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def _check_required(self, entry: ModEntry):
        for key in self.required_fields:
            if getattr(entry, key) is None:
                raise GenerationError(
                    f"模组 '{entry.id}' 缺少 Nix 输出所需的字段 '{key}'",
                    context={"id": entry.id, "field": key},
                )

    def _format_entry(self, entry: ModEntry) -> str:
        attrs: List[str] = []
        for key in VALUE_FIELDS:
            value = getattr(entry, key)
            if value is not None:
                attrs.append(f"{key} = {nix_string(value)};")
        return f"{nix_attr_name(entry.id)} = {{ {' '.join(attrs)} }};"


def generate_nix(manifest: Manifest, required_fields=("download_url",), indent=2) -> str:
    return NixGenerator(required_fields=required_fields, indent=indent).generate(
        manifest
    )
