"""
Curse 清单数据模型

Curse 清单的结构不由本工具定义，这里用带标签的字段表描述它，
解析时只检查列出的字段，其余字段一律忽略。
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from cursetool.exceptions import DecodeError

_SLUG_RE = re.compile(r".*/(?P<slug>[^/]+)/?$")


@dataclass(frozen=True)
class CurseField:
    """清单中的单个字段定义"""

    key: str
    kind: type
    required: bool = False

    def extract(self, data: Dict[str, Any], context: Dict[str, Any]) -> Any:
        """从 JSON 对象中取出字段值并校验类型"""
        if self.key not in data or data[self.key] is None:
            if self.required:
                raise DecodeError(
                    f"缺少必需字段 '{self.key}'",
                    context={**context, "field": self.key},
                )
            return None

        value = data[self.key]
        # bool 是 int 的子类，需要单独排除
        if isinstance(value, bool) and self.kind is not bool:
            valid = False
        else:
            valid = isinstance(value, self.kind)
        if not valid:
            raise DecodeError(
                f"字段 '{self.key}' 类型错误: 期望 {self.kind.__name__}，"
                f"实际为 {type(value).__name__}",
                context={**context, "field": self.key},
            )
        return value


FILE_FIELDS: Tuple[CurseField, ...] = (
    CurseField("projectID", int, required=True),
    CurseField("fileID", int, required=True),
    CurseField("required", bool),
    CurseField("name", str),
    CurseField("slug", str),
    CurseField("websiteUrl", str),
    CurseField("downloadUrl", str),
    CurseField("fileMd5", str),
    CurseField("md5", str),
)

MINECRAFT_FIELDS: Tuple[CurseField, ...] = (CurseField("version", str),)


def slug_from_url(url: str) -> Optional[str]:
    """从 CurseForge 项目页面地址中提取 slug"""
    match = _SLUG_RE.match(url)
    if match is None:
        return None
    return match.group("slug")


@dataclass(frozen=True)
class CurseFile:
    """Curse 清单中的一个文件条目"""

    project_id: int
    file_id: int
    required: bool = True
    name: Optional[str] = None
    slug: Optional[str] = None
    website_url: Optional[str] = None
    download_url: Optional[str] = None
    md5: Optional[str] = None

    @classmethod
    def from_curse(cls, data: Any, index: int) -> "CurseFile":
        """
        将 Curse 清单中的文件对象转换为 CurseFile。
        """
        context = {"index": index}
        if not isinstance(data, dict):
            raise DecodeError(
                f"文件条目必须是对象，实际为 {type(data).__name__}",
                context=context,
            )
        values = {f.key: f.extract(data, context) for f in FILE_FIELDS}
        required = values["required"]
        return cls(
            project_id=values["projectID"],
            file_id=values["fileID"],
            required=True if required is None else required,
            name=values["name"],
            slug=values["slug"],
            website_url=values["websiteUrl"],
            download_url=values["downloadUrl"],
            md5=values["fileMd5"] or values["md5"],
        )

    @property
    def display_name(self) -> str:
        """名称优先级: name > slug > 页面地址中的 slug > 项目 ID"""
        if self.name:
            return self.name
        if self.slug:
            return self.slug
        if self.website_url:
            slug = slug_from_url(self.website_url)
            if slug:
                return slug
        return str(self.project_id)


@dataclass(frozen=True)
class CurseManifest:
    """
    Curse 清单。
    """

    files: List[CurseFile]
    minecraft_version: Optional[str] = None

    @classmethod
    def from_curse(cls, data: Any) -> "CurseManifest":
        if isinstance(data, list):
            raw_files = data
            minecraft_version = None
        elif isinstance(data, dict):
            raw_files = data.get("files")
            if raw_files is None:
                raise DecodeError("缺少必需字段 'files'", context={"field": "files"})
            if not isinstance(raw_files, list):
                raise DecodeError(
                    f"'files' 必须是数组，实际为 {type(raw_files).__name__}",
                    context={"field": "files"},
                )
            minecraft = data.get("minecraft")
            if minecraft is None:
                minecraft = {}
            elif not isinstance(minecraft, dict):
                raise DecodeError(
                    f"'minecraft' 必须是对象，实际为 {type(minecraft).__name__}",
                    context={"field": "minecraft"},
                )
            minecraft_version = MINECRAFT_FIELDS[0].extract(
                minecraft, {"section": "minecraft"}
            )
        else:
            raise DecodeError(
                f"Curse 清单顶层必须是对象或数组，实际为 {type(data).__name__}"
            )

        files = [CurseFile.from_curse(item, i) for i, item in enumerate(raw_files)]
        return cls(files=files, minecraft_version=minecraft_version)
