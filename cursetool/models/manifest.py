"""
清单数据模型

定义固定版本的模组条目 (ModEntry) 与有序清单 (Manifest)。
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from cursetool.exceptions import DuplicateEntryError

# 条目字段的固定顺序，YAML 与 Nix 输出都遵循它
ENTRY_FIELDS = ("id", "name", "version", "download_url", "checksum")


@dataclass(frozen=True)
class ModEntry:
    """单个模组的固定版本信息"""

    id: str
    name: str
    version: str
    download_url: Optional[str] = None
    checksum: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """按固定字段顺序转换为字典，省略为空的可选字段"""
        data = {}
        for key in ENTRY_FIELDS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModEntry":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            version=data["version"],
            download_url=data.get("download_url"),
            checksum=data.get("checksum"),
        )


@dataclass(frozen=True)
class Manifest:
    """
    有序的模组清单。

    条目顺序即插入顺序；ID 在清单内唯一。构造后不可修改，
    所有变换都返回新的 Manifest。
    """

    entries: Tuple[ModEntry, ...] = ()
    minecraft_version: Optional[str] = None
    _index: Dict[str, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)
        for position, entry in enumerate(entries):
            if entry.id in self._index:
                raise DuplicateEntryError(entry.id, context={"index": position})
            self._index[entry.id] = position

    @classmethod
    def from_entries(
        cls, entries: Iterable[ModEntry], minecraft_version: Optional[str] = None
    ) -> "Manifest":
        return cls(entries=tuple(entries), minecraft_version=minecraft_version)

    def with_entries(self, entries: Iterable[ModEntry]) -> "Manifest":
        """返回替换了条目的新清单"""
        return replace(self, entries=tuple(entries))

    def get(self, entry_id: str) -> Optional[ModEntry]:
        position = self._index.get(entry_id)
        if position is None:
            return None
        return self.entries[position]

    def ids(self) -> Tuple[str, ...]:
        return tuple(entry.id for entry in self.entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._index

    def __iter__(self) -> Iterator[ModEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
