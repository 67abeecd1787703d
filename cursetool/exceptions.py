"""
cursetool 统一异常体系

提供分层的异常结构，支持错误代码、退出码、上下文信息和字典序列化。
"""

from typing import Any, Dict, Optional


class CursetoolError(Exception):
    """cursetool 基础异常类"""

    exit_code = 1

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        """获取默认错误代码"""
        return "E000"

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class InvalidModeError(CursetoolError):
    """无法识别的转换模式"""

    exit_code = 2

    def __init__(self, mode: str):
        super().__init__(
            f"无效的模式: {mode!r}（可选: curse, yaml）",
            context={"mode": mode},
        )
        self.mode = mode

    def _get_default_code(self) -> str:
        return "E100"


class FileAccessError(CursetoolError):
    """文件读写错误"""

    exit_code = 3

    def _get_default_code(self) -> str:
        return "E200"


class InputNotFoundError(FileAccessError):
    """输入文件不存在"""

    def _get_default_code(self) -> str:
        return "E201"


class DecodeError(CursetoolError):
    """输入清单解析错误（JSON 或 YAML）"""

    exit_code = 4

    def _get_default_code(self) -> str:
        return "E300"


class DuplicateEntryError(DecodeError):
    """清单中存在重复的模组 ID"""

    def __init__(self, entry_id: str, context: Optional[Dict[str, Any]] = None):
        context = dict(context or {})
        context["id"] = entry_id
        super().__init__(f"重复的模组 ID: {entry_id}", context=context)
        self.entry_id = entry_id

    def _get_default_code(self) -> str:
        return "E301"


class GenerationError(CursetoolError):
    """清单无法表示为目标格式"""

    exit_code = 5

    def _get_default_code(self) -> str:
        return "E400"


class ConfigError(CursetoolError):
    """配置相关错误"""

    exit_code = 6

    def _get_default_code(self) -> str:
        return "E500"


__all__ = [
    # 基础异常
    "CursetoolError",
    # 模式异常
    "InvalidModeError",
    # 文件异常
    "FileAccessError",
    "InputNotFoundError",
    # 解析异常
    "DecodeError",
    "DuplicateEntryError",
    # 生成异常
    "GenerationError",
    # 配置异常
    "ConfigError",
]
