"""
cursetool - 模组清单转换工具

在 Curse 清单 (JSON)、固定版本的 YAML 清单与 Nix 表达式之间转换。
"""

__version__ = "0.2.0"

from cursetool.dispatcher import ConversionResult, Dispatcher, Mode, convert
from cursetool.models import Manifest, ModEntry

__all__ = [
    "__version__",
    "ConversionResult",
    "Dispatcher",
    "Mode",
    "convert",
    "Manifest",
    "ModEntry",
]
