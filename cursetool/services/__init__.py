"""
cursetool 服务层

包含输入清单的解析与 YAML 清单的编解码。
"""

from cursetool.services.curse_decoder import CurseDecoder, decode_curse
from cursetool.services.yaml_codec import (
    FORMAT_VERSION,
    YamlCodec,
    decode_yaml,
    encode_yaml,
)

__all__ = [
    "CurseDecoder",
    "decode_curse",
    "FORMAT_VERSION",
    "YamlCodec",
    "decode_yaml",
    "encode_yaml",
]
