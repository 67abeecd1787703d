"""
cursetool 生成层

包含 Nix 表达式生成器。
"""

from cursetool.generator.nix import (
    NixGenerator,
    generate_nix,
    nix_attr_name,
    nix_string,
)

__all__ = [
    "NixGenerator",
    "generate_nix",
    "nix_attr_name",
    "nix_string",
]
