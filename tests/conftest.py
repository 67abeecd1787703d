import json

import pytest

from cursetool.logger import setup_logger
from cursetool.models import Manifest, ModEntry


def parse_nix_string(literal: str) -> str:
    """Read back a double-quoted Nix string literal."""
    assert literal[0] == '"' and literal[-1] == '"'
    body = literal[1:-1]
    out = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\":
            nxt = body[i + 1]
            out.append({"n": "\n", "r": "\r", "t": "\t"}.get(nxt, nxt))
            i += 2
            continue
        assert char != '"', "unescaped quote inside literal"
        assert body[i : i + 2] != "${", "unescaped interpolation inside literal"
        out.append(char)
        i += 1
    return "".join(out)


@pytest.fixture
def sample_manifest():
    return Manifest.from_entries(
        [
            ModEntry(
                id="jei",
                name="Just Enough Items",
                version="2995631",
                download_url="https://media.forgecdn.net/files/2995/631/jei.jar",
                checksum="d41d8cd98f00b204e9800998ecf8427e",
            ),
            ModEntry(
                id="appleskin",
                name="AppleSkin",
                version="1.0.14",
                download_url="https://media.forgecdn.net/files/2987/247/AppleSkin.jar",
            ),
            ModEntry(
                id="baubles",
                name="Baubles",
                version="2518667",
                download_url="https://media.forgecdn.net/files/2518/667/Baubles.jar",
            ),
        ],
        minecraft_version="1.12.2",
    )


@pytest.fixture
def curse_manifest_data():
    return {
        "minecraft": {
            "version": "1.12.2",
            "modLoaders": [{"id": "forge-14.23.5.2847", "primary": True}],
        },
        "manifestType": "minecraftModpack",
        "manifestVersion": 1,
        "name": "Test Pack",
        "version": "1.0.0",
        "author": "tester",
        "files": [
            {"projectID": 238222, "fileID": 2995631, "required": True},
            {
                "projectID": 224476,
                "fileID": 2544567,
                "required": False,
                "websiteUrl": "https://www.curseforge.com/minecraft/mc-mods/hunger-overhaul",
            },
            {
                "projectID": 227083,
                "fileID": 2518667,
                "required": True,
                "name": "Baubles",
                "downloadUrl": "https://edge.forgecdn.net/files/2518/667/Baubles.jar",
                "fileMd5": "0123456789abcdef0123456789abcdef",
            },
        ],
        "overrides": "overrides",
    }


@pytest.fixture
def curse_manifest_bytes(curse_manifest_data):
    return json.dumps(curse_manifest_data).encode("utf-8")


@pytest.fixture
def nix_unquote():
    return parse_nix_string


@pytest.fixture(autouse=True)
def _logging():
    setup_logger(level="DEBUG", colorize=False)
