import pytest

from bedrock_tracker.models.ledger import Ledger, VersionRecord

BASE = "https://www.minecraft.net/bedrockdedicatedserver"


def make_url(platform: str, version: str, preview: bool = False) -> str:
    folder = f"{platform}-preview" if preview else platform
    return f"{BASE}/bin-{folder}/bedrock-server-{version}.zip"


@pytest.fixture
def raw_links():
    return {
        "serverBedrockWindows": make_url("win", "1.21.50.3"),
        "serverBedrockLinux": make_url("linux", "1.21.50.3"),
        "serverBedrockPreviewWindows": make_url("win", "1.21.60.1", preview=True),
        "serverBedrockPreviewLinux": make_url("linux", "1.21.60.1", preview=True),
        "serverJar": "https://piston-data.mojang.com/v1/objects/abc/server.jar",
    }


@pytest.fixture
def populated_ledger():
    return Ledger(
        release={
            "1.21.44": VersionRecord.from_urls(
                make_url("win", "1.21.44.01"), make_url("linux", "1.21.44.01")
            ),
        },
        preview={
            "1.21.50": VersionRecord.from_urls(
                make_url("win", "1.21.50.20", preview=True),
                make_url("linux", "1.21.50.20", preview=True),
            ),
        },
    )
