import json
from pathlib import Path
from typing import Any
from typing import Final

TEST_DIR: Final[Path] = Path(__file__).parent
ASSETS_DIR: Final[Path] = TEST_DIR / "assets"


def load_spotify_response(name: str) -> Any:
    filepath = ASSETS_DIR / "httpmock" / "spotify" / f"{name}.json"
    return json.loads(filepath.read_text())
