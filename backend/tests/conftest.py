import json
import sys
from pathlib import Path

import pytest


# Ensure `backend/` is on sys.path so tests can import local modules
# like `geo.*`, `overlays.*`, `span.*` and `main`.
BACKEND_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_ROOT))

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def mixed_overlays_path() -> Path:
    return DATA_DIR / "mixed_overlays.json"


@pytest.fixture
def mixed_overlays_request(mixed_overlays_path: Path) -> dict:
    return json.loads(mixed_overlays_path.read_text(encoding="utf-8"))
