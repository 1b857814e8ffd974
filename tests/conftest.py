"""Root pytest configuration for tg_search_web.

Puts `src/` on sys.path and tags every test by its directory. Shared fixtures
for the mock backend live in tests/unit/conftest.py.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

_LAYER_MARKERS = {
    "unit": "in-process tests: mock transports and the ASGI mock backend",
    "integration": "tests against a running backend or MeiliSearch",
}


def pytest_configure(config):
    for name, description in _LAYER_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(items):
    """Tag each test with the marker named after its tests/<layer>/ directory."""
    for item in items:
        parts = Path(str(item.fspath)).parts
        if "tests" not in parts:
            continue
        layer = next((p for p in parts if p in _LAYER_MARKERS), None)
        if layer is not None:
            item.add_marker(layer)
