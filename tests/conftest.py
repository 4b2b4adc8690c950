from __future__ import annotations

from pathlib import Path

import pytest

_GROUP_MARKERS = {
    "parser": pytest.mark.parser,
    "unit": pytest.mark.unit,
    "integration": pytest.mark.integration,
}


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        marker = _GROUP_MARKERS.get(_top_level_tests_group(Path(str(item.path))))
        if marker is not None:
            item.add_marker(marker)
