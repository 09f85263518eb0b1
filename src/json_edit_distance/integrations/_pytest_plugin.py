"""pytest plugin for json-edit-distance.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_edit_distance import JEDIConfig, compare


@pytest.fixture(scope="session")
def assert_json_similar() -> Any:
    """Fixture that returns a callable JSON similarity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JEDIComparator per call).

    Usage in tests::

        def test_reordered_keys(assert_json_similar):
            assert_json_similar({"a": 1, "b": 2}, {"b": 2, "a": 1}, threshold=1.0)

        def test_structural_break(assert_json_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_json_similar({"name": "x"}, ["x"])

    Returns:
        A callable ``_assert(actual, expected, threshold=0.9, config=None) -> None``
        that raises ``AssertionError`` when the similarity score is below threshold.
    """

    def _assert(
        actual: Any,
        expected: Any,
        threshold: float = 0.9,
        config: JEDIConfig | None = None,
    ) -> None:
        result = compare(actual, expected, config=config)
        if result.similarity_score < threshold:
            raise AssertionError(
                f"JSON documents not similar: "
                f"similarity={result.similarity_score:.4f} < threshold={threshold}\n"
                f"  distance: {result.distance:.4f} "
                f"(max {result.max_distance:.1f})\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
