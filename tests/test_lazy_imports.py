"""Tests for wren.__init__: public names load their modules on first access."""

import importlib
import sys
from types import ModuleType

import pytest


@pytest.fixture
def fresh_wren(monkeypatch: pytest.MonkeyPatch) -> ModuleType:
    """Import ``wren`` with no ``wren.*`` module cached; the cache is restored after."""
    for module_name in [m for m in sys.modules if m == "wren" or m.startswith("wren.")]:
        monkeypatch.delitem(sys.modules, module_name)
    return importlib.import_module("wren")


class TestLazyImports:
    def test_import_does_not_load_headers(self, fresh_wren: ModuleType) -> None:
        assert "wren.http.headers" not in sys.modules
        assert "wren.errors" not in sys.modules

    def test_access_loads_defining_module(self, fresh_wren: ModuleType) -> None:
        collection_cls = fresh_wren.HeaderCollection
        headers_module = sys.modules["wren.http.headers"]
        assert collection_cls is headers_module.HeaderCollection

    def test_errors_resolve_to_errors_module(self, fresh_wren: ModuleType) -> None:
        assert fresh_wren.InvalidArgument is sys.modules["wren.errors"].InvalidArgument

    def test_version_is_eager(self, fresh_wren: ModuleType) -> None:
        assert "__version__" in vars(fresh_wren)
        assert "__version__" not in fresh_wren._LAZY_IMPORTS
        assert "wren.http.headers" not in sys.modules

    @pytest.mark.parametrize("name", sorted(importlib.import_module("wren")._LAZY_IMPORTS))
    def test_registry_names_are_public(self, name: str) -> None:
        wren = importlib.import_module("wren")
        assert name in wren.__all__
        assert getattr(wren, name).__name__ == name

    def test_unknown_name_raises_attribute_error(self) -> None:
        wren = importlib.import_module("wren")
        with pytest.raises(AttributeError, match="has no attribute 'HeaderMap'"):
            wren.HeaderMap  # noqa: B018

    def test_all_matches_registry(self) -> None:
        wren = importlib.import_module("wren")
        assert set(wren.__all__) == set(wren._LAZY_IMPORTS)
