"""Smoke tests for module imports.

Verifies that every public module imports cleanly and that the names the
package advertises in __all__ actually exist.
"""

import importlib

import pytest

MODULES = [
    "readable_time",
    "readable_time.absolute",
    "readable_time.buckets",
    "readable_time.clock",
    "readable_time.constants",
    "readable_time.exceptions",
    "readable_time.formatter",
    "readable_time.options",
]


@pytest.mark.parametrize("module_name", MODULES)
def test_module_imports(module_name: str) -> None:
    """Module can be imported without errors."""
    module = importlib.import_module(module_name)
    assert module is not None


@pytest.mark.parametrize("module_name", MODULES)
def test_all_exports_exist(module_name: str) -> None:
    """Every name in __all__ is defined on the module."""
    module = importlib.import_module(module_name)
    for name in getattr(module, "__all__", []):
        assert hasattr(module, name), f"{module_name}.{name} missing"
