"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface")
    assert module.__all__ == []


def test_streamlit_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface.streamlit")
    assert module.__all__ == []


def test_chart_helpers_are_exported() -> None:
    module = import_module("src.adapters.interface.streamlit.charts")
    assert "prepare_donut_chart_data" in module.__all__
    assert all(hasattr(module, name) for name in module.__all__)
