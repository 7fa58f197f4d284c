"""Tests for the adapter entry points."""

from importlib import import_module


def test_interface_packages_export_nothing() -> None:
    for name in ("src.adapters.interface", "src.adapters.interface.streamlit"):
        assert import_module(name).__all__ == []


def test_entry_points_expose_main() -> None:
    """The console script and the Streamlit script both start from main."""
    cli = import_module("src.adapters.dashboard_summary_cli")
    streamlit_app = import_module("src.adapters.interface.streamlit.app")

    assert callable(cli.main)
    assert callable(streamlit_app.main)
    assert streamlit_app.PAGES == ["Dashboard", "Monthly update", "Accounts"]
