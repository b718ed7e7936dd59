"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["resfs._pytest_plugin"]

This makes the ``rfs`` fixture automatically available::

    def test_something(rfs):
        assert rfs.is_file("/Assets/Logo.png")
"""

import pytest

from ._fs import ResourceFileSystem

SAMPLE_KEYS = (
    "App.Readme.txt",
    "App.Assets.Logo.png",
    "App.Assets.Icon.ico",
    "App.Assets.Fonts.Main.ttf",
    "App.Views.Home.Index.html",
    "App.Views.Shared.Layout.html",
)


@pytest.fixture
def rfs() -> ResourceFileSystem:
    """A :class:`ResourceFileSystem` over a small ``App`` catalog.

    Provides an independent instance per test (function scope).
    """
    return ResourceFileSystem.from_keys(SAMPLE_KEYS, "App", mtime=1_700_000_000.0)
