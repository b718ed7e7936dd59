import pytest

from resfs import CollectingSink, MappingCatalog
from resfs._pytest_plugin import rfs  # noqa: F401


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def example_catalog() -> MappingCatalog:
    """The three-key ``App`` catalog used throughout the docs."""
    return MappingCatalog(
        ["App.Assets", "App.Assets.Logo.png", "App.Readme.txt"],
        "App",
        mtime=1_000.0,
    )
