import pytest

from resfs import CollectingSink, ResourceDirectory, ResourceFile, ResourceFileSystem
from tests.helpers.asserts import assert_stats_consistent


def test_listdir_root(rfs):
    assert rfs.listdir("/") == ["Assets", "Views", "Readme.txt"]


def test_listdir_nested(rfs):
    assert rfs.listdir("/Assets") == ["Fonts", "Icon.ico", "Logo.png"]
    assert rfs.listdir("Views/Home") == ["Index.html"]


def test_listdir_nonexistent_raises(rfs):
    with pytest.raises(FileNotFoundError):
        rfs.listdir("/nope")


def test_listdir_on_file_raises(rfs):
    with pytest.raises(NotADirectoryError):
        rfs.listdir("/Readme.txt")


def test_exists(rfs):
    assert rfs.exists("/")
    assert rfs.exists("/Assets")
    assert rfs.exists("/Assets/Logo.png")
    assert not rfs.exists("/Assets/Missing.png")


def test_exists_with_traversal_path_returns_false(rfs):
    assert rfs.exists("/../etc/passwd") is False


def test_is_dir_and_is_file(rfs):
    assert rfs.is_dir("/Views/Shared")
    assert not rfs.is_dir("/Readme.txt")
    assert rfs.is_file("/Views/Shared/Layout.html")
    assert not rfs.is_file("/Views")
    assert not rfs.is_file("/")


def test_is_dir_with_traversal_path_returns_false(rfs):
    assert rfs.is_dir("/../etc") is False


def test_get_directory_and_file(rfs):
    fonts = rfs.get_directory("/Assets/Fonts")
    assert isinstance(fonts, ResourceDirectory)
    main = rfs.get_file("/Assets/Fonts/Main.ttf")
    assert isinstance(main, ResourceFile)
    assert main.parent is fonts


def test_get_directory_root(rfs):
    assert rfs.get_directory("/") is rfs.root


def test_get_file_miss_returns_none(rfs):
    assert rfs.get_file("/Assets/Nope.png") is None
    assert rfs.get_file("/Nope/Logo.png") is None
    assert rfs.get_file("/") is None


def test_path_lookup_agrees_with_node_api(rfs):
    via_nodes = rfs.root.find_directory("Views").find_directory("Home").find_file("Index.html")
    assert rfs.get_file("/Views/Home/Index.html") is via_nodes


def test_resolve_identifier(rfs):
    assert rfs.resolve_identifier("/Assets/Fonts/Main.ttf") == "App.Assets.Fonts.Main.ttf"
    assert rfs.resolve_identifier("/Assets") is None


def test_stat_file(rfs):
    info = rfs.stat("/Assets/Logo.png")
    assert info == {
        "name": "Logo.png",
        "is_dir": False,
        "modified_at": 1_700_000_000.0,
        "resolved_identifier": "App.Assets.Logo.png",
        "child_count": 0,
    }


def test_stat_directory(rfs):
    info = rfs.stat("/Assets")
    assert info["is_dir"] is True
    assert info["child_count"] == 3
    assert info["resolved_identifier"] is None


def test_stat_missing_raises(rfs):
    with pytest.raises(FileNotFoundError):
        rfs.stat("/Missing")


def test_stats(rfs):
    s = rfs.stats()
    assert s["namespace_root"] == "App"
    assert s["key_count"] == 6
    assert s["file_count"] == 6
    assert s["dir_count"] == 6
    assert s["unresolved_count"] == 0
    assert s["modified_at"] == 1_700_000_000.0
    assert_stats_consistent(rfs)


def test_walk(rfs):
    assert list(rfs.walk()) == [
        ("/", ["Assets", "Views"], ["Readme.txt"]),
        ("/Assets", ["Fonts"], ["Icon.ico", "Logo.png"]),
        ("/Assets/Fonts", [], ["Main.ttf"]),
        ("/Views", ["Home", "Shared"], []),
        ("/Views/Home", [], ["Index.html"]),
        ("/Views/Shared", [], ["Layout.html"]),
    ]


def test_walk_subtree(rfs):
    assert [p for p, _, _ in rfs.walk("/Views")] == ["/Views", "/Views/Home", "/Views/Shared"]


def test_walk_on_file_raises(rfs):
    with pytest.raises(NotADirectoryError):
        list(rfs.walk("/Readme.txt"))


def test_walk_missing_raises(rfs):
    with pytest.raises(FileNotFoundError):
        list(rfs.walk("/Missing"))


# ---------------------------------------------------------------------------
# glob
# ---------------------------------------------------------------------------


def test_glob_single_level(rfs):
    assert rfs.glob("/Assets/*.png") == ["/Assets/Logo.png"]


def test_glob_root_star(rfs):
    assert rfs.glob("/*") == ["/Assets", "/Readme.txt", "/Views"]


def test_glob_recursive(rfs):
    assert rfs.glob("**/*.html") == ["/Views/Home/Index.html", "/Views/Shared/Layout.html"]


def test_glob_recursive_trailing(rfs):
    assert rfs.glob("/Assets/**") == [
        "/Assets/Fonts",
        "/Assets/Fonts/Main.ttf",
        "/Assets/Icon.ico",
        "/Assets/Logo.png",
    ]


def test_glob_directory_wildcard(rfs):
    assert rfs.glob("/Views/*/*.html") == ["/Views/Home/Index.html", "/Views/Shared/Layout.html"]


def test_glob_question_mark(rfs):
    assert rfs.glob("/Assets/Ic?n.*") == ["/Assets/Icon.ico"]


def test_glob_no_match(rfs):
    assert rfs.glob("/**/*.gif") == []


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------


def test_diagnostics_recorded_and_forwarded():
    sink = CollectingSink()
    fs = ResourceFileSystem.from_keys(["App.a.txt"], "App", sink=sink)
    assert fs.diagnostics == []
    assert fs.stats()["unresolved_count"] == 0


def test_unresolved_counted_in_stats():
    from resfs import MappingCatalog

    class PartialCatalog(MappingCatalog):
        def list_all(self):
            return super().list_all() + ["App.Ghost.txt"]

    sink = CollectingSink()
    fs = ResourceFileSystem(PartialCatalog(["App.Real.txt"], "App"), sink=sink)
    assert fs.listdir("/") == ["Real.txt"]
    assert fs.stats()["unresolved_count"] == 1
    assert [e.name for e in fs.diagnostics] == ["Ghost.txt"]
    assert sink.names() == ["Ghost.txt"]


def test_directory_shadows_file_of_same_name(example_catalog):
    fs = ResourceFileSystem(example_catalog, sink=CollectingSink())
    assert fs.is_dir("/Assets")
    assert fs.is_file("/Assets")
    assert fs.stat("/Assets")["is_dir"] is True
    assert fs.listdir("/") == ["Assets", "Readme.txt"]
    root_entry = next(iter(fs.walk()))
    assert root_entry == ("/", ["Assets"], ["Readme.txt"])


def test_repr(rfs):
    assert "App" in repr(rfs)


def test_glob_brackets_match_literally():
    fs = ResourceFileSystem.from_keys(["App.[draft].txt", "App.d.txt"], "App", sink=CollectingSink())
    assert fs.glob("/[draft].txt") == ["/[draft].txt"]
    assert fs.glob("/[*") == ["/[draft].txt"]
