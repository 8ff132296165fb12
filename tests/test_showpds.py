import re

import pytest

from crawlkit.pkgtool import PkgNode, get_src_dirs
from crawlkit.showpds import ARROWS, main, show_dep_struct

LINE = re.compile(r"^(\d+)\[(\d+)\]: (.*)$")


def _parse(out):
    result = []
    for line in out.splitlines():
        match = LINE.match(line)
        if match:
            result.append((int(match.group(1)), int(match.group(2)), match.group(3)))
    return result


@pytest.fixture
def gopath_src(tmp_path, monkeypatch):
    base = tmp_path.resolve()
    goroot = base / "goroot"
    (goroot / "src").mkdir(parents=True)
    src = base / "gopath" / "src"
    src.mkdir(parents=True)
    monkeypatch.setenv("GOROOT", str(goroot))
    monkeypatch.setenv("GOPATH", str(base / "gopath"))
    get_src_dirs(True)
    return src


def _write(src, import_path, text):
    pkg = src.joinpath(*import_path.split("/"))
    pkg.mkdir(parents=True, exist_ok=True)
    (pkg / "main.go").write_text(text)
    return pkg


def test_show_dep_struct_leaf(capsys):
    show_dep_struct(PkgNode("zeta/only"), 0, "")
    rows = _parse(capsys.readouterr().out)
    assert len(rows) == 1
    assert rows[0][1:] == (0, "zeta/only")


def test_show_dep_struct_chains(capsys):
    root = PkgNode("zeta/root")
    leaf_a = PkgNode("zeta/a")
    mid = PkgNode("zeta/b")
    leaf_c = PkgNode("zeta/c")
    root.add_imported_node(leaf_a)
    root.add_imported_node(mid)
    mid.add_imported_node(leaf_c)
    show_dep_struct(root, 0, "")
    rows = _parse(capsys.readouterr().out)
    assert [row[1:] for row in rows] == [
        (1, "zeta/root" + ARROWS + "zeta/a"),
        (2, "zeta/root" + ARROWS + "zeta/b" + ARROWS + "zeta/c"),
    ]
    assert rows[1][0] == rows[0][0] + 1


def test_show_dep_struct_prefix(capsys):
    show_dep_struct(PkgNode("zeta/x"), 3, "pre:")
    rows = _parse(capsys.readouterr().out)
    assert rows[0][1:] == (3, "pre:zeta/x")


def test_main_with_flag(gopath_src, capsys):
    _write(gopath_src, "eta/app", 'package main\nimport (\n"fmt"\n"eta/lib"\n)\n')
    _write(gopath_src, "eta/lib", "package lib\n")
    assert main(["-p", "eta/app"]) == 0
    out = capsys.readouterr().out
    assert "The dependency structure of package 'eta/app':" in out
    rows = _parse(out)
    assert [row[1:] for row in rows] == [
        (1, "eta/app" + ARROWS + "eta/lib"),
        (1, "eta/app" + ARROWS + "fmt"),
    ]


def test_main_uses_current_directory(gopath_src, capsys, monkeypatch):
    pkg = _write(gopath_src, "theta/app", "package main\n")
    monkeypatch.chdir(pkg)
    main([])
    out = capsys.readouterr().out
    assert "The flag p is invalid, use current dir as package import path." in out
    rows = _parse(out)
    assert [row[1:] for row in rows] == [(0, "theta/app")]


def test_main_outside_src_dirs(gopath_src, capsys, monkeypatch, tmp_path):
    outside = tmp_path / "elsewhere"
    outside.mkdir()
    monkeypatch.chdir(outside)
    main([])
    out = capsys.readouterr().out
    assert "FATAL ERROR: Couldn't parse the import path!" in out
    assert _parse(out) == []


def test_main_reports_grow_error(gopath_src, capsys):
    _write(gopath_src, "iota/app", "package main\nimport fmt\n")
    main(["-p", "iota/app"])
    out = capsys.readouterr().out
    assert "GROW ERROR:" in out
    assert [row[1:] for row in _parse(out)] == [(0, "iota/app")]