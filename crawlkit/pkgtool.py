"""Discovery of Go source directories and of the import graph of packages."""

from __future__ import annotations

import os
import sys
from typing import Dict, Iterable, List, Optional

_src_dirs_cache: List[str] = []
_pkg_nodes_cache: Dict[str, "PkgNode"] = {}

_BUILD_IGNORE = "// +build ignore"


def get_goroot() -> str:
    """Return the GOROOT path taken from the environment, or ""."""
    return os.environ.get("GOROOT", "")


def get_all_gopath() -> List[str]:
    """Return every non-blank path listed in GOPATH."""
    gopath = os.environ.get("GOPATH", "")
    sep = ";" if sys.platform.startswith("win") else ":"
    return [path for path in gopath.split(sep) if path.strip()]


def get_src_dirs(fresh: bool = False) -> List[str]:
    """Return the source directories of GOROOT and of every GOPATH entry.

    The result is cached; pass ``fresh`` to read the environment again.
    """
    if _src_dirs_cache and not fresh:
        return list(_src_dirs_cache)
    src_dirs = [os.path.join(get_goroot(), "src")]
    src_dirs.extend(os.path.join(path, "src") for path in get_all_gopath())
    _src_dirs_cache[:] = src_dirs
    return list(src_dirs)


def append_if_absent(items: Optional[Iterable[str]], *args: str) -> List[str]:
    """Return ``items`` followed by those of ``args`` not yet present."""
    result = list(items or [])
    seen = set(result)
    for arg in args:
        if arg in seen:
            continue
        result.append(arg)
        seen.add(arg)
    return result


def _from_slash(path: str) -> str:
    return path.replace("/", os.sep)


def _get_abs_path_of_package(import_path: str) -> str:
    """Return the absolute directory of an import path, or "" if none exists."""
    for src_dir in get_src_dirs(False):
        abs_path = os.path.join(src_dir, _from_slash(import_path))
        if os.path.exists(abs_path):
            return abs_path
    return ""


def _get_go_source_file_abs_paths(
    package_abs_path: str, contains_test_file: bool
) -> List[str]:
    """Return the absolute paths of the Go source files in a directory."""
    result = []
    with os.scandir(package_abs_path) as entries:
        for entry in sorted(entries, key=lambda item: item.name):
            name = entry.name
            if entry.is_dir(follow_symlinks=False) or not name.endswith(".go"):
                continue
            if name.endswith("_test.go") and not contains_test_file:
                continue
            result.append(os.path.join(package_abs_path, name))
    return result


def get_imports_from_go_source(file_path: str) -> List[str]:
    """Return the sorted import paths declared in a Go source file.

    A file marked ``// +build ignore`` before its imports yields what was
    collected so far. Aliased imports inside an import block are skipped.
    """
    import_paths: List[str] = []
    in_block = False
    with open(file_path, encoding="utf-8", errors="replace") as source:
        for raw_line in source:
            line = raw_line.strip()
            if line == _BUILD_IGNORE:
                return import_paths
            if line.startswith("import"):
                if "(" in line:
                    in_block = True
                    continue
                start = line.find('"')
                end = line.rfind('"')
                if start < 0 or end <= start:
                    raise ValueError(
                        f"irregular import declaration in {file_path}: {line}"
                    )
                import_paths = append_if_absent(import_paths, line[start + 1:end])
                break
            if in_block:
                if line.startswith(")"):
                    break
                if not (line.startswith('"') and line.endswith('"')):
                    continue
                import_paths = append_if_absent(
                    import_paths, line.replace('"', "", 2)
                )
    return sorted(import_paths)


def get_imports_from_package(
    import_path: str, contains_test_file: bool = False
) -> List[str]:
    """Return all import paths used by the Go files of a package.

    An import path that matches no directory yields an empty list.
    """
    package_abs_path = _get_abs_path_of_package(import_path)
    if not package_abs_path:
        return []
    import_paths: List[str] = []
    for file_path in _get_go_source_file_abs_paths(
        package_abs_path, contains_test_file
    ):
        import_paths = append_if_absent(
            import_paths, *get_imports_from_go_source(file_path)
        )
    return import_paths


class PkgNode:
    """A package in the import graph, with its importers and its imports."""

    def __init__(self, import_path: str) -> None:
        package_abs_path = _get_abs_path_of_package(import_path)
        import_dir = _from_slash(import_path)
        src_dir = ""
        if package_abs_path.endswith(import_dir):
            src_dir = package_abs_path[: package_abs_path.rfind(import_dir)]
        self.src_dir = src_dir
        self.import_path = import_path
        self._importers: List[PkgNode] = []
        self._imported_nodes: List[PkgNode] = []
        self._grown = False

    def __repr__(self) -> str:
        return (
            f"PkgNode(import_path={self.import_path!r}, src_dir={self.src_dir!r}, "
            f"importers={len(self._importers)}, "
            f"imported={len(self._imported_nodes)}, grown={self._grown})"
        )

    def add_importer(self, node: "PkgNode") -> None:
        """Record a node that imports this package."""
        self._importers.append(node)

    def add_imported_node(self, node: "PkgNode") -> None:
        """Record a node that this package imports."""
        self._imported_nodes.append(node)

    def importers(self) -> List["PkgNode"]:
        """Return a copy of the nodes importing this package."""
        return list(self._importers)

    def imported_nodes(self) -> List["PkgNode"]:
        """Return a copy of the nodes this package imports."""
        return list(self._imported_nodes)

    def is_leaf(self) -> bool:
        """Tell whether this package imports nothing."""
        return not self._imported_nodes

    def grow(self) -> None:
        """Follow the imports of this package down to the leaves."""
        if self._grown:
            return
        import_paths = get_imports_from_package(self.import_path, False)
        if not import_paths:
            self._grown = True
            return
        sub_nodes = []
        for import_path in import_paths:
            if import_path == self.import_path:
                continue
            node = _pkg_nodes_cache.get(import_path)
            if node is None:
                node = PkgNode(import_path)
                _pkg_nodes_cache[import_path] = node
            sub_nodes.append(node)
        for node in sub_nodes:
            node.add_importer(self)
            self.add_imported_node(node)
            node.grow()
        self._grown = True