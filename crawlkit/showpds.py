"""Print the import dependency structure of a Go package."""

from __future__ import annotations

import argparse
import itertools
import os
import traceback
from typing import List, Optional

from crawlkit.pkgtool import PkgNode, get_src_dirs

ARROWS = "->"

_serial = itertools.count(1)


def show_dep_struct(node: PkgNode, depth: int = 0, prefix: str = "") -> None:
    """Print every import chain from ``node`` down to a leaf, one per line."""
    text = prefix + node.import_path
    deps = node.imported_nodes()
    if not deps:
        print(f"{next(_serial)}[{depth}]: {text}")
        return
    text += ARROWS
    for dep in deps:
        show_dep_struct(dep, depth + 1, text)


def _get_pkg_import_path(flag_value: str) -> str:
    """Return the import path given, or the one of the current directory."""
    if flag_value:
        return flag_value
    print("The flag p is invalid, use current dir as package import path.")
    current_dir = os.getcwd()
    import_path = ""
    for src_dir in get_src_dirs(False):
        if current_dir.startswith(src_dir):
            import_path = current_dir[len(src_dir) + 1:]
            break
    if not import_path.strip():
        raise RuntimeError("Couldn't parse the import path!")
    return import_path.replace(os.sep, "/")


def main(argv: Optional[List[str]] = None) -> int:
    """Show the dependency structure of the package given by -p."""
    parser = argparse.ArgumentParser(
        prog="showpds",
        description="Show the dependency structure of specified package.",
    )
    parser.add_argument(
        "-p", dest="path", default="", help="The path of target package."
    )
    args = parser.parse_args(argv)
    try:
        import_path = _get_pkg_import_path(args.path)
        node = PkgNode(import_path)
        print(f"The package node of '{import_path}': {node!r}")
        try:
            node.grow()
        except (OSError, ValueError) as exc:
            print(f"GROW ERROR: {exc}")
        print(f"The dependency structure of package '{import_path}':")
        show_dep_struct(node, 0, "")
    except Exception as exc:  # report any failure like a crash, then stop
        print(f"FATAL ERROR: {exc}", end="")
        traceback.print_exc()
    return 0