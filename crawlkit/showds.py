"""Print the structure of a directory tree."""

from __future__ import annotations

import argparse
import os
from typing import List, Optional

INDENT = "  "


def show_files(base_path: str, prefix: str = INDENT, show_all: bool = False) -> None:
    """Print every file below ``base_path``, directories marked with "/".

    Names starting with "." are left out unless ``show_all`` is true.
    Raises OSError when a directory cannot be read.
    """
    with os.scandir(base_path) as scanned:
        entries = sorted(scanned, key=lambda item: item.name)
    for entry in entries:
        name = entry.name
        if name.startswith(".") and not show_all:
            continue
        if entry.is_dir(follow_symlinks=False):
            print(f"{prefix}{name}/")
            show_files(os.path.join(base_path, name), INDENT + prefix, show_all)
        else:
            print(f"{prefix}{name}")


def main(argv: Optional[List[str]] = None) -> int:
    """Show the directory given by -p, or the current directory."""
    parser = argparse.ArgumentParser(
        prog="showds", description="Show the specified directory structure."
    )
    parser.add_argument(
        "-p", dest="path", default="", help="The path of target directory."
    )
    args = parser.parse_args(argv)
    root_path = args.path
    if not root_path:
        try:
            root_path = os.getcwd()
        except OSError as exc:
            print("GetwdError:", exc)
            return 0
    print(f"{root_path}:")
    try:
        show_files(root_path, INDENT, False)
    except OSError as exc:
        print("showFilesError:", exc)
    return 0