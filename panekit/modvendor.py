"""Reset the vendor directory and copy in the GLFW C sources.

Vendoring with the Go tool leaves out directories that hold no Go files,
so the GLFW C sources are copied from the module cache afterwards. Run
from the project root.
"""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

GO_MOD_FILE = "go.mod"
GO_MOD_VENDOR_FILE = os.path.join("vendor", "modules.txt")
GLFW_MOD = "github.com/go-gl/glfw"
GLFW_MOD_SRC_DIR = "v3.2/glfw/glfw"

PathLike = Union[str, "os.PathLike[str]"]


def _default_gopath() -> str:
    gopath = os.environ.get("GOPATH")
    if gopath:
        return gopath
    return os.path.join(os.path.expanduser("~"), "go")


def cache_mod_path(
    lines: Iterable[str], module: str, gopath: Optional[str] = None
) -> Optional[str]:
    """Return the module cache path of module as listed in a modules.txt.

    Only lines of exactly three space separated fields whose second field
    is the module name count. Returns None when the module is not listed.
    """
    for line in lines:
        fields = line.rstrip("\r\n").split(" ")
        if len(fields) != 3 or fields[1] != module:
            continue
        module_version = f"{module}@{fields[2]}"
        base = gopath if gopath is not None else _default_gopath()
        return os.path.normpath(os.path.join(base, "pkg/mod", module_version))
    return None


def _ensure_dir(directory: Path) -> None:
    if not directory.exists():
        directory.mkdir(mode=0o755)


def copy_file(src: PathLike, target: PathLike) -> None:
    """Copy the bytes of src over target, creating target if needed.

    An existing target is written over from the start without being
    truncated first.
    """
    os.stat(src)
    with open(src, "rb") as source:
        fd = os.open(target, os.O_RDWR | os.O_CREAT, 0o644)
        with os.fdopen(fd, "r+b") as destination:
            shutil.copyfileobj(source, destination)


def recursive_copy(src: PathLike, target: PathLike) -> None:
    """Copy the directory tree at src into target."""
    source_dir = Path(src)
    entries = sorted(source_dir.iterdir(), key=lambda entry: entry.name)
    target_dir = Path(target)
    _ensure_dir(target_dir)

    for entry in entries:
        destination = target_dir / entry.name
        if entry.is_dir():
            recursive_copy(entry, destination)
        else:
            copy_file(entry, destination)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Vendor the module dependencies and copy the GLFW C sources."""
    parser = argparse.ArgumentParser(
        prog="modvendor",
        description="Reset vendor content and copy the GLFW C source code.",
    )
    parser.parse_args(argv)

    wd = os.getcwd()
    if not os.path.exists(os.path.join(wd, GO_MOD_FILE)):
        print("This program must be invoked in the project root")
        return 1

    print("Reset vendor content using 'go mod vendor'")
    try:
        subprocess.run(
            ["go", "mod", "vendor", "-v"],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.CalledProcessError, OSError) as err:
        print(err)
        return 1

    print(f"Parsing {GO_MOD_VENDOR_FILE} to detect dependency module path for {GLFW_MOD}")
    try:
        with open(os.path.join(wd, GO_MOD_VENDOR_FILE), encoding="utf-8") as modules:
            glfw_mod_path = cache_mod_path(modules, GLFW_MOD)
    except OSError as err:
        print(f"Cannot open {GO_MOD_VENDOR_FILE}: {err}")
        return 1
    if glfw_mod_path is None:
        print(f"Cannot find module {GLFW_MOD} in {GO_MOD_VENDOR_FILE}")
        return 1
    print(f"Package module path: {glfw_mod_path}")

    glfw_src = os.path.join(glfw_mod_path, GLFW_MOD_SRC_DIR)
    glfw_target = os.path.join(wd, "vendor", GLFW_MOD, GLFW_MOD_SRC_DIR)
    print(f"Copying glfw c source code: {glfw_src} -> {glfw_target}")
    try:
        recursive_copy(glfw_src, glfw_target)
    except OSError as err:
        print(f"Cannot copy glfw c source code: {err}")
        return 1

    print("All set. To test using vendor dependencies: go test ./... -mod=vendor -v -count=1")
    return 0