from __future__ import annotations

import logging
from pathlib import Path
import shutil
import sys

from PySide6.QtCore import QProcess

from filefinder.ops.errors import OpenError

_logger = logging.getLogger(__name__)


def open_with_default_handler(path: Path | str, backend: str = "auto") -> None:
    """Hand ``path`` to the desktop's default application.

    Raises ``OpenError`` when the file is gone or no launcher could be started.
    """
    target = Path(path)
    if not target.exists():
        raise OpenError(target, f"{target} does not exist")
    candidates = open_candidates(str(target), backend.lower(), sys.platform)
    for command, args in candidates:
        if not shutil.which(command):
            continue
        if _start_detached(command, args):
            _logger.info("Opened %s with %s", target, command)
            return
        _logger.debug("Launcher %s failed for %s", command, target)
    tried = ", ".join(command for command, _ in candidates)
    raise OpenError(target, f"No application could open {target.name} (tried {tried})")


def open_candidates(path: str, preferred: str, platform: str) -> list[tuple[str, list[str]]]:
    if platform == "darwin":
        return [("open", [path])]
    if platform.startswith("win"):
        return [("explorer", [path])]
    kde = [
        ("kioclient6", ["exec", path]),
        ("kioclient5", ["exec", path]),
        ("kde-open5", [path]),
    ]
    gio = [("gio", ["open", path])]
    xdg = [("xdg-open", [path])]
    if preferred == "kde":
        return kde + gio + xdg
    if preferred == "gio":
        return gio + kde + xdg
    if preferred == "xdg":
        return xdg + kde + gio
    return kde + gio + xdg


def _start_detached(command: str, args: list[str]) -> bool:
    started = QProcess.startDetached(command, args)
    # Some bindings return (ok, pid).
    if isinstance(started, tuple):
        started = started[0]
    return bool(started)
