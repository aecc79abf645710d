from __future__ import annotations

from pathlib import Path


class FileFinderError(RuntimeError):
    kind = "Error"

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)
        self.message = message


class ListError(FileFinderError):
    kind = "NotAccessible"


class OpenError(FileFinderError):
    kind = "HandlerFailure"
