"""Destinations for serialized exports."""

import os
import stat
import tempfile
from pathlib import Path
from typing import BinaryIO

from ..errors import ExportError
from ..models import SinkResult


def _file_mode(dest: Path) -> int:
    """Mode for a new export: the existing file's, else 0o666 minus the umask."""
    try:
        return stat.S_IMODE(dest.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class FileSink:
    """Write exports into a directory, replacing any previous file of the same name.

    Data goes to a temp file first and is moved into place with os.replace,
    so the destination is either the old file or the complete new one.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def persist(self, payload: bytes, label: str) -> SinkResult:
        dest = self.directory / label
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{label}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.chmod(tmp, _file_mode(dest))
                os.replace(tmp, dest)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ExportError(f"Could not write {dest}: {e}") from e
        return SinkResult(location=str(dest.resolve()), byte_count=len(payload))


class StreamSink:
    """Hand the export to the caller through a binary stream (e.g. stdout)."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def persist(self, payload: bytes, label: str) -> SinkResult:
        try:
            self.stream.write(payload)
            self.stream.flush()
        except OSError as e:
            raise ExportError(f"Could not write {label}: {e}") from e
        location = getattr(self.stream, "name", None)
        return SinkResult(location=location if isinstance(location, str) else "<stream>", byte_count=len(payload))
