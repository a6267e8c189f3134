"""Copying byte streams into writers that echo what they receive."""

from __future__ import annotations

import os
import sys
import urllib.request
from dataclasses import dataclass
from typing import BinaryIO, Optional, Protocol, TextIO, Union

CHUNK_SIZE = 32 * 1024

PathLike = Union[str, "os.PathLike[str]"]


class Writer(Protocol):
    def write(self, data: bytes) -> int: ...


def _byte_list(data: bytes) -> str:
    return "[" + " ".join(str(byte) for byte in data) + "]"


@dataclass
class EchoWriter:
    """Prints each chunk as text followed by its raw byte values."""

    out: Optional[TextIO] = None

    def write(self, data: bytes) -> int:
        print(bytes(data).decode("utf-8", errors="replace"), file=self.out)
        print("Bytes processed is : ", _byte_list(data), file=self.out)
        return len(data)


@dataclass
class LogWriter:
    """Prints each chunk as text followed by its length."""

    out: Optional[TextIO] = None

    def write(self, data: bytes) -> int:
        print(bytes(data).decode("utf-8", errors="replace"), file=self.out)
        print("Bytes processed is: ", len(data), file=self.out)
        return len(data)


def copy_stream(source: BinaryIO, writer: Writer) -> int:
    """Feed ``source`` to ``writer`` in chunks; return the bytes copied."""
    total = 0
    while chunk := source.read(CHUNK_SIZE):
        written = writer.write(chunk)
        if written != len(chunk):
            raise OSError(f"short write: {written} of {len(chunk)} bytes")
        total += written
    return total


def copy_file(path: PathLike, writer: Writer) -> int:
    """Copy the contents of the file at ``path`` into ``writer``."""
    with open(path, "rb") as source:
        return copy_stream(source, writer)


def fetch(url: str, writer: Writer) -> int:
    """Copy the body found at ``url`` into ``writer``."""
    with urllib.request.urlopen(url) as response:
        return copy_stream(response, writer)


def main(argv=None) -> int:
    """Echo a file, or log the body of a web address, to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: streams <file-or-url>", file=sys.stderr)
        return 2
    target = args[0]
    try:
        if target.startswith(("http://", "https://")):
            fetch(target, LogWriter())
        else:
            copy_file(target, EchoWriter())
    except OSError as err:
        print("Error is : ", err)
        return 1
    return 0