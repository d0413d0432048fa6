"""
ReadOnlyFile claims to be a File but refuses the write the contract promises.
"""

from typing import Iterable

from ...core.exceptions import UnsupportedOperationError


class File:
    def __init__(self, name: str, content: str = ""):
        self.name = name
        self.content = content

    def read(self) -> str:
        return self.content

    def write(self, data: str) -> None:
        self.content = data
        print(f"Wrote {len(data)} characters to {self.name}")


class ReadOnlyFile(File):
    def write(self, data: str) -> None:
        raise UnsupportedOperationError("Cannot write to a read-only file")


def save_all(files: Iterable[File], data: str) -> None:
    for file in files:
        file.write(data)


def demo() -> None:
    files = [File("notes.txt"), ReadOnlyFile("config.ini")]
    try:
        save_all(files, "hello")
    except UnsupportedOperationError as e:
        print(f"Error: {e}")
