"""
Reading and writing are separate contracts, so every subtype keeps its promise.
"""

from typing import Iterable


class ReadableFile:
    def __init__(self, name: str, content: str = ""):
        self.name = name
        self.content = content

    def read(self) -> str:
        return self.content


class WritableFile(ReadableFile):
    def write(self, data: str) -> None:
        self.content = data
        print(f"Wrote {len(data)} characters to {self.name}")


class ReadOnlyFile(ReadableFile):
    pass


def save_all(files: Iterable[WritableFile], data: str) -> None:
    for file in files:
        file.write(data)


def demo() -> None:
    writable = [WritableFile("notes.txt"), WritableFile("todo.txt")]
    save_all(writable, "hello")

    readable = writable + [ReadOnlyFile("config.ini", "debug=false")]
    for file in readable:
        print(f"{file.name}: {file.read()}")
