"""
Small role interfaces; each user type implements only what it can do.
"""

from abc import ABC, abstractmethod
from typing import Iterable


class Viewer(ABC):
    @abstractmethod
    def view(self, document: str) -> None:
        pass


class Editor(ABC):
    @abstractmethod
    def edit(self, document: str) -> None:
        pass

    @abstractmethod
    def delete(self, document: str) -> None:
        pass


class UserManager(ABC):
    @abstractmethod
    def manage_users(self) -> None:
        pass


class User:
    def __init__(self, name: str):
        self.name = name


class Guest(User, Viewer):
    def view(self, document: str) -> None:
        print(f"{self.name} views {document}")


class Member(Guest, Editor):
    def edit(self, document: str) -> None:
        print(f"{self.name} edits {document}")

    def delete(self, document: str) -> None:
        print(f"{self.name} deletes {document}")


class Administrator(Member, UserManager):
    def manage_users(self) -> None:
        print(f"{self.name} manages users")


def open_all(viewers: Iterable[Viewer], document: str) -> None:
    for viewer in viewers:
        viewer.view(document)


def demo() -> None:
    guest, member, admin = Guest("Bob"), Member("Carol"), Administrator("Alice")

    open_all([guest, member, admin], "report.pdf")
    editors: list[Editor] = [member, admin]
    for editor in editors:
        editor.edit("report.pdf")
    admin.manage_users()
