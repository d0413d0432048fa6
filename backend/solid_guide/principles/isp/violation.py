"""
One fat interface forces guests to implement admin actions they cannot perform.
"""

from abc import ABC, abstractmethod

from ...core.exceptions import UnsupportedOperationError


class UserActions(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def view(self, document: str) -> None:
        pass

    @abstractmethod
    def edit(self, document: str) -> None:
        pass

    @abstractmethod
    def delete(self, document: str) -> None:
        pass

    @abstractmethod
    def manage_users(self) -> None:
        pass


class AdminUser(UserActions):
    def view(self, document: str) -> None:
        print(f"{self.name} views {document}")

    def edit(self, document: str) -> None:
        print(f"{self.name} edits {document}")

    def delete(self, document: str) -> None:
        print(f"{self.name} deletes {document}")

    def manage_users(self) -> None:
        print(f"{self.name} manages users")


class GuestUser(UserActions):
    def view(self, document: str) -> None:
        print(f"{self.name} views {document}")

    def edit(self, document: str) -> None:
        raise UnsupportedOperationError("Guest users are not allowed to edit documents")

    def delete(self, document: str) -> None:
        raise UnsupportedOperationError("Guest users are not allowed to delete documents")

    def manage_users(self) -> None:
        raise UnsupportedOperationError("Guest users are not allowed to manage users")


def demo() -> None:
    users = [AdminUser("Alice"), GuestUser("Bob")]
    for user in users:
        user.view("report.pdf")
        try:
            user.edit("report.pdf")
        except UnsupportedOperationError as e:
            print(f"Error: {e}")
