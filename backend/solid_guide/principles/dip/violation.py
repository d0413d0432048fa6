"""
The high-level report builds its own low-level database and cannot use another.
"""

from typing import Dict, List


class MySQLDatabase:
    """Stands in for a real driver; it only prints what it would run."""

    def __init__(self):
        self._rows: List[Dict] = []

    def insert(self, row: Dict) -> None:
        self._rows.append(row)
        print(f"MySQL: INSERT {row['name']}")

    def select_all(self) -> List[Dict]:
        print("MySQL: SELECT * FROM employees")
        return list(self._rows)


class EmployeeReport:
    def __init__(self):
        self.database = MySQLDatabase()

    def add(self, id: int, name: str, role: str) -> None:
        self.database.insert({"id": id, "name": name, "role": role})

    def render(self) -> None:
        for row in self.database.select_all():
            print(f"{row['id']}: {row['name']} ({row['role']})")


def demo() -> None:
    report = EmployeeReport()
    report.add(1, "Alice", "Engineer")
    report.add(2, "Bob", "Manager")
    report.render()
