"""
The report and both stores depend on the EmployeeStore abstraction.

Swapping the in-memory store for the SQLAlchemy one needs no change to
EmployeeReport.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...core import config
from ...db.models import EmployeeRow
from ...db.session import make_engine, make_sessionmaker


@dataclass
class EmployeeRecord:
    id: int
    name: str
    role: str


class EmployeeStore(ABC):
    @abstractmethod
    def add(self, employee: EmployeeRecord) -> None:
        pass

    @abstractmethod
    def all(self) -> List[EmployeeRecord]:
        pass


class InMemoryEmployeeStore(EmployeeStore):
    def __init__(self):
        self._employees: Dict[int, EmployeeRecord] = {}

    def add(self, employee: EmployeeRecord) -> None:
        self._employees[employee.id] = employee

    def all(self) -> List[EmployeeRecord]:
        return [self._employees[key] for key in sorted(self._employees)]


class SQLAlchemyEmployeeStore(EmployeeStore):
    def __init__(self, database_url: Optional[str] = None):
        self.engine = make_engine(database_url or config.get_dip_database_url())
        self.db = make_sessionmaker(self.engine)()

    def add(self, employee: EmployeeRecord) -> None:
        # merge keeps re-runs against a file database idempotent
        self.db.merge(EmployeeRow(id=employee.id, name=employee.name, role=employee.role))
        self.db.commit()

    def all(self) -> List[EmployeeRecord]:
        rows = self.db.query(EmployeeRow).order_by(EmployeeRow.id.asc()).all()
        return [self._to_domain(row) for row in rows]

    def close(self) -> None:
        self.db.close()
        self.engine.dispose()

    def _to_domain(self, row: EmployeeRow) -> EmployeeRecord:
        return EmployeeRecord(id=row.id, name=row.name, role=row.role)


class EmployeeReport:
    def __init__(self, store: EmployeeStore):
        self.store = store

    def add(self, employee: EmployeeRecord) -> None:
        self.store.add(employee)

    def render(self) -> None:
        for employee in self.store.all():
            print(f"{employee.id}: {employee.name} ({employee.role})")


def demo() -> None:
    sql_store = SQLAlchemyEmployeeStore()
    try:
        for store in (InMemoryEmployeeStore(), sql_store):
            print(f"Using {type(store).__name__}")
            report = EmployeeReport(store)
            report.add(EmployeeRecord(1, "Alice", "Engineer"))
            report.add(EmployeeRecord(2, "Bob", "Manager"))
            report.render()
    finally:
        sql_store.close()
