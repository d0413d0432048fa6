"""
The payroll example split so each class has a single reason to change.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class Employee:
    id: int
    name: str
    role: str
    hourly_rate: float
    hours_worked: float


class PayCalculator:
    """Owns the pay rules."""

    def calculate(self, employee: Employee) -> float:
        return employee.hourly_rate * employee.hours_worked


class EmployeeRepository:
    """Owns storage."""

    def __init__(self):
        self._employees: Dict[int, Employee] = {}

    def save(self, employee: Employee) -> None:
        self._employees[employee.id] = employee
        print(f"Saving {employee.name} to the database")

    def get(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)


class PayslipPrinter:
    """Owns the report layout."""

    def print_payslip(self, employee: Employee, amount: float) -> None:
        print(f"Payslip for {employee.name} ({employee.role}): {amount:.2f}")


def demo() -> None:
    employee = Employee(1, "Alice", "Engineer", 50.0, 40)
    repository = EmployeeRepository()
    calculator = PayCalculator()
    printer = PayslipPrinter()

    repository.save(employee)
    printer.print_payslip(employee, calculator.calculate(employee))
