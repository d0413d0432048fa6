"""
One class that calculates pay, persists itself and prints the payslip.

A change to the pay rules, the storage or the report layout all land here.
"""


class PayrollEmployee:
    def __init__(self, id: int, name: str, role: str, hourly_rate: float, hours_worked: float):
        self.id = id
        self.name = name
        self.role = role
        self.hourly_rate = hourly_rate
        self.hours_worked = hours_worked

    def calculate_pay(self) -> float:
        return self.hourly_rate * self.hours_worked

    def save(self) -> None:
        print(f"Saving {self.name} to the database")

    def print_payslip(self) -> None:
        print(f"Payslip for {self.name} ({self.role}): {self.calculate_pay():.2f}")


def demo() -> None:
    employee = PayrollEmployee(1, "Alice", "Engineer", 50.0, 40)
    employee.save()
    employee.print_payslip()
