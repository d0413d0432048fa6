"""
Runnable violation/compliance snippets, one subpackage per principle.

The registry below is the single place that knows which demos exist;
the service layer reads it instead of importing principle modules.
"""

from typing import Dict, List, Tuple

from ..domain.entities import Example
from . import dip, isp, lsp, ocp, srp

# SOLID order
LESSON_CODES: Tuple[str, ...] = ("srp", "ocp", "lsp", "isp", "dip")

PRINCIPLE_NAMES: Dict[str, str] = {
    "srp": "Single Responsibility Principle",
    "ocp": "Open/Closed Principle",
    "lsp": "Liskov Substitution Principle",
    "isp": "Interface Segregation Principle",
    "dip": "Dependency Inversion Principle",
}

_EXAMPLE_NAMES: Dict[str, Dict[str, str]] = {
    "srp": {
        "violation": "PayrollEmployee calculates, saves and reports",
        "compliance": "PayCalculator, EmployeeRepository and PayslipPrinter",
    },
    "ocp": {
        "violation": "AreaCalculator branching on shape type",
        "compliance": "Shapes computing their own area",
    },
    "lsp": {
        "violation": "ReadOnlyFile refusing File.write",
        "compliance": "ReadableFile and WritableFile contracts",
    },
    "isp": {
        "violation": "GuestUser forced to implement UserActions",
        "compliance": "Viewer, Editor and UserManager roles",
    },
    "dip": {
        "violation": "EmployeeReport constructing MySQLDatabase",
        "compliance": "EmployeeReport depending on EmployeeStore",
    },
}

_MODULES = {"srp": srp, "ocp": ocp, "lsp": lsp, "isp": isp, "dip": dip}


def get_examples(code: str) -> List[Example]:
    """Return the violation and compliance examples for a lesson, or []."""
    module = _MODULES.get(code.lower())
    if module is None:
        return []
    code = code.lower()
    names = _EXAMPLE_NAMES[code]
    return [
        Example(
            lesson_code=code,
            kind="violation",
            name=names["violation"],
            func=module.violation_demo,
        ),
        Example(
            lesson_code=code,
            kind="compliance",
            name=names["compliance"],
            func=module.compliance_demo,
        ),
    ]
