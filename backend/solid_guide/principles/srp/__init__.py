"""Single Responsibility Principle: a class should have one reason to change."""

from .compliance import demo as compliance_demo
from .violation import demo as violation_demo

__all__ = ["compliance_demo", "violation_demo"]
