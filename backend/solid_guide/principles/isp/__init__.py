"""Interface Segregation Principle: clients depend only on what they use."""

from .compliance import demo as compliance_demo
from .violation import demo as violation_demo

__all__ = ["compliance_demo", "violation_demo"]
