"""Open/Closed Principle: extend behavior without modifying existing code."""

from .compliance import demo as compliance_demo
from .violation import demo as violation_demo

__all__ = ["compliance_demo", "violation_demo"]
