"""Liskov Substitution Principle: subtypes must honor their supertype's contract."""

from .compliance import demo as compliance_demo
from .violation import demo as violation_demo

__all__ = ["compliance_demo", "violation_demo"]
