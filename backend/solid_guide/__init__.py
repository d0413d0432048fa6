"""
SOLID Guide - lessons and runnable snippets for the five SOLID principles.
"""

__version__ = "1.0.0"
