"""
Test configuration package initialization.
"""
