"""
Integration tests package.

Contains tests that exercise the packaged lessons end to end through
the Flask test client and the click command line.
"""
