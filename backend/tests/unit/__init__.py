"""
Unit tests package.

Contains isolated tests for the lesson snippets, domain entities,
repository, services and blueprints, with interfaces mocked where a
collaborator would otherwise be real.
"""
