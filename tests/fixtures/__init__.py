"""Test fixtures for TargetKit tests.

- locators: fake and on-disk tool locators

Import fixtures in your tests using:
    from tests.fixtures.locators import FakeLocator
"""

__all__ = [
    "locators",
]
