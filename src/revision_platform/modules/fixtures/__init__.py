"""Fixture Module - Read-only subjects and chapters.

Usage:
    from revision_platform.modules.fixtures import get_fixture_store
    store = get_fixture_store()
    chapters = store.list_chapters("physics")
"""

from revision_platform.modules.fixtures.interface import Chapter, IFixtureStore, Subject
from revision_platform.modules.fixtures.repository import JsonFixtureStore, get_fixture_store

__all__ = [
    "Chapter",
    "IFixtureStore",
    "JsonFixtureStore",
    "Subject",
    "get_fixture_store",
]
