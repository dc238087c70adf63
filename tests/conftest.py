"""Shared fixtures: a recording stand-in for the HUDU client."""

import os
import sys

import pytest

# Ensure project root is on sys.path so 'core' and 'tools' import in tests
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from core.models import PaginatedResult  # noqa: E402


class FakeHuduClient:
    """In-memory client that records every call it receives.

    ``pages`` maps a resource path to the PaginatedResult its list returns,
    ``records`` maps (path, id) to a record, and ``errors`` maps a path to an
    exception raised instead.
    """

    def __init__(self, pages=None, records=None, errors=None):
        self.pages = pages or {}
        self.records = records or {}
        self.errors = errors or {}
        self.calls = []

    async def list(self, resource, params=None):
        self.calls.append(("list", resource.path, dict(params or {})))
        if resource.path in self.errors:
            raise self.errors[resource.path]
        return self.pages.get(resource.path, PaginatedResult())

    async def get(self, resource, record_id):
        self.calls.append(("get", resource.path, record_id))
        if resource.path in self.errors:
            raise self.errors[resource.path]
        return self.records.get((resource.path, record_id))


@pytest.fixture
def fake_client():
    return FakeHuduClient()
