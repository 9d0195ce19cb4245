"""pytest configuration and fixtures for academic-console tests."""

import math
import os

import pytest
from PyQt6.QtWidgets import QApplication

from academic_console.core import ImmediateTaskRunner, TaskRunner
from academic_console.protocols import ResourceApi, set_console_config

# Widgets are built without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default ConsoleConfig."""
    set_console_config(None)
    yield
    set_console_config(None)


class FakeResourceApi(ResourceApi):
    """In-memory ResourceApi that pages, searches and records every call."""

    def __init__(self, records=(), scope_field="domain_id", option_records=None):
        self.records = [dict(record) for record in records]
        self.scope_field = scope_field
        self.option_records = dict(option_records or {})
        self.calls = []
        self.fail_with = None
        self.response = None
        self._next_id = max([record.get("id", 0) for record in self.records] + [0]) + 1

    def _maybe_fail(self):
        if self.fail_with is not None:
            error, self.fail_with = self.fail_with, None
            raise error
        if self.response is not None:
            response, self.response = self.response, None
            return response
        return None

    def list(self, page, limit, search="", filters=None):
        self.calls.append(("list", page, limit, search, dict(filters or {})))
        canned = self._maybe_fail()
        if canned is not None:
            return canned
        matches = [
            record for record in self.records
            if (not search or any(search.lower() in str(value).lower() for value in record.values()))
            and all(str(record.get(key)) == str(value) for key, value in (filters or {}).items())
        ]
        total_pages = math.ceil(len(matches) / limit)
        start = (page - 1) * limit
        return {
            "success": True,
            "data": matches[start:start + limit],
            "pagination": {
                "currentPage": page,
                "totalPages": total_pages,
                "totalCount": len(matches),
                "hasNext": page < total_pages,
                "hasPrev": page > 1,
            },
        }

    def list_scoped(self, parent_id):
        self.calls.append(("list_scoped", parent_id))
        canned = self._maybe_fail()
        if canned is not None:
            return canned
        return {
            "success": True,
            "data": [r for r in self.records if str(r.get(self.scope_field)) == str(parent_id)],
        }

    def create(self, payload):
        self.calls.append(("create", payload))
        canned = self._maybe_fail()
        if canned is not None:
            return canned
        record = dict(payload.fields, id=self._next_id)
        self._next_id += 1
        self.records.append(record)
        return {"success": True, "data": record}

    def update(self, resource_id, payload):
        self.calls.append(("update", resource_id, payload))
        canned = self._maybe_fail()
        if canned is not None:
            return canned
        for record in self.records:
            if record.get("id") == resource_id:
                record.update(payload.fields)
                return {"success": True, "data": record}
        return {"success": False, "message": "Not found"}

    def remove(self, resource_id):
        self.calls.append(("remove", resource_id))
        canned = self._maybe_fail()
        if canned is not None:
            return canned
        self.records = [r for r in self.records if r.get("id") != resource_id]
        return {"success": True, "message": "Deleted"}

    def options(self, path, params=None):
        self.calls.append(("options", path, params))
        return list(self.option_records.get(path, []))

    def calls_named(self, name):
        return [call for call in self.calls if call[0] == name]


class DeferredRunner(TaskRunner):
    """Queues calls so tests decide when (and in which order) they complete."""

    def __init__(self):
        self.pending = []

    def run(self, target, args=(), kwargs=None, on_success=None, on_error=None, **_ignored):
        self.pending.append((target, args, kwargs or {}, on_success, on_error))

    def complete(self, index=0):
        target, args, kwargs, on_success, on_error = self.pending.pop(index)
        try:
            result = target(*args, **kwargs)
        except Exception as e:
            if on_error:
                on_error(e)
            return
        if on_success:
            on_success(result)

    def complete_all(self):
        while self.pending:
            self.complete()


def make_departments(count):
    return [
        {
            "id": i,
            "department_name": f"Department {i:02d}",
            "short_name": f"D{i:02d}",
            "chairman_name": f"Chair {i}",
            "chairman_email": f"chair{i}@example.edu",
            "journal_publications": i,
            "magazine_publications": 0,
            "professional_body_collaborations": "IEEE, ACM",
            "is_first_year_department": i % 2 == 0,
        }
        for i in range(1, count + 1)
    ]


@pytest.fixture
def immediate_runner():
    return ImmediateTaskRunner()


@pytest.fixture
def department_api():
    """25 departments: three pages of ten."""
    return FakeResourceApi(make_departments(25))


@pytest.fixture
def make_manager(qapp, immediate_runner):
    """Build a ResourceManager over a fake API with synchronous runners."""
    from academic_console.services import ResourceManager

    managers = []

    def factory(schema, api, runner=None):
        manager = ResourceManager(schema, api, runner=runner or immediate_runner)
        managers.append(manager)
        return manager

    yield factory
    for manager in managers:
        manager.teardown()
