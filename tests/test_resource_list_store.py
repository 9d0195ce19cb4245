"""Tests for the resource list store."""

from conftest import DeferredRunner, FakeResourceApi, make_departments


def _store(schema, api, runner):
    from academic_console.services import NotificationController, ResourceListStore

    notifications = NotificationController()
    return ResourceListStore(schema, api, runner, notifications), notifications


def test_fetch_publishes_page(qapp, department_api, immediate_runner):
    """A fetch replaces items and pagination together."""
    from academic_console.resources import DEPARTMENTS

    store, _ = _store(DEPARTMENTS, department_api, immediate_runner)
    pages = []
    loading = []
    store.pagination_changed.connect(pages.append)
    store.loading_changed.connect(loading.append)

    store.fetch(2)
    assert [item["id"] for item in store.items] == list(range(11, 21))
    assert (store.pagination.current_page, store.pagination.total_pages) == (2, 3)
    assert store.pagination.total_count == 25
    assert pages[-1] is store.pagination
    assert loading == [True, False]
    assert department_api.calls == [("list", 2, 10, "", {})]


def test_stale_response_is_dropped(qapp, department_api):
    """A slow earlier fetch cannot overwrite a newer one."""
    from academic_console.resources import DEPARTMENTS

    runner = DeferredRunner()
    store, _ = _store(DEPARTMENTS, department_api, runner)
    store.fetch(1)
    store.fetch(3)

    runner.complete(1)  # page 3 arrives first
    assert [item["id"] for item in store.items] == list(range(21, 26))

    runner.complete(0)  # late page 1 is ignored
    assert [item["id"] for item in store.items] == list(range(21, 26))
    assert store.pagination.current_page == 3
    assert not store.loading


def test_failure_keeps_list_and_notifies(qapp, department_api, immediate_runner):
    """A failed fetch leaves the previous list in place."""
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import ApiError

    store, notifications = _store(DEPARTMENTS, department_api, immediate_runner)
    store.fetch(1)
    before = store.items

    department_api.fail_with = ApiError("Network Error")
    store.fetch(2)
    assert store.items == before
    assert notifications.current.is_error
    assert notifications.current.text == "Failed to fetch departments"
    assert not store.loading


def test_unsuccessful_body_counts_as_failure(qapp, department_api, immediate_runner):
    from academic_console.resources import DEPARTMENTS

    store, notifications = _store(DEPARTMENTS, department_api, immediate_runner)
    department_api.response = {"success": False, "message": "Database unavailable"}
    store.fetch(1)
    assert store.items == []
    assert notifications.current.text == "Failed to fetch departments"


def test_scoped_fetch_uses_synthetic_pagination(qapp, immediate_runner):
    """Choosing a domain lists all of its levels as a single page."""
    from academic_console.resources import BLOOMS_LEVELS

    api = FakeResourceApi([
        {"id": i, "domain_id": 1 if i <= 12 else 2, "level_number": i, "level_name": f"L{i}"}
        for i in range(1, 16)
    ])
    store, _ = _store(BLOOMS_LEVELS, api, immediate_runner)

    store.fetch(1, filters={"domain_id": 1})
    assert api.calls == [("list_scoped", 1)]
    assert len(store.items) == 12
    assert (store.pagination.current_page, store.pagination.total_pages, store.pagination.total_count) == (1, 1, 12)

    store.fetch(1, filters={"domain_id": ""})
    assert api.calls[-1] == ("list", 1, 10, "", {})
    assert store.pagination.total_pages == 2


def test_required_scope_without_value_clears_without_request(qapp, immediate_runner):
    """PEOs need a curriculum before anything is fetched."""
    from academic_console.resources import PEOS

    api = FakeResourceApi([{"id": 1, "peo_number": "PEO1", "curriculum_regulation_id": 3}],
                          scope_field="curriculum_regulation_id")
    store, _ = _store(PEOS, api, immediate_runner)

    store.fetch(1, filters={"curriculum_regulation_id": 3})
    assert len(store.items) == 1

    store.fetch(1, filters={"curriculum_regulation_id": None})
    assert store.items == []
    assert store.pagination.total_count == 0
    assert len(api.calls) == 1


def test_refresh_replays_last_query(qapp, immediate_runner):
    from academic_console.resources import DEPARTMENTS

    api = FakeResourceApi(make_departments(25))
    store, _ = _store(DEPARTMENTS, api, immediate_runner)
    store.fetch(2, search="Department", filters={"status": ""})
    store.refresh()
    assert api.calls == [("list", 2, 10, "Department", {})] * 2


def test_clear_invalidates_inflight_fetch(qapp, department_api):
    from academic_console.resources import DEPARTMENTS

    runner = DeferredRunner()
    store, _ = _store(DEPARTMENTS, department_api, runner)
    store.fetch(1)
    store.clear()
    runner.complete_all()
    assert store.items == []


def test_page_past_the_end_of_empty_list_resets(qapp, immediate_runner):
    """An empty result for page 3 publishes the empty first page instead of 3/1."""
    from academic_console.resources import DEPARTMENTS

    api = FakeResourceApi([])
    store, _ = _store(DEPARTMENTS, api, immediate_runner)
    store.fetch(3)
    assert store.items == []
    assert (store.pagination.current_page, store.pagination.total_pages) == (1, 1)
    assert api.calls_named("list") == [("list", 3, 10, "", {})]
