"""Tests for the ResourceManager screen state."""

import pytest

from conftest import DeferredRunner, FakeResourceApi, make_departments


def test_load_and_page_through(make_manager, department_api):
    """25 records page as 10/10/5 and out-of-range pages are refused."""
    from academic_console.resources import DEPARTMENTS

    manager = make_manager(DEPARTMENTS, department_api)
    manager.load()
    info = manager.pagination.info
    assert (info.current_page, info.total_pages, info.total_count) == (1, 3, 25)
    assert info.has_next and not info.has_prev

    assert manager.go_to_page(2)
    assert [item["id"] for item in manager.store.items] == list(range(11, 21))
    assert manager.pagination.info.has_prev and manager.pagination.info.has_next

    calls = len(department_api.calls)
    assert not manager.go_to_page(4)
    assert not manager.go_to_page(2)
    assert len(department_api.calls) == calls

    assert manager.pagination.next_page()
    assert len(manager.store.items) == 5
    assert not manager.pagination.info.has_next


def test_search_restarts_from_first_page(make_manager, department_api):
    from academic_console.resources import DEPARTMENTS

    manager = make_manager(DEPARTMENTS, department_api)
    manager.load()
    manager.go_to_page(3)

    manager.search("  chair  ")
    assert department_api.calls[-1] == ("list", 1, 10, "chair", {})
    assert manager.search_text == "chair"
    assert manager.pagination.info.current_page == 1

    manager.go_to_page(2)
    assert department_api.calls[-1] == ("list", 2, 10, "chair", {})

    manager.search("Department 2")
    assert manager.pagination.info.total_count == 6


def test_scope_change_clears_search(make_manager):
    """Switching domain clears the search text and lists that domain's levels."""
    from academic_console.resources import BLOOMS_LEVELS

    api = FakeResourceApi(
        [{"id": i, "domain_id": 1 + i % 2, "level_number": i, "level_name": f"L{i}"} for i in range(1, 7)],
        option_records={"/config/blooms/domains": [
            {"id": 1, "domain_name": "Cognitive", "domain_acronym": "COG"},
            {"id": 2, "domain_name": "Affective", "domain_acronym": "AFF"},
        ]},
    )
    manager = make_manager(BLOOMS_LEVELS, api)
    resets = []
    manager.search_changed.connect(resets.append)
    manager.load()
    manager.search("L1")

    manager.set_scope(2)
    assert resets == [""]
    assert manager.search_text == ""
    assert api.calls[-1] == ("list_scoped", 2)
    assert {item["domain_id"] for item in manager.store.items} == {2}

    manager.set_scope("")
    assert api.calls[-1] == ("list", 1, 10, "", {})


def test_load_options_fills_scope_and_form(make_manager):
    from academic_console.resources import BLOOMS_LEVELS

    api = FakeResourceApi(option_records={"/config/blooms/domains": [
        {"id": 1, "domain_name": "Cognitive", "domain_acronym": "COG"},
    ]})
    manager = make_manager(BLOOMS_LEVELS, api)
    scope_options = []
    field_options = []
    manager.scope_options_changed.connect(scope_options.append)
    manager.field_options_changed.connect(lambda name, options: field_options.append((name, options)))

    manager.load()
    assert ("options", "/config/blooms/domains", {"limit": 100}) in api.calls
    assert scope_options == [[(1, "Cognitive (COG)")]]
    assert field_options == [("domain_id", [(1, "Cognitive (COG)")])]
    assert manager.field_options("domain_id") == [(1, "Cognitive (COG)")]


def test_static_choices_win_over_loaded_options(make_manager):
    from academic_console.resources import PROGRAM_OUTCOMES

    manager = make_manager(PROGRAM_OUTCOMES, FakeResourceApi())
    options = manager.field_options("standard")
    assert ("NBA", "NBA") in options


def test_set_scope_without_scope_raises(make_manager, department_api):
    from academic_console.resources import DEPARTMENTS

    manager = make_manager(DEPARTMENTS, department_api)
    with pytest.raises(ValueError):
        manager.set_scope(1)


def test_pending_fetch_superseded_by_search(make_manager, department_api):
    """Typing while a page is loading shows only the search result."""
    from academic_console.resources import DEPARTMENTS

    runner = DeferredRunner()
    manager = make_manager(DEPARTMENTS, department_api, runner=runner)
    manager.load()
    manager.search("Department 25")
    runner.complete(1)
    runner.complete(0)
    assert [item["id"] for item in manager.store.items] == [25]


def test_deleting_last_record_of_last_page_steps_back(make_manager):
    """Removing the only record on page 3 of 21 lands on page 2 of 2."""
    from academic_console.resources import DEPARTMENTS

    api = FakeResourceApi(make_departments(21))
    manager = make_manager(DEPARTMENTS, api)
    manager.load()
    assert manager.go_to_page(3)
    assert [item["id"] for item in manager.store.items] == [21]

    assert manager.delete(21, confirm=lambda text: True)
    info = manager.pagination.info
    assert (info.current_page, info.total_pages, info.total_count) == (2, 2, 20)
    assert [item["id"] for item in manager.store.items] == list(range(11, 21))
    assert api.calls_named("list")[-1] == ("list", 2, 10, "", {})
