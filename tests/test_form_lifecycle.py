"""Tests for the add/edit form lifecycle."""

from conftest import DeferredRunner, FakeResourceApi


def _fill_department(manager, name="Civil Engineering", short="CE"):
    manager.set_field("department_name", name)
    manager.set_field("short_name", short)


def test_invalid_submit_sends_nothing(make_manager, department_api):
    """Missing required fields block the request and raise a single error."""
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import FormMode

    manager = make_manager(DEPARTMENTS, department_api)
    manager.load()
    notifications = []
    manager.notifications.notification_changed.connect(notifications.append)

    assert manager.open_add()
    assert not manager.submit()

    assert department_api.calls_named("create") == []
    assert manager.form.mode is FormMode.ADD
    assert manager.form.field_errors["department_name"] == "Department name is required"
    errors = [n for n in notifications if n is not None]
    assert len(errors) == 1
    assert errors[0].text == "Department name is required"


def test_editing_field_clears_its_error(make_manager, department_api):
    from academic_console.resources import DEPARTMENTS

    manager = make_manager(DEPARTMENTS, department_api)
    manager.open_add()
    manager.submit()
    assert {"department_name", "short_name"} <= set(manager.form.field_errors)

    manager.set_field("department_name", "Physics")
    assert "department_name" not in manager.form.field_errors
    assert "short_name" in manager.form.field_errors
    assert manager.notifications.current is None


def test_successful_create_closes_and_refetches(make_manager, department_api):
    """Saving posts the payload, announces success and reloads the page."""
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import FormMode

    manager = make_manager(DEPARTMENTS, department_api)
    manager.load()
    list_calls = len(department_api.calls_named("list"))

    manager.open_add()
    _fill_department(manager)
    manager.set_field("professional_body_collaborations", ["IEEE", "ACM"])
    assert manager.submit()

    (_, payload), = department_api.calls_named("create")
    assert payload.fields["department_name"] == "Civil Engineering"
    assert payload.fields["professional_body_collaborations"] == ["IEEE", "ACM"]
    assert payload.fields["journal_publications"] == 0
    assert manager.form.mode is FormMode.CLOSED
    assert manager.notifications.current.text == "Department created successfully!"
    assert len(department_api.calls_named("list")) == list_calls + 1
    assert manager.store.pagination.total_count == 26


def test_failed_create_returns_to_add_mode(make_manager, department_api):
    """Backend validation errors are shown and the draft is kept."""
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import ApiError, FormMode

    manager = make_manager(DEPARTMENTS, department_api)
    manager.open_add()
    _fill_department(manager)
    department_api.fail_with = ApiError(
        "Request failed with status code 400", status=400,
        payload={"success": False, "errors": [{"msg": "Short name already exists"}]},
    )
    assert manager.submit()

    assert manager.form.mode is FormMode.ADD
    assert manager.form.draft["short_name"] == "CE"
    assert manager.notifications.current.text == "Validation errors: Short name already exists"


def test_submit_is_not_reentrant(make_manager, department_api):
    """A second submit while saving is ignored, as is cancel."""
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import FormMode

    runner = DeferredRunner()
    manager = make_manager(DEPARTMENTS, department_api, runner=runner)
    saving = []
    manager.form.saving_changed.connect(saving.append)

    manager.open_add()
    _fill_department(manager)
    assert manager.submit()
    assert manager.form.mode is FormMode.SUBMITTING
    assert not manager.submit()
    assert not manager.cancel()
    assert len(runner.pending) == 1

    runner.complete()
    assert manager.form.mode is FormMode.CLOSED
    assert saving == [True, False]
    assert len(department_api.calls_named("create")) == 1


def test_edit_draft_is_a_copy(make_manager, department_api):
    """The edited record is never mutated; update goes to its id."""
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import FormMode

    manager = make_manager(DEPARTMENTS, department_api)
    manager.load()
    record = manager.store.items[0]
    original = dict(record)

    manager.open_edit(record)
    assert manager.form.mode is FormMode.EDIT
    assert manager.form.draft["professional_body_collaborations"] == ["IEEE", "ACM"]

    manager.set_field("department_name", "Renamed")
    assert record == original

    assert manager.submit()
    (_, resource_id, payload), = department_api.calls_named("update")
    assert resource_id == record["id"]
    assert payload.fields["department_name"] == "Renamed"
    assert manager.notifications.current.text == "Department updated successfully!"


def test_cancel_discards_draft(make_manager, department_api):
    from academic_console.resources import DEPARTMENTS
    from academic_console.services import FormMode

    manager = make_manager(DEPARTMENTS, department_api)
    manager.open_add()
    manager.set_field("department_name", "Temporary")
    assert manager.cancel()
    assert manager.form.mode is FormMode.CLOSED
    assert manager.form.draft == {}

    manager.set_field("department_name", "Ignored")
    assert manager.form.draft == {}


def test_required_scope_blocks_add(make_manager):
    """PEOs cannot be added before a curriculum regulation is chosen."""
    from academic_console.resources import PEOS
    from academic_console.services import FormMode

    api = FakeResourceApi(
        [{"id": 1, "peo_number": "PEO1", "curriculum_regulation_id": 3}],
        scope_field="curriculum_regulation_id",
    )
    manager = make_manager(PEOS, api)

    assert not manager.open_add()
    assert manager.form.mode is FormMode.CLOSED
    assert manager.notifications.current.text == "Please select a curriculum regulation first"

    manager.set_scope(3)
    assert manager.open_add()
    assert manager.form.draft["curriculum_regulation_id"] == 3


def test_duplicate_in_same_scope_is_rejected(make_manager):
    from academic_console.resources import PEOS

    api = FakeResourceApi(
        [{"id": 1, "peo_number": "PEO1", "curriculum_regulation_id": 3}],
        scope_field="curriculum_regulation_id",
    )
    manager = make_manager(PEOS, api)
    manager.set_scope(3)
    manager.open_add()
    manager.set_field("peo_number", "peo1")
    manager.set_field("peo_title", "Professional practice")
    manager.set_field("peo_description", "Graduates practice engineering ethically.")
    manager.set_field("peo_statement", "Graduates will practice engineering ethically.")

    assert not manager.submit()
    assert manager.notifications.current.text == (
        "A PEO with this number already exists for this curriculum regulation"
    )
    assert api.calls_named("create") == []
