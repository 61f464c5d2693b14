import pytest
from datetime import date

from paysync.business_logic.employee_manager import EmployeeManager, SAMPLE_EMPLOYEES
from paysync.business_logic.entities.employee_entity import EmployeeEntity
from paysync.constants import EmployeeStatus, EMPLOYEES_STORAGE_KEY
from paysync.exceptions import NotFoundError, StorageError


class TestCreateAndRead:

    def test_list_is_empty_on_first_run(self, employee_manager):
        assert employee_manager.list_employees() == []

    def test_create_assigns_id_and_keeps_fields(self, employee_manager, employee_fields):
        created = employee_manager.create_employee(**employee_fields)

        assert created.id
        fetched = employee_manager.get_employee(created.id)
        assert fetched == created
        for name, value in employee_fields.items():
            assert getattr(fetched, name) == value

    def test_created_employee_matches_stored_record(self, employee_manager, employee_fields):
        employee_fields.update(hire_date="2022-06-01", status="active")

        created = employee_manager.create_employee(**employee_fields)

        assert created == employee_manager.get_employee(created.id)
        assert created.hire_date == date(2022, 6, 1)
        assert created.status == EmployeeStatus.ACTIVE
        assert created.is_active

    def test_string_status_is_stored_as_enum(self, make_employee):
        assert make_employee(status="inactive").status == EmployeeStatus.INACTIVE

    def test_ids_are_unique(self, make_employee):
        ids = {make_employee(first_name=f"Emp{i}").id for i in range(5)}
        assert len(ids) == 5

    def test_get_unknown_employee_returns_none(self, employee_manager):
        assert employee_manager.get_employee("missing") is None

    def test_list_preserves_creation_order(self, employee_manager, make_employee):
        first = make_employee(first_name="First")
        second = make_employee(first_name="Second")
        assert [e.id for e in employee_manager.list_employees()] == [first.id, second.id]

    def test_stored_layout_uses_camel_case_keys(self, store, make_employee):
        created = make_employee()
        [record] = store.read(EMPLOYEES_STORAGE_KEY)
        assert record == {
            "id": created.id,
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "position": "Engineer",
            "department": "Engineering",
            "salaryAmount": 120000.0,
            "hireDate": "2022-06-01",
            "status": "active",
            "bankAccount": "000111222",
            "taxId": "TX00001",
        }

    def test_reads_records_without_optional_fields(self, store, employee_manager):
        store.write(EMPLOYEES_STORAGE_KEY, [{
            "id": "legacy-1", "firstName": "Old", "lastName": "Record", "email": "old@example.com",
            "position": "Clerk", "department": "Ops", "salaryAmount": 50000,
            "hireDate": "2019-01-02", "status": "inactive",
        }])
        employee = employee_manager.get_employee("legacy-1")
        assert employee.bank_account is None
        assert employee.tax_id is None
        assert employee.salary_amount == 50000.0
        assert employee.status == EmployeeStatus.INACTIVE
        assert employee.hire_date == date(2019, 1, 2)

    def test_record_missing_required_field_is_a_storage_error(self, store, employee_manager):
        store.write(EMPLOYEES_STORAGE_KEY, [{"id": "broken", "firstName": "No"}])
        with pytest.raises(StorageError):
            employee_manager.list_employees()

    def test_create_failure_leaves_collection_unchanged(self, employee_manager, make_employee, monkeypatch):
        existing = make_employee()

        def failing_write(key, document):
            raise StorageError("quota exceeded", key=key)

        monkeypatch.setattr(employee_manager.employees_repository.store, "write", failing_write)
        with pytest.raises(StorageError):
            make_employee(first_name="Second")
        monkeypatch.undo()

        assert [e.id for e in employee_manager.list_employees()] == [existing.id]

    def test_requires_repository(self):
        with pytest.raises(ValueError):
            EmployeeManager(None)


class TestUpdate:

    def test_update_overwrites_only_given_fields(self, employee_manager, make_employee):
        original = make_employee()

        updated = employee_manager.update_employee(original.id, position="Lead Engineer", salary_amount=130000)

        assert updated.position == "Lead Engineer"
        assert updated.salary_amount == 130000.0
        assert updated.first_name == original.first_name
        assert updated.email == original.email
        assert updated.hire_date == original.hire_date
        assert updated.id == original.id
        assert employee_manager.get_employee(original.id) == updated

    def test_update_with_no_fields_returns_current_record(self, employee_manager, make_employee):
        original = make_employee()
        assert employee_manager.update_employee(original.id) == original

    def test_update_unknown_id_raises_not_found(self, employee_manager, make_employee):
        make_employee()
        before = employee_manager.list_employees()

        with pytest.raises(NotFoundError) as exc_info:
            employee_manager.update_employee("missing", first_name="Ghost")

        assert exc_info.value.entity_id == "missing"
        assert employee_manager.list_employees() == before

    def test_set_employee_status(self, employee_manager, make_employee):
        employee = make_employee()
        updated = employee_manager.set_employee_status(employee.id, EmployeeStatus.INACTIVE)
        assert updated.status == EmployeeStatus.INACTIVE
        assert employee_manager.get_active_employees() == []

    def test_optional_field_can_be_cleared_with_empty_string(self, employee_manager, make_employee):
        employee = make_employee()
        updated = employee_manager.update_employee(employee.id, bank_account="")
        assert updated.bank_account == ""
        assert updated.tax_id == "TX00001"


class TestDelete:

    def test_delete_removes_exactly_one_record(self, employee_manager, make_employee):
        keep = make_employee(first_name="Keep")
        drop = make_employee(first_name="Drop")

        assert employee_manager.delete_employee(drop.id) is True

        assert employee_manager.get_employee(drop.id) is None
        assert employee_manager.list_employees() == [keep]

    def test_delete_unknown_id_succeeds_without_changes(self, employee_manager, make_employee):
        make_employee()
        before = employee_manager.list_employees()

        assert employee_manager.delete_employee("missing") is True
        assert employee_manager.list_employees() == before

    def test_delete_twice_is_idempotent(self, employee_manager, make_employee):
        employee = make_employee()
        assert employee_manager.delete_employee(employee.id) is True
        assert employee_manager.delete_employee(employee.id) is True
        assert employee_manager.list_employees() == []

    def test_delete_reports_storage_failure(self, employee_manager, make_employee, monkeypatch):
        employee = make_employee()

        def failing_write(key, document):
            raise StorageError("disk full", key=key)

        monkeypatch.setattr(employee_manager.employees_repository.store, "write", failing_write)
        assert employee_manager.delete_employee(employee.id) is False


class TestQueries:

    def test_active_only_filter(self, employee_manager, make_employee):
        active = make_employee(first_name="Active")
        make_employee(first_name="Gone", status=EmployeeStatus.INACTIVE)

        assert employee_manager.list_employees(active_only=True) == [active]
        assert len(employee_manager.list_employees()) == 2

    @pytest.mark.parametrize("term", ["ada", "LOVELACE", "engineer", "engin", "@example"])
    def test_search_matches_text_fields_case_insensitively(self, employee_manager, make_employee, term):
        employee = make_employee()
        make_employee(first_name="Grace", last_name="Hopper", email="grace@navy.mil",
                      position="Admiral", department="Navy")

        assert employee in employee_manager.search_employees(term)

    def test_search_without_match(self, employee_manager, make_employee):
        make_employee()
        assert employee_manager.search_employees("zzz") == []

    def test_blank_search_returns_everything(self, employee_manager, make_employee):
        make_employee()
        make_employee(first_name="Other")
        assert len(employee_manager.search_employees("   ")) == 2


class TestSampleEmployees:

    def test_generates_fixed_demo_employees(self, employee_manager):
        employees = employee_manager.generate_sample_employees()

        assert [e.full_name for e in employees] == [
            "John Doe", "Jane Smith", "Michael Johnson", "Emily Wilson", "Robert Brown"]
        assert len({e.id for e in employees}) == len(SAMPLE_EMPLOYEES)
        assert [e.full_name for e in employee_manager.get_active_employees()] == [
            "John Doe", "Jane Smith", "Michael Johnson", "Emily Wilson"]

    def test_replaces_existing_employees(self, employee_manager, make_employee):
        existing = make_employee()
        employee_manager.generate_sample_employees()

        assert employee_manager.get_employee(existing.id) is None
        assert len(employee_manager.list_employees()) == 5
        assert all(isinstance(e, EmployeeEntity) for e in employee_manager.list_employees())
