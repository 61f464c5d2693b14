import pytest
from datetime import date

from paysync.constants import EmployeeStatus
from paysync.data_access.database_manager import DatabaseManager
from paysync.data_access.key_value_store import KeyValueStore
from paysync.data_access.employees_repository import EmployeesRepository
from paysync.data_access.payrolls_repository import PayrollsRepository
from paysync.business_logic.employee_manager import EmployeeManager
from paysync.business_logic.payroll_manager import PayrollManager

FIXED_TODAY = date(2024, 3, 18)


@pytest.fixture
def db_manager(tmp_path):
    """Database manager backed by a throwaway sqlite file."""
    manager = DatabaseManager(str(tmp_path / "paysync_test.db"))
    manager.create_tables()
    return manager


@pytest.fixture
def store(db_manager):
    return KeyValueStore(db_manager)


@pytest.fixture
def employees_repository(store):
    return EmployeesRepository(store)


@pytest.fixture
def payrolls_repository(store):
    return PayrollsRepository(store)


@pytest.fixture
def employee_manager(employees_repository):
    return EmployeeManager(employees_repository)


@pytest.fixture
def payroll_manager(payrolls_repository, employee_manager):
    return PayrollManager(payrolls_repository, employee_manager, today_provider=lambda: FIXED_TODAY)


@pytest.fixture
def employee_fields():
    return dict(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        position="Engineer",
        department="Engineering",
        salary_amount=120000.0,
        hire_date=date(2022, 6, 1),
        status=EmployeeStatus.ACTIVE,
        bank_account="000111222",
        tax_id="TX00001",
    )


@pytest.fixture
def make_employee(employee_manager, employee_fields):
    """Creates an employee, overriding any of the default fields."""
    def _make(**overrides):
        return employee_manager.create_employee(**{**employee_fields, **overrides})
    return _make
