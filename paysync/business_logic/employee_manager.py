# paysync/business_logic/employee_manager.py

from typing import Optional, List, Dict, Any
from datetime import date

from paysync.business_logic.entities.employee_entity import EmployeeEntity
from paysync.data_access.employees_repository import EmployeesRepository
from paysync.constants import EmployeeStatus
from paysync.exceptions import StorageError
import logging

logger = logging.getLogger(__name__)

# Demo records used to bootstrap an empty installation.
SAMPLE_EMPLOYEES: List[Dict[str, Any]] = [
    dict(first_name="John", last_name="Doe", email="john.doe@example.com",
         position="Software Engineer", department="Engineering", salary_amount=85000.0,
         hire_date=date(2021, 5, 15), status=EmployeeStatus.ACTIVE,
         bank_account="123456789", tax_id="TX12345"),
    dict(first_name="Jane", last_name="Smith", email="jane.smith@example.com",
         position="Product Manager", department="Product", salary_amount=95000.0,
         hire_date=date(2020, 3, 10), status=EmployeeStatus.ACTIVE,
         bank_account="987654321", tax_id="TX54321"),
    dict(first_name="Michael", last_name="Johnson", email="michael.j@example.com",
         position="UI Designer", department="Design", salary_amount=78000.0,
         hire_date=date(2022, 1, 20), status=EmployeeStatus.ACTIVE,
         bank_account="567891234", tax_id="TX67890"),
    dict(first_name="Emily", last_name="Wilson", email="emily.w@example.com",
         position="Marketing Specialist", department="Marketing", salary_amount=72000.0,
         hire_date=date(2021, 11, 5), status=EmployeeStatus.ACTIVE,
         bank_account="456789123", tax_id="TX11223"),
    dict(first_name="Robert", last_name="Brown", email="robert.b@example.com",
         position="Finance Analyst", department="Finance", salary_amount=82000.0,
         hire_date=date(2020, 8, 15), status=EmployeeStatus.INACTIVE,
         bank_account="789123456", tax_id="TX99887"),
]

class EmployeeManager:
    def __init__(self, employees_repository: EmployeesRepository):
        """
        Initializes the EmployeeManager.
        :param employees_repository: An instance of EmployeesRepository.
        """
        if employees_repository is None: raise ValueError("employees_repository cannot be None")
        self.employees_repository = employees_repository

    def create_employee(self,
                        first_name: str,
                        last_name: str,
                        email: str,
                        position: str,
                        department: str,
                        salary_amount: float,
                        hire_date: date,
                        status: EmployeeStatus = EmployeeStatus.ACTIVE,
                        bank_account: Optional[str] = None,
                        tax_id: Optional[str] = None) -> EmployeeEntity:
        """
        Adds a new employee with a freshly generated id and persists the whole collection.
        Field contents are not validated here; the entry form does that.
        """
        employee_data = EmployeeEntity(
            first_name=first_name,
            last_name=last_name,
            email=email,
            position=position,
            department=department,
            salary_amount=float(salary_amount),
            hire_date=hire_date,
            status=status,
            bank_account=bank_account,
            tax_id=tax_id
        )
        try:
            created = self.employees_repository.add(employee_data)
        except StorageError as e:
            logger.error(f"Error creating employee '{employee_data.full_name}': {e}", exc_info=True)
            raise
        logger.info(f"Employee '{created.full_name}' created with ID {created.id}.")
        return created

    def get_employee(self, employee_id: str) -> Optional[EmployeeEntity]:
        employee = self.employees_repository.get_by_id(employee_id)
        if not employee:
            logger.debug(f"No employee found for ID: {employee_id}")
        return employee

    def list_employees(self, active_only: bool = False) -> List[EmployeeEntity]:
        """Retrieves all employees in stored order, optionally only the active ones."""
        if active_only:
            return self.employees_repository.get_active_employees()
        return self.employees_repository.get_all()

    def get_active_employees(self) -> List[EmployeeEntity]:
        return self.employees_repository.get_active_employees()

    def search_employees(self, term: str = "", active_only: bool = False) -> List[EmployeeEntity]:
        """Case-insensitive match of term against name, position, department and email."""
        employees = self.list_employees(active_only=active_only)
        needle = (term or "").strip().lower()
        if not needle:
            return employees
        return [emp for emp in employees
                if any(needle in (value or "").lower()
                       for value in (emp.first_name, emp.last_name, emp.position, emp.department, emp.email))]

    def update_employee(self,
                        employee_id: str,
                        first_name: Optional[str] = None,
                        last_name: Optional[str] = None,
                        email: Optional[str] = None,
                        position: Optional[str] = None,
                        department: Optional[str] = None,
                        salary_amount: Optional[float] = None,
                        hire_date: Optional[date] = None,
                        status: Optional[EmployeeStatus] = None,
                        bank_account: Optional[str] = None,
                        tax_id: Optional[str] = None) -> EmployeeEntity:
        """
        Overwrites the given fields of an employee; arguments left as None are unchanged.
        Raises NotFoundError if the employee does not exist.
        """
        changes: Dict[str, Any] = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "position": position,
            "department": department,
            "salary_amount": float(salary_amount) if salary_amount is not None else None,
            "hire_date": hire_date,
            "status": status,
            "bank_account": bank_account,
            "tax_id": tax_id,
        }
        changes = {name: value for name, value in changes.items() if value is not None}

        try:
            updated = self.employees_repository.update(employee_id, changes)
        except Exception as e:
            logger.error(f"Error updating employee ID {employee_id}: {e}", exc_info=True)
            raise
        if changes:
            logger.info(f"Employee ID {employee_id} updated. Fields: {sorted(changes)}")
        else:
            logger.info(f"No updates provided for employee ID {employee_id}.")
        return updated

    def set_employee_status(self, employee_id: str, status: EmployeeStatus) -> EmployeeEntity:
        """Sets the active/inactive status of an employee."""
        return self.update_employee(employee_id, status=status)

    def delete_employee(self, employee_id: str) -> bool:
        """
        Removes the employee. Deleting an unknown id is not an error.
        Payroll records referencing the employee are kept.
        """
        logger.warning(f"Deleting employee ID: {employee_id}")
        try:
            return self.employees_repository.delete(employee_id)
        except StorageError as e:
            logger.error(f"Error deleting employee ID {employee_id}: {e}", exc_info=True)
            return False

    def generate_sample_employees(self) -> List[EmployeeEntity]:
        """Replaces the whole employee collection with the demo employees."""
        employees = self.employees_repository.replace_all(
            EmployeeEntity(**employee_data) for employee_data in SAMPLE_EMPLOYEES)
        logger.info(f"{len(employees)} sample employees generated.")
        return employees
