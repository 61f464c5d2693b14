# paysync/business_logic/payroll_manager.py

from typing import Optional, List, Dict, Any, Callable
from datetime import date

from paysync.business_logic.entities.payroll_entity import PayrollEntity
from paysync.business_logic.entities.payroll_summary_entity import PayrollSummary, DepartmentCount, PayrollAmounts
from paysync.business_logic.employee_manager import EmployeeManager
from paysync.data_access.payrolls_repository import PayrollsRepository
from paysync.constants import (
    PayrollStatus, MONTHS_PER_YEAR, TAX_RATE, DEDUCTION_RATE,
    SAMPLE_PAYROLL_MONTHS, SAMPLE_PROCESSED_DAY
)
from paysync.exceptions import NotFoundError, StorageError
from paysync.utils.date_utils import shift_month, month_bounds, is_same_month
import logging

logger = logging.getLogger(__name__)


def calculate_payroll_amounts(salary_amount: float) -> PayrollAmounts:
    """
    Monthly installment of an annual salary with flat tax and deduction rates.
    No rounding is applied.
    """
    base_amount = salary_amount / MONTHS_PER_YEAR
    taxes = base_amount * TAX_RATE
    deductions = base_amount * DEDUCTION_RATE
    net_amount = base_amount - taxes - deductions
    return PayrollAmounts(base_amount=base_amount, taxes=taxes, deductions=deductions, net_amount=net_amount)


class PayrollManager:
    def __init__(self,
                 payrolls_repository: PayrollsRepository,
                 employee_manager: EmployeeManager,
                 today_provider: Callable[[], date] = date.today):

        if payrolls_repository is None: raise ValueError("payrolls_repository cannot be None")
        if employee_manager is None: raise ValueError("employee_manager cannot be None")

        self.payrolls_repository = payrolls_repository
        self.employee_manager = employee_manager
        self.today_provider = today_provider

    # --- CRUD ---

    def list_payrolls(self) -> List[PayrollEntity]:
        return self.payrolls_repository.get_all()

    def get_payroll(self, payroll_id: str) -> Optional[PayrollEntity]:
        return self.payrolls_repository.get_by_id(payroll_id)

    def get_payrolls_for_employee(self, employee_id: str) -> List[PayrollEntity]:
        return self.payrolls_repository.get_by_employee_id(employee_id)

    def get_payrolls_by_status(self, status: PayrollStatus) -> List[PayrollEntity]:
        return self.payrolls_repository.get_by_status(status)

    def search_payrolls(self, term: str = "", status: Optional[PayrollStatus] = None) -> List[PayrollEntity]:
        """Case-insensitive match on employee name or record id, optionally limited to one status."""
        payrolls = self.get_payrolls_by_status(status) if status is not None else self.list_payrolls()
        needle = (term or "").strip().lower()
        if not needle:
            return payrolls
        return [p for p in payrolls
                if needle in p.employee_name.lower() or needle in (p.id or "").lower()]

    def create_payroll(self,
                       employee_id: str,
                       employee_name: str,
                       pay_period_start: date,
                       pay_period_end: date,
                       base_amount: float,
                       deductions: float,
                       taxes: float,
                       net_amount: float,
                       status: PayrollStatus = PayrollStatus.PENDING,
                       processed_date: Optional[date] = None) -> PayrollEntity:
        """Stores a payroll record as given. Amounts are not cross-checked."""
        payroll_entity = PayrollEntity(
            employee_id=employee_id,
            employee_name=employee_name,
            pay_period_start=pay_period_start,
            pay_period_end=pay_period_end,
            base_amount=base_amount,
            deductions=deductions,
            taxes=taxes,
            net_amount=net_amount,
            status=status,
            processed_date=processed_date
        )
        try:
            created_payroll = self.payrolls_repository.add(payroll_entity)
        except StorageError as e:
            logger.error(f"Error creating payroll for employee ID {employee_id}: {e}", exc_info=True)
            raise
        logger.info(f"Payroll ID {created_payroll.id} created for employee ID {employee_id} "
                    f"({pay_period_start} to {pay_period_end}), status {created_payroll.status.value}.")
        return created_payroll

    def update_payroll(self,
                       payroll_id: str,
                       employee_id: Optional[str] = None,
                       employee_name: Optional[str] = None,
                       pay_period_start: Optional[date] = None,
                       pay_period_end: Optional[date] = None,
                       base_amount: Optional[float] = None,
                       deductions: Optional[float] = None,
                       taxes: Optional[float] = None,
                       net_amount: Optional[float] = None,
                       status: Optional[PayrollStatus] = None,
                       processed_date: Optional[date] = None) -> PayrollEntity:
        """
        Overwrites the given fields; arguments left as None are unchanged.
        Changing an amount does not recompute the others.
        """
        changes: Dict[str, Any] = {
            "employee_id": employee_id,
            "employee_name": employee_name,
            "pay_period_start": pay_period_start,
            "pay_period_end": pay_period_end,
            "base_amount": base_amount,
            "deductions": deductions,
            "taxes": taxes,
            "net_amount": net_amount,
            "status": status,
            "processed_date": processed_date,
        }
        changes = {name: value for name, value in changes.items() if value is not None}
        try:
            updated = self.payrolls_repository.update(payroll_id, changes)
        except Exception as e:
            logger.error(f"Error updating payroll ID {payroll_id}: {e}", exc_info=True)
            raise
        logger.info(f"Payroll ID {payroll_id} updated. Fields: {sorted(changes)}")
        return updated

    def set_payroll_status(self, payroll_id: str, status: PayrollStatus) -> PayrollEntity:
        return self.update_payroll(payroll_id, status=status)

    def delete_payroll(self, payroll_id: str) -> bool:
        """Removes the record. Deleting an unknown id is not an error."""
        try:
            return self.payrolls_repository.delete(payroll_id)
        except StorageError as e:
            logger.error(f"Error deleting payroll ID {payroll_id}: {e}", exc_info=True)
            return False

    # --- processing ---

    def process_payroll(self, employee_id: str, pay_period_start: date, pay_period_end: date) -> PayrollEntity:
        """
        Computes a payroll from the employee's current salary and stores it as processed today.
        Running it twice for the same period creates two records.
        """
        employee = self.employee_manager.get_employee(employee_id)
        if not employee:
            logger.error(f"Cannot process payroll: employee ID {employee_id} not found.")
            raise NotFoundError(f"Employee with id '{employee_id}' not found.", entity_id=employee_id)
        if not employee.is_active:
            logger.warning(f"Processing payroll for inactive employee ID {employee_id}.")

        amounts = calculate_payroll_amounts(employee.salary_amount)
        payroll = self.create_payroll(
            employee_id=employee_id,
            employee_name=employee.full_name,
            pay_period_start=pay_period_start,
            pay_period_end=pay_period_end,
            base_amount=amounts.base_amount,
            deductions=amounts.deductions,
            taxes=amounts.taxes,
            net_amount=amounts.net_amount,
            status=PayrollStatus.PROCESSED,
            processed_date=self.today_provider()
        )
        logger.info(f"Payroll processed for '{employee.full_name}'. Net: {amounts.net_amount:.2f}")
        return payroll

    # --- reporting ---

    def get_payroll_summary(self) -> PayrollSummary:
        """Dashboard aggregates, recomputed from both collections on every call."""
        active_employees = self.employee_manager.get_active_employees()
        payrolls = self.list_payrolls()
        today = self.today_provider()

        total_salary = sum(emp.salary_amount for emp in active_employees)
        average_salary = total_salary / len(active_employees) if active_employees else 0.0

        pending_payrolls = sum(1 for p in payrolls if p.status == PayrollStatus.PENDING)

        department_counts: Dict[str, int] = {}
        for emp in active_employees:
            department_counts[emp.department] = department_counts.get(emp.department, 0) + 1

        total_payroll = sum((p.net_amount for p in payrolls
                             if p.is_processed and is_same_month(p.processed_date, today)), 0.0)

        return PayrollSummary(
            total_employees=len(active_employees),
            total_payroll=total_payroll,
            average_salary=average_salary,
            pending_payrolls=pending_payrolls,
            departments=[DepartmentCount(name=name, count=count) for name, count in department_counts.items()]
        )

    # --- demo data ---

    def generate_sample_payrolls(self) -> List[PayrollEntity]:
        """
        Replaces all payroll records with processed payrolls for the current month and
        the months before it, one per active employee per month.
        Raises NotFoundError and leaves the records untouched when there are no employees.
        """
        employees = self.employee_manager.list_employees()
        if not employees:
            logger.error("Cannot generate sample payrolls: no employees found.")
            raise NotFoundError("No employees found. Please add employees first.")

        today = self.today_provider()
        active_employees = [emp for emp in employees if emp.is_active]
        sample_payrolls: List[PayrollEntity] = []

        for months_back in range(SAMPLE_PAYROLL_MONTHS):
            year, month = shift_month(today.year, today.month, -months_back)
            period_start, period_end = month_bounds(year, month)
            processed_year, processed_month = shift_month(year, month, 1)
            processed_date = date(processed_year, processed_month, SAMPLE_PROCESSED_DAY)

            for emp in active_employees:
                amounts = calculate_payroll_amounts(emp.salary_amount)
                sample_payrolls.append(PayrollEntity(
                    employee_id=emp.id,
                    employee_name=emp.full_name,
                    pay_period_start=period_start,
                    pay_period_end=period_end,
                    base_amount=amounts.base_amount,
                    deductions=amounts.deductions,
                    taxes=amounts.taxes,
                    net_amount=amounts.net_amount,
                    status=PayrollStatus.PROCESSED,
                    processed_date=processed_date
                ))

        created = self.payrolls_repository.replace_all(sample_payrolls)
        logger.info(f"{len(created)} sample payrolls generated for {len(active_employees)} active employees.")
        return created
