# paysync/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .employee_entity import EmployeeEntity
from .payroll_entity import PayrollEntity
from .payroll_summary_entity import PayrollSummary, DepartmentCount, PayrollAmounts

__all__ = [
    "BaseEntity", "EmployeeEntity", "PayrollEntity",
    "PayrollSummary", "DepartmentCount", "PayrollAmounts",
]
