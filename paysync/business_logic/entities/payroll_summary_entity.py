# paysync/business_logic/entities/payroll_summary_entity.py
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class DepartmentCount:
    name: str
    count: int


@dataclass(frozen=True)
class PayrollAmounts:
    base_amount: float
    taxes: float
    deductions: float
    net_amount: float


@dataclass
class PayrollSummary:
    """Dashboard figures. Derived on demand, never stored."""
    total_employees: int = 0
    total_payroll: float = 0.0
    average_salary: float = 0.0
    pending_payrolls: int = 0
    departments: List[DepartmentCount] = field(default_factory=list)
