# paysync/business_logic/entities/payroll_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import date
from .base_entity import BaseEntity
from paysync.constants import PayrollStatus

@dataclass
class PayrollEntity(BaseEntity):
    employee_id: str # Not enforced: may dangle after the employee is deleted
    employee_name: str # Snapshot of the name when the payroll was created
    pay_period_start: date
    pay_period_end: date
    base_amount: float
    deductions: float
    taxes: float
    net_amount: float # Stored, never recomputed
    status: PayrollStatus = field(default=PayrollStatus.PENDING)
    processed_date: Optional[date] = field(default=None)

    @property
    def is_processed(self) -> bool:
        return self.status == PayrollStatus.PROCESSED
