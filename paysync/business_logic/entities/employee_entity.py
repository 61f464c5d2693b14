# paysync/business_logic/entities/employee_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import date
from .base_entity import BaseEntity
from paysync.constants import EmployeeStatus

@dataclass
class EmployeeEntity(BaseEntity):
    first_name: str
    last_name: str
    email: str
    position: str
    department: str
    salary_amount: float # Annual salary
    hire_date: date
    status: EmployeeStatus = field(default=EmployeeStatus.ACTIVE)
    bank_account: Optional[str] = field(default=None)
    tax_id: Optional[str] = field(default=None)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
