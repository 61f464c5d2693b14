# paysync/data_access/employees_repository.py

from typing import List

from paysync.data_access.base_repository import BaseRepository
from paysync.data_access.key_value_store import KeyValueStore
from paysync.business_logic.entities.employee_entity import EmployeeEntity
from paysync.constants import EMPLOYEES_STORAGE_KEY, EmployeeStatus
import logging

logger = logging.getLogger(__name__)

class EmployeesRepository(BaseRepository[EmployeeEntity]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store=store,
                         model_type=EmployeeEntity,
                         storage_key=EMPLOYEES_STORAGE_KEY)

    def get_active_employees(self) -> List[EmployeeEntity]:
        return self.find_by_criteria({"status": EmployeeStatus.ACTIVE})
