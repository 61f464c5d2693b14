# paysync/data_access/payrolls_repository.py

from typing import List

from paysync.data_access.base_repository import BaseRepository
from paysync.data_access.key_value_store import KeyValueStore
from paysync.business_logic.entities.payroll_entity import PayrollEntity
from paysync.constants import PAYROLLS_STORAGE_KEY, PayrollStatus
import logging

logger = logging.getLogger(__name__)

class PayrollsRepository(BaseRepository[PayrollEntity]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store=store,
                         model_type=PayrollEntity,
                         storage_key=PAYROLLS_STORAGE_KEY)

    def get_by_employee_id(self, employee_id: str) -> List[PayrollEntity]:
        return self.find_by_criteria({"employee_id": employee_id})

    def get_by_status(self, status: PayrollStatus) -> List[PayrollEntity]:
        return self.find_by_criteria({"status": status})
