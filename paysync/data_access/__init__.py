# paysync/data_access/__init__.py

from .database_manager import DatabaseManager
from .key_value_store import KeyValueStore
from .base_repository import BaseRepository

from .employees_repository import EmployeesRepository
from .payrolls_repository import PayrollsRepository
