# paysync/constants.py

from enum import Enum

# General
DATE_FORMAT = "%Y-%m-%d"

# Keys of the two JSON collections in the key-value store
EMPLOYEES_STORAGE_KEY = "payroll_employees"
PAYROLLS_STORAGE_KEY = "payroll_records"

# Payroll formula (flat rates, no brackets)
MONTHS_PER_YEAR = 12
TAX_RATE = 0.20
DEDUCTION_RATE = 0.05

# Sample data
SAMPLE_PAYROLL_MONTHS = 3  # current month and the two before it
SAMPLE_PROCESSED_DAY = 5   # processed on the 5th of the following month


class EmployeeStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PayrollStatus(Enum):
    PENDING = "pending"
    PROCESSED = "processed"
    CANCELLED = "cancelled"


# Intended REST surface for a future backend. Not called anywhere yet.
API_BASE_PATH = "/api"
API_ENDPOINTS = {
    "employees": f"{API_BASE_PATH}/employees",
    "employee": f"{API_BASE_PATH}/employees/{{id}}",
    "payrolls": f"{API_BASE_PATH}/payrolls",
    "payroll": f"{API_BASE_PATH}/payrolls/{{id}}",
    "employee_payrolls": f"{API_BASE_PATH}/employees/{{id}}/payrolls",
    "process_payroll": f"{API_BASE_PATH}/process-payroll",
    "payroll_summary": f"{API_BASE_PATH}/payroll-summary",
}


def api_endpoint(name: str, **params) -> str:
    """Returns the path of a named endpoint with its placeholders filled in."""
    if name not in API_ENDPOINTS:
        raise KeyError(f"Unknown API endpoint '{name}'")
    return API_ENDPOINTS[name].format(**params)
