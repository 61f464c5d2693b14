# paysync/utils/validators.py

import re
from datetime import date
from typing import Any, Dict, Optional, Tuple

from paysync.exceptions import ValidationError
from paysync.utils.date_utils import parse_iso_date

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

REQUIRED_TEXT_FIELDS = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "position": "Position is required",
    "department": "Department is required",
}


def validate_employee_form(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Checks the values entered in the employee form and returns them cleaned
    (text stripped, salary as float, hire date as date, empty optionals as None).
    Raises ValidationError carrying one message per invalid field.
    """
    errors: Dict[str, str] = {}
    cleaned: Dict[str, Any] = dict(data)

    for field_name, message in REQUIRED_TEXT_FIELDS.items():
        value = (data.get(field_name) or "").strip()
        if not value:
            errors[field_name] = message
        cleaned[field_name] = value

    email = (data.get("email") or "").strip()
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(email):
        errors["email"] = "Email is invalid"
    cleaned["email"] = email

    try:
        salary = float(data.get("salary_amount") or 0)
    except (TypeError, ValueError):
        salary = 0.0
    if salary <= 0:
        errors["salary_amount"] = "Please enter a valid salary amount"
    cleaned["salary_amount"] = salary

    hire_date = parse_iso_date(data.get("hire_date"))
    if hire_date is None:
        errors["hire_date"] = "Hire date is required"
    cleaned["hire_date"] = hire_date

    for optional_field in ("bank_account", "tax_id"):
        cleaned[optional_field] = (data.get(optional_field) or "").strip() or None

    if errors:
        raise ValidationError("Please correct the errors in the form", field_errors=errors)
    return cleaned


def validate_pay_period(start: Optional[date], end: Optional[date]) -> Tuple[date, date]:
    if start is None or end is None:
        raise ValidationError("Please select a valid pay period",
                              field_errors={"pay_period": "Start and end dates are required"})
    if end < start:
        raise ValidationError("Pay period end cannot be before its start",
                              field_errors={"pay_period": "End date is before start date"})
    return start, end


def validate_employee_selected(employee_id: Optional[str]) -> str:
    if not employee_id:
        raise ValidationError("Please select an employee", field_errors={"employee_id": "No employee selected"})
    return employee_id
