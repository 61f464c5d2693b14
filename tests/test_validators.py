import pytest
from datetime import date

from paysync.exceptions import ValidationError
from paysync.utils.validators import validate_employee_form, validate_pay_period, validate_employee_selected


@pytest.fixture
def form_data():
    return {
        "first_name": " Grace ",
        "last_name": "Hopper",
        "email": "grace@example.com",
        "position": "Rear Admiral",
        "department": "Navy",
        "salary_amount": "95000",
        "hire_date": "2021-09-01",
        "bank_account": "",
        "tax_id": "  ",
    }


class TestValidateEmployeeForm:

    def test_valid_form_is_cleaned(self, form_data):
        cleaned = validate_employee_form(form_data)
        assert cleaned["first_name"] == "Grace"
        assert cleaned["salary_amount"] == 95000.0
        assert cleaned["hire_date"] == date(2021, 9, 1)
        assert cleaned["bank_account"] is None
        assert cleaned["tax_id"] is None

    def test_every_missing_field_is_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_form({})
        assert set(exc_info.value.field_errors) == {
            "first_name", "last_name", "email", "position", "department", "salary_amount", "hire_date"
        }

    @pytest.mark.parametrize("email", ["grace", "grace@example", "@example.com", "grace@example .com"])
    def test_invalid_email(self, form_data, email):
        form_data["email"] = email
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_form(form_data)
        assert exc_info.value.field_errors == {"email": "Email is invalid"}

    @pytest.mark.parametrize("salary", ["0", "-10", "abc", None])
    def test_salary_must_be_positive_number(self, form_data, salary):
        form_data["salary_amount"] = salary
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_form(form_data)
        assert list(exc_info.value.field_errors) == ["salary_amount"]

    def test_hire_date_accepts_date_objects(self, form_data):
        form_data["hire_date"] = date(2020, 1, 2)
        assert validate_employee_form(form_data)["hire_date"] == date(2020, 1, 2)

    def test_unparseable_hire_date(self, form_data):
        form_data["hire_date"] = "not a date"
        with pytest.raises(ValidationError) as exc_info:
            validate_employee_form(form_data)
        assert "hire_date" in exc_info.value.field_errors


class TestValidatePayPeriod:

    def test_valid_period(self):
        assert validate_pay_period(date(2024, 3, 1), date(2024, 3, 31)) == (date(2024, 3, 1), date(2024, 3, 31))

    def test_single_day_period(self):
        day = date(2024, 3, 1)
        assert validate_pay_period(day, day) == (day, day)

    @pytest.mark.parametrize("start, end", [(None, date(2024, 3, 31)), (date(2024, 3, 1), None)])
    def test_missing_dates(self, start, end):
        with pytest.raises(ValidationError):
            validate_pay_period(start, end)

    def test_end_before_start(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_pay_period(date(2024, 3, 31), date(2024, 3, 1))
        assert "pay_period" in exc_info.value.field_errors


class TestValidateEmployeeSelected:

    def test_selected(self):
        assert validate_employee_selected("emp-1") == "emp-1"

    @pytest.mark.parametrize("employee_id", [None, ""])
    def test_nothing_selected(self, employee_id):
        with pytest.raises(ValidationError):
            validate_employee_selected(employee_id)
