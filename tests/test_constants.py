import pytest

from paysync.constants import API_ENDPOINTS, api_endpoint, EmployeeStatus, PayrollStatus


class TestApiEndpoints:

    def test_collection_paths(self):
        assert api_endpoint("employees") == "/api/employees"
        assert api_endpoint("process_payroll") == "/api/process-payroll"
        assert api_endpoint("payroll_summary") == "/api/payroll-summary"

    def test_placeholders_are_filled(self):
        assert api_endpoint("employee", id="e1") == "/api/employees/e1"
        assert api_endpoint("employee_payrolls", id="e1") == "/api/employees/e1/payrolls"
        assert api_endpoint("payroll", id="p9") == "/api/payrolls/p9"

    def test_raw_templates_keep_placeholders(self):
        assert API_ENDPOINTS["payroll"] == "/api/payrolls/{id}"

    def test_unknown_endpoint(self):
        with pytest.raises(KeyError):
            api_endpoint("invoices")


class TestStatuses:

    def test_stored_values(self):
        assert [s.value for s in EmployeeStatus] == ["active", "inactive"]
        assert [s.value for s in PayrollStatus] == ["pending", "processed", "cancelled"]
