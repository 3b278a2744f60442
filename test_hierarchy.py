# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for the role hierarchy rules, shift timing and step validators.
Run: pytest test_hierarchy.py -v
"""

import pytest

from hrportal.models.domain import Employee, Role
from hrportal.models.draft import BankAccountDraft, EmployeeDraft
from hrportal.services import hierarchy, shift, validation


def employee(emp_id, role, department_id=2):
    return Employee.model_validate({
        "id": emp_id, "firstName": "E", "lastName": str(emp_id),
        "departmentId": department_id, "role": {"name": role},
    })


# ============================================
# Role rules
# ============================================
class TestRoleRules:
    @pytest.mark.parametrize("name", ["dep_manager", "Department Manager", "department_manager"])
    def test_department_manager_has_neither(self, name):
        assert hierarchy.constraint_for_name(name) == hierarchy.NEITHER

    def test_department_manager_rule_wins_over_manager(self):
        assert hierarchy.matching_rule("department manager") == "department_manager"
        assert hierarchy.matching_rule("Project Manager") == "manager"

    def test_plain_manager_has_both(self):
        assert hierarchy.constraint_for_name("Sales Manager") == hierarchy.BOTH

    @pytest.mark.parametrize("name", ["unit_head", "Unit Head"])
    def test_unit_head_has_manager_only(self, name):
        assert hierarchy.constraint_for_name(name) == hierarchy.MANAGER_ONLY

    @pytest.mark.parametrize("name", ["team_lead", "Team Lead", "teamlead"])
    def test_team_lead_has_manager_only(self, name):
        assert hierarchy.constraint_for_name(name) == hierarchy.MANAGER_ONLY

    def test_other_roles_have_both(self):
        assert hierarchy.constraint_for_name("senior") == hierarchy.BOTH
        assert hierarchy.matching_rule("senior") == hierarchy.DEFAULT_RULE

    def test_unknown_role_id_falls_back(self):
        roles = [Role(id=1, name="dep_manager")]
        assert hierarchy.resolve_constraint(1, roles) == hierarchy.NEITHER
        assert hierarchy.resolve_constraint(99, roles) == hierarchy.NO_ROLE
        assert hierarchy.resolve_constraint(None, roles) == hierarchy.NO_ROLE


# ============================================
# Candidates and assignments
# ============================================
class TestCandidates:
    def test_filters_by_role_and_department(self):
        pool = [
            employee(1, "dep_manager"),
            employee(2, "Department Manager", department_id=3),
            employee(3, "team_lead"),
            employee(4, "junior"),
            employee(5, None),
        ]
        assert [e.id for e in hierarchy.manager_candidates(pool, 2)] == [1]
        assert [e.id for e in hierarchy.team_lead_candidates(pool, 2)] == [3]

    def test_options_follow_constraint(self):
        pool = [employee(1, "dep_manager"), employee(3, "team_lead")]
        options = hierarchy.assignment_options(hierarchy.MANAGER_ONLY, pool, 2)
        assert [e.id for e in options["managers"]] == [1]
        assert options["team_leads"] == []
        assert options["team_lead_enabled"] is False

    def test_clear_disallowed(self):
        assert hierarchy.clear_disallowed(hierarchy.NEITHER, 4, 5) == (None, None)
        assert hierarchy.clear_disallowed(hierarchy.MANAGER_ONLY, 4, 5) == (4, None)
        assert hierarchy.clear_disallowed(hierarchy.BOTH, 4, 5) == (4, 5)

    def test_assignment_errors(self):
        assert hierarchy.assignment_errors(hierarchy.BOTH, None, None) == {
            "managerId": "Required", "teamLeadId": "Required",
        }
        assert hierarchy.assignment_errors(hierarchy.NEITHER, 4, None) == {
            "managerId": "This role cannot have a manager",
        }
        assert hierarchy.assignment_errors(hierarchy.MANAGER_ONLY, 4, None) == {}


# ============================================
# Shift timing
# ============================================
class TestShift:
    @pytest.mark.parametrize("start,end", [
        ("09:00", "17:00"), ("16:00", "00:00"), ("21:30", "05:30"), ("00:00", "08:00"),
    ])
    def test_end_is_start_plus_eight_hours(self, start, end):
        assert shift.derive_shift_end(start) == end

    @pytest.mark.parametrize("value", ["", None, "9:00", "24:00", "12:60", "noon"])
    def test_invalid_start_has_no_end(self, value):
        assert shift.is_valid_time(value) is False
        assert shift.derive_shift_end(value) is None


# ============================================
# Step validators
# ============================================
class TestValidation:
    def test_empty_draft_reports_required_fields(self):
        errors = validation.validate_employee_details(EmployeeDraft(), hierarchy.NO_ROLE)
        for field in ("firstName", "email", "departmentId", "roleId", "managerId",
                      "teamLeadId", "bonus", "passwordHash"):
            assert errors[field] == validation.REQUIRED
        assert "shiftStart" not in errors

    def test_value_checks(self):
        draft = EmployeeDraft(
            email="not-an-email", gender="robot", remote_days_allowed=9,
            bonus=-5, shift_start="7am",
        )
        errors = validation.validate_employee_details(draft, hierarchy.NEITHER)
        assert errors["email"] == "Invalid email"
        assert errors["gender"] == validation.INVALID_VALUE
        assert errors["remoteDaysAllowed"] == "Must be between 0-7"
        assert errors["bonus"] == "Cannot be negative"
        assert errors["shiftStart"] == "Invalid time"
        assert "managerId" not in errors

    def test_department_forms(self):
        assert validation.department_form("Accounts") == "accountant"
        assert validation.department_form(" sales ") == "sales"
        assert validation.department_form("Admin") is None
        assert validation.department_form(None) is None

    def test_sales_section(self):
        draft = EmployeeDraft.model_validate({"departmentData": {"sales": {
            "salesUnitId": 1, "commissionRate": 150, "withholdCommission": -1,
        }}})
        errors = validation.validate_department_details(draft, "Sales")
        assert errors == {
            "commissionRate": "Must be between 0-100",
            "withholdCommission": "Cannot be negative",
            "withholdFlag": validation.REQUIRED,
        }

    @staticmethod
    def sales_draft(**overrides):
        section = {
            "salesUnitId": 1, "commissionRate": 10, "withholdCommission": 0,
            "withholdFlag": False,
        }
        section.update(overrides)
        section = {k: v for k, v in section.items() if v is not None}
        return EmployeeDraft.model_validate({"departmentData": {"sales": section}})

    @pytest.mark.parametrize("rate", [0, 0.5, 100])
    def test_commission_rate_inside_range(self, rate):
        draft = self.sales_draft(commissionRate=rate)
        assert validation.validate_department_details(draft, "Sales") == {}

    @pytest.mark.parametrize("rate", [-1, -0.01, 100.01, 150])
    def test_commission_rate_outside_range(self, rate):
        draft = self.sales_draft(commissionRate=rate)
        errors = validation.validate_department_details(draft, "Sales")
        assert errors == {"commissionRate": "Must be between 0-100"}

    def test_missing_withhold_flag_alone(self):
        draft = self.sales_draft(withholdFlag=None)
        errors = validation.validate_department_details(draft, "Sales")
        assert errors == {"withholdFlag": validation.REQUIRED}

    def test_other_placeholder_needs_detail(self):
        draft = EmployeeDraft.model_validate({"departmentData": {"marketing": {
            "marketingUnitId": 2, "platformFocus": "Other",
        }}})
        errors = validation.validate_department_details(draft, "Marketing")
        assert errors == {"platformFocus": "Please specify"}

    def test_departments_without_required_fields(self):
        draft = EmployeeDraft()
        assert validation.validate_department_details(draft, "HR") == {}
        assert validation.validate_department_details(draft, "Accounts") == {}
        assert validation.validate_department_details(draft, "Admin") == {}

    def test_bank_account_skipped_when_disabled(self):
        assert validation.validate_bank_account(False, BankAccountDraft()) == {}

    def test_bank_account_rules(self):
        account = BankAccountDraft(
            account_title="A", bank_name="HBL", iban_number="PK" + "0" * 30, base_salary=0,
        )
        errors = validation.validate_bank_account(True, account)
        assert errors == {
            "ibanNumber": "Must be at most 24 characters",
            "baseSalary": "Must be greater than 0",
        }

    @pytest.mark.parametrize("salary", [0.01, 1, 250000])
    def test_positive_base_salary_accepted(self, salary):
        account = BankAccountDraft(
            account_title="A", bank_name="HBL", iban_number="PK36SCBL0000001123456702",
            base_salary=salary,
        )
        assert validation.validate_bank_account(True, account) == {}

    @pytest.mark.parametrize("salary", [None, 0, -0.01])
    def test_base_salary_must_be_positive(self, salary):
        account = BankAccountDraft(
            account_title="A", bank_name="HBL", iban_number="PK36SCBL0000001123456702",
            base_salary=salary,
        )
        assert validation.validate_bank_account(True, account) == {
            "baseSalary": "Must be greater than 0",
        }
