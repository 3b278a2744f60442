# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Role hierarchy rules. Pure computation, no side effects.

A role name maps to a ``HierarchyConstraint`` through an ordered rule table;
the first matching pattern wins. Whatever a role *may* report to it *must*
report to, so the constraint doubles as the required-field set.
"""

import re
from typing import Dict, Iterable, List, Optional, Pattern, Sequence, Tuple

from hrportal.models.domain import Employee, HierarchyConstraint, Role

BOTH = HierarchyConstraint(can_have_manager=True, can_have_team_lead=True)
NEITHER = HierarchyConstraint(can_have_manager=False, can_have_team_lead=False)
MANAGER_ONLY = HierarchyConstraint(can_have_manager=True, can_have_team_lead=False)

# Order matters: "department manager" must be tested before plain "manager".
RULES: Tuple[Tuple[str, Pattern[str], HierarchyConstraint], ...] = (
    ("department_manager", re.compile(r"department[ _]?manager|dep_manager"), NEITHER),
    ("manager", re.compile(r"manager"), BOTH),
    ("unit_head", re.compile(r"unit[ _]head"), MANAGER_ONLY),
    ("team_lead", re.compile(r"team[ _]?lead"), MANAGER_ONLY),
)
DEFAULT_RULE = "default"

# No role picked yet: both fields stay required until one is.
NO_ROLE = BOTH

MANAGER_ROLE_NAMES = ("dept_manager", "department manager", "department_manager", "dep_manager")
TEAM_LEAD_ROLE_NAMES = ("team_lead", "teamlead", "team_leads", "team lead")


def _normalise(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def matching_rule(role_name: Optional[str]) -> str:
    """Name of the rule that decides ``role_name``."""
    name = _normalise(role_name)
    for rule_name, pattern, _ in RULES:
        if pattern.search(name):
            return rule_name
    return DEFAULT_RULE


def constraint_for_name(role_name: Optional[str]) -> HierarchyConstraint:
    name = _normalise(role_name)
    for _, pattern, constraint in RULES:
        if pattern.search(name):
            return constraint
    return BOTH


def find_role(role_id: Optional[int], roles: Iterable[Role]) -> Optional[Role]:
    if role_id is None:
        return None
    for role in roles:
        if role.id == role_id:
            return role
    return None


def resolve_constraint(role_id: Optional[int], roles: Iterable[Role]) -> HierarchyConstraint:
    """Constraint for a selected role id; an unknown or missing id yields ``NO_ROLE``."""
    role = find_role(role_id, roles)
    if role is None:
        return NO_ROLE
    return constraint_for_name(role.name)


# ── Candidates ──

def _role_matches(role_name: str, accepted: Sequence[str]) -> bool:
    name = _normalise(role_name)
    if not name:
        return False
    return any(name == a or a in name for a in accepted)


def _in_department(employee: Employee, department_id: Optional[int]) -> bool:
    return department_id is None or employee.department_id == department_id


def manager_candidates(employees: Iterable[Employee],
                       department_id: Optional[int]) -> List[Employee]:
    return [
        e for e in employees
        if _in_department(e, department_id) and _role_matches(e.role_name, MANAGER_ROLE_NAMES)
    ]


def team_lead_candidates(employees: Iterable[Employee],
                         department_id: Optional[int]) -> List[Employee]:
    return [
        e for e in employees
        if _in_department(e, department_id) and _role_matches(e.role_name, TEAM_LEAD_ROLE_NAMES)
    ]


def assignment_options(
    constraint: HierarchyConstraint,
    employees: Sequence[Employee],
    department_id: Optional[int],
) -> Dict[str, object]:
    """Dropdown contents for the manager / team lead selects.

    A list the constraint disallows is empty and its field disabled.
    """
    managers = manager_candidates(employees, department_id) if constraint.can_have_manager else []
    team_leads = (
        team_lead_candidates(employees, department_id) if constraint.can_have_team_lead else []
    )
    return {
        "managers": managers,
        "team_leads": team_leads,
        "manager_enabled": constraint.can_have_manager,
        "team_lead_enabled": constraint.can_have_team_lead,
    }


def clear_disallowed(
    constraint: HierarchyConstraint,
    manager_id: Optional[int],
    team_lead_id: Optional[int],
) -> Tuple[Optional[int], Optional[int]]:
    return (
        manager_id if constraint.can_have_manager else None,
        team_lead_id if constraint.can_have_team_lead else None,
    )


def assignment_errors(
    constraint: HierarchyConstraint,
    manager_id: Optional[int],
    team_lead_id: Optional[int],
) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if constraint.can_have_manager:
        if manager_id is None:
            errors["managerId"] = "Required"
    elif manager_id is not None:
        errors["managerId"] = "This role cannot have a manager"
    if constraint.can_have_team_lead:
        if team_lead_id is None:
            errors["teamLeadId"] = "Required"
    elif team_lead_id is not None:
        errors["teamLeadId"] = "This role cannot have a team lead"
    return errors
