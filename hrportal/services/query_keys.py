# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Cache key builders. Keys are tuples so a prefix selects a whole resource."""

from typing import Any, Dict, Optional, Tuple

EMPLOYEES = ("hr", "employees")
HR_STATISTICS = ("hr", "statistics")
DEPARTMENTS = ("departments",)
ROLES = ("roles",)
CLIENTS = ("clients",)
CLIENT_STATS = ("clients", "stats")
PROJECTS = ("production", "projects")
REQUESTS = ("requests",)
ACCESS_LOGS = ("logs", "access")
ACCESS_LOG_STATS = ("logs", "access", "stats")


def freeze(params: Optional[Dict[str, Any]]) -> Tuple[Tuple[str, Any], ...]:
    """Hashable, order-independent form of a filter dict, unset values dropped."""
    if not params:
        return ()
    return tuple(sorted(
        (k, v) for k, v in params.items() if v is not None and v != ""
    ))


def employee_list(params: Optional[Dict[str, Any]]) -> tuple:
    return (*EMPLOYEES, "list", freeze(params))


def employee_detail(employee_id: int) -> tuple:
    return (*EMPLOYEES, "detail", employee_id)


def candidate_pool(department_id: int) -> tuple:
    return (*EMPLOYEES, "candidates", department_id)


def department_units(department_id: int) -> tuple:
    return (*DEPARTMENTS, department_id, "units")


def client_list(params: Optional[Dict[str, Any]]) -> tuple:
    return (*CLIENTS, "list", freeze(params))


def client_detail(client_id: str) -> tuple:
    return (*CLIENTS, "detail", client_id)


def project_list(params: Optional[Dict[str, Any]]) -> tuple:
    return (*PROJECTS, "list", freeze(params))


def project_detail(project_id: int) -> tuple:
    return (*PROJECTS, "detail", project_id)


def request_list(params: Optional[Dict[str, Any]]) -> tuple:
    return (*REQUESTS, "list", freeze(params))


def request_detail(request_id: int) -> tuple:
    return (*REQUESTS, "detail", request_id)


def access_log_list(params: Optional[Dict[str, Any]]) -> tuple:
    return (*ACCESS_LOGS, "list", freeze(params))
