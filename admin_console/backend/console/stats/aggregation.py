"""
Employee statistics: counts, salary figures and grouped breakdowns.

Everything here is a pure function of its input; nothing is cached between
calls. Filtering is a separate predicate step (:func:`filter_employees`).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Hashable, Iterable, Optional, Sequence

from console.schemas.employee import Employee, EmployeeFilters


@dataclass(frozen=True)
class Summary:
    count: int = 0
    average_salary: float = 0
    max_salary: float = 0
    min_salary: float = 0
    counts_by_department: dict[str, int] = field(default_factory=dict)
    percent_by_department: dict[str, float] = field(default_factory=dict)
    counts_by_status: dict[str, int] = field(default_factory=dict)
    percent_by_status: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "averageSalary": self.average_salary,
            "maxSalary": self.max_salary,
            "minSalary": self.min_salary,
            "countsByDepartment": dict(self.counts_by_department),
            "percentByDepartment": dict(self.percent_by_department),
            "countsByStatus": dict(self.counts_by_status),
            "percentByStatus": dict(self.percent_by_status),
        }


def round_half_away(value: float, decimals: int = 0) -> float:
    """Round to ``decimals`` places, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    quantum = Decimal(1).scaleb(-decimals)
    # ROUND_HALF_UP in decimal rounds ties away from zero
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def _status_key(employee: Employee) -> str:
    return employee.status.value


def group_counts(employees: Iterable[Employee], key: Callable[[Employee], Hashable]) -> dict:
    counts: dict = {}
    for emp in employees:
        k = key(emp)
        counts[k] = counts.get(k, 0) + 1
    return counts


def percentages(counts: dict, total: int) -> dict:
    if not total:
        return {}
    return {k: n / total * 100 for k, n in counts.items()}


def summarize(employees: Sequence[Employee], *, decimals: int = 0) -> Summary:
    """Compute the employee summary.

    ``decimals`` controls how the average salary is rounded: 0 for the
    dashboard figure, 2 for reports. Percentages are left unrounded.
    """
    employees = list(employees)
    if not employees:
        return Summary()

    salaries = [e.salary for e in employees]
    count = len(employees)
    by_department = group_counts(employees, lambda e: e.department)
    by_status = group_counts(employees, _status_key)

    return Summary(
        count=count,
        average_salary=round_half_away(sum(salaries) / count, decimals),
        max_salary=max(salaries),
        min_salary=min(salaries),
        counts_by_department=by_department,
        percent_by_department=percentages(by_department, count),
        counts_by_status=by_status,
        percent_by_status=percentages(by_status, count),
    )


def filter_employees(
    employees: Iterable[Employee], filters: Optional[EmployeeFilters] = None
) -> list[Employee]:
    if filters is None or filters.is_empty():
        return list(employees)
    return [e for e in employees if filters.matches(e)]


def departments(employees: Iterable[Employee]) -> list[str]:
    """Distinct departments in order of first appearance."""
    return list(dict.fromkeys(e.department for e in employees))


def statuses(employees: Iterable[Employee]) -> list[str]:
    return list(dict.fromkeys(_status_key(e) for e in employees))


def average_salary_by_department(employees: Iterable[Employee]) -> dict[str, float]:
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for emp in employees:
        totals[emp.department] = totals.get(emp.department, 0) + emp.salary
        counts[emp.department] = counts.get(emp.department, 0) + 1
    return {dept: round_half_away(totals[dept] / counts[dept]) for dept in totals}
