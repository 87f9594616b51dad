import math

import pytest

from conftest import make_employee

from console.schemas.employee import EmployeeFilters, EmployeeStatus
from console.stats.aggregation import (
    Summary,
    average_salary_by_department,
    departments,
    filter_employees,
    round_half_away,
    statuses,
    summarize,
)


def test_summarize_reference_scenario(employees):
    summary = summarize(employees)

    assert summary.count == 3
    assert summary.average_salary == 2000
    assert summary.max_salary == 3000
    assert summary.min_salary == 1000
    assert summary.counts_by_department == {"A": 2, "B": 1}
    assert summary.percent_by_department["A"] == pytest.approx(200 / 3)
    assert summary.percent_by_department["B"] == pytest.approx(100 / 3)
    assert summary.counts_by_status == {"active": 3}
    assert summary.percent_by_status == {"active": 100.0}


def test_summarize_empty_input():
    summary = summarize([])

    assert summary == Summary()
    assert summary.count == 0
    assert summary.average_salary == 0
    assert summary.max_salary == 0
    assert summary.min_salary == 0
    assert summary.counts_by_department == {}
    assert summary.percent_by_department == {}
    assert summary.counts_by_status == {}
    assert summary.percent_by_status == {}


def test_percentages_close_to_one_hundred():
    staff = [
        make_employee(i, salary=1000 + i, department=dept)
        for i, dept in enumerate(["A", "B", "C", "A", "C", "C", "D"], start=1)
    ]
    summary = summarize(staff)

    assert math.isclose(sum(summary.percent_by_department.values()), 100, rel_tol=1e-9)
    assert math.isclose(sum(summary.percent_by_status.values()), 100, rel_tol=1e-9)


def test_percentages_are_not_rounded():
    staff = [make_employee(i, department=d) for i, d in enumerate("AAB", start=1)]
    assert summarize(staff).percent_by_department["B"] == 1 / 3 * 100


def test_average_rounds_half_away_from_zero():
    staff = [make_employee(1, salary=1000), make_employee(2, salary=1001)]
    assert summarize(staff).average_salary == 1001


def test_two_decimal_average_variant():
    staff = [make_employee(i, salary=s) for i, s in enumerate([1000, 1000, 1001], start=1)]
    assert summarize(staff, decimals=2).average_salary == 1000.33
    assert summarize(staff).average_salary == 1000


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (2.5, 0, 3),
        (-2.5, 0, -3),
        (2.4999, 0, 2),
        (0.125, 2, 0.13),
        (1234.5678, 2, 1234.57),
    ],
)
def test_round_half_away(value, decimals, expected):
    assert round_half_away(value, decimals) == expected


def test_extrema_are_exact():
    staff = [make_employee(1, salary=1234.56), make_employee(2, salary=99.99)]
    summary = summarize(staff)
    assert summary.max_salary == 1234.56
    assert summary.min_salary == 99.99


def test_status_grouping_uses_wire_values():
    staff = [
        make_employee(1, status="active"),
        make_employee(2, status="on-leave"),
        make_employee(3, status="on-leave"),
        make_employee(4, status="inactive"),
    ]
    summary = summarize(staff)

    assert summary.counts_by_status == {"active": 1, "on-leave": 2, "inactive": 1}
    assert summary.percent_by_status["on-leave"] == 50.0
    assert statuses(staff) == ["active", "on-leave", "inactive"]


def test_summarize_is_deterministic(employees):
    first = summarize(employees)
    summarize([make_employee(9, salary=1)])
    assert summarize(employees) == first


def test_filter_employees_composes_predicates():
    staff = [
        make_employee(1, department="A", status="active", company_id=1),
        make_employee(2, department="A", status="inactive", company_id=1),
        make_employee(3, department="B", status="active", company_id=2),
    ]

    assert filter_employees(staff) == staff
    assert filter_employees(staff, EmployeeFilters()) == staff
    assert [e.id for e in filter_employees(staff, EmployeeFilters(department="A"))] == [1, 2]
    assert [
        e.id
        for e in filter_employees(
            staff, EmployeeFilters(department="A", status=EmployeeStatus.ACTIVE)
        )
    ] == [1]
    assert [e.id for e in filter_employees(staff, EmployeeFilters(company_id=2))] == [3]


def test_average_salary_by_department(employees):
    assert average_salary_by_department(employees) == {"A": 1500, "B": 3000}
    assert departments(employees) == ["A", "B"]


def test_summary_to_dict_uses_wire_names(employees):
    data = summarize(employees).to_dict()
    assert data["averageSalary"] == 2000
    assert data["countsByDepartment"] == {"A": 2, "B": 1}
    assert set(data) == {
        "count",
        "averageSalary",
        "maxSalary",
        "minSalary",
        "countsByDepartment",
        "percentByDepartment",
        "countsByStatus",
        "percentByStatus",
    }
