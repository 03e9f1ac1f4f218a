from constructora.common.validators import round_half_up
from constructora.employees.model import Employee


def test_round_half_up_instead_of_even():
    assert round_half_up(2.5) == 3
    assert round_half_up(12.5) == 13
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(-0.4) == 0


def test_monthly_salary_is_daily_times_30():
    employee = Employee(
        id="e1",
        org_id="org-test",
        worker_id="ID-PRO-0001",
        name="Juan",
        phone=None,
        dpi=None,
        position_title="Albañil",
        daily_salary=0.1875,
    )

    assert employee.monthly_salary == 5.63
