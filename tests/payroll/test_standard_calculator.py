from hr_portal.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_standard_calculator_adds_allowances_and_subtracts_deductions():
    calc = StandardPayrollCalculator()
    net = calc.net_pay(50000, {"hra": 10000, "transport": 2000}, {"pf": 6000, "tax": 4000})
    assert net == 52000


def test_standard_calculator_without_extras():
    assert StandardPayrollCalculator().net_pay(42000.5, {}, {}) == 42000.5
