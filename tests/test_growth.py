import math

import pytest

from algolab.growth import factorial, growth_row, growth_table, main, render_table


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(-3) == 1


def test_factorial_of_five():
    assert factorial(5) == 120


@pytest.mark.parametrize("n", [2, 3, 7, 2.5, 4.25])
def test_factorial_recurrence(n):
    assert math.isclose(factorial(n), n * factorial(n - 1))


def test_factorial_of_infinity_terminates():
    assert factorial(math.inf) == math.inf


def test_row_has_every_column_in_order():
    row = growth_row(4)
    assert len(row) == 14
    assert list(row)[0] == "log(i)"
    assert list(row)[-1] == "sqrt(2)^logn"


def test_row_at_zero_follows_floating_point_rules():
    row = growth_row(0)
    assert row["log(i)"] == -math.inf
    assert row["ln(i)"] == -math.inf
    assert math.isnan(row["ln(ln(n))"])
    assert math.isnan(row["nlog(n)"])
    assert row["log(n!)"] == 0.0


@pytest.mark.parametrize("n", [2, 5, 17, 64, 99])
def test_row_identities(n):
    row = growth_row(n)
    assert math.isclose(row["2^log(i)"], n)
    assert row["n^3"] == n**3
    assert math.isclose(row["log^2(i)"], row["log(i)"] ** 2)
    assert math.isclose(row["log(n!)"], math.log2(math.factorial(n)))
    assert math.isclose(row["sqrt(logn)"] ** 2, row["log(i)"])
    assert math.isclose(row["nlog(n)"], n * row["log(i)"])


def test_growth_table_range():
    table = growth_table(3, 8)
    assert [n for n, _ in table] == list(range(3, 8))
    assert table[0][1] == growth_row(3)


def test_render_table_layout():
    lines = render_table(0, 5).split("\n")
    assert len(lines) == 7
    assert lines[0] == "Tabular plot"
    assert lines[1].startswith("n     log(i)    ln(i)     n^3")
    assert lines[2].startswith("0     -inf")
    assert all(line.startswith(str(n).ljust(6)) for n, line in zip(range(5), lines[2:]))


def test_render_empty_range_keeps_header():
    lines = render_table(5, 5).split("\n")
    assert len(lines) == 2
    assert lines[0] == "Tabular plot"


def test_main_prints_table(capsys):
    assert main(["--start", "2", "--stop", "4"]) == 0
    out = capsys.readouterr().out
    assert out.strip("\n") == render_table(2, 4)