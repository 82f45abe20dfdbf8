import pytest

from applab.qn_demo import (
    division_table,
    main,
    multiplication_result,
    performance_comparison,
    polynomial_results,
)


def test_division_table_ends_at_zero():
    rows = division_table(-0.0625, 18)
    assert rows[-1].qnum1 == 0
    assert all(row.qnum1 != 0 for row in rows[:-1])


def test_division_table_row_count():
    assert len(division_table(-0.0625, 18)) == 15


def test_division_table_float_column_halves():
    rows = division_table(-0.0625, 18)
    for i, row in enumerate(rows):
        assert row.fnum == -0.0625 / 2 ** (i + 1)


def test_division_table_integer_column_tracks_float():
    for row in division_table(-0.0625, 18):
        assert row.qnum1_float == pytest.approx(row.fnum, abs=2 ** -18)


def test_division_table_zero_value_is_empty():
    assert division_table(0.0, 18) == []


def test_polynomial_results_agree_at_one():
    poly = polynomial_results(1.0, 18)
    assert poly.floating == pytest.approx(-674.9325)
    assert poly.fractional == pytest.approx(poly.floating)
    assert poly.qn_float == pytest.approx(-674.9325, abs=1e-3)


def test_polynomial_qn_value_matches_converted():
    poly = polynomial_results(2.0, 18)
    assert poly.qn_value / 2**18 == poly.qn_float
    assert poly.qn_float == pytest.approx(poly.floating, abs=1e-3)


def test_performance_comparison_consistent():
    perf = performance_comparison(1000)
    assert min(perf) >= 0.0
    expected = "Floating-point" if perf.float_add < perf.qn_add else "Qn"
    assert perf.faster_addition == expected


def test_performance_comparison_rejects_negative():
    with pytest.raises(ValueError):
        performance_comparison(-1)


def test_main_prints_sections(capsys):
    assert main(["100"]) == 0
    out = capsys.readouterr().out
    assert "Division test" in out
    assert "Floating-point result: -674.932500" in out
    assert "Faster operation for multiplication:" in out