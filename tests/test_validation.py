from quick_cash.layout import GridTopology
from quick_cash.models import CellAssignment, CoinColor, Combination, SpinPlan
from quick_cash.validation import validate_result

TOPOLOGY = GridTopology(rows=3, columns=5)


def make_combination(color, indices, values, total=None):
    cells = tuple(
        CellAssignment(index=index, value=value, color=color)
        for index, value in zip(indices, values)
    )
    return Combination(color=color, total_value=sum(values) if total is None else total, cells=cells)


def make_spin():
    return SpinPlan(
        spin_value=3500,
        combinations=(
            make_combination(CoinColor.A, [0, 1, 2], [500, 500, 500]),
            make_combination(CoinColor.B, [10, 11, 12], [500, 1000, 500]),
        ),
    )


def test_consistent_spins_pass():
    report = validate_result([make_spin(), make_spin()], 7000, topology=TOPOLOGY, rounding_unit=500)
    assert report.passed
    assert report.failures == ()


def test_prize_mismatch_is_reported():
    report = validate_result([make_spin()], 4000, topology=TOPOLOGY)
    assert not report.passed
    assert [check.name for check in report.failures] == ["Spin total == Base prize"]


def test_cell_sum_mismatch_is_reported():
    broken = make_combination(CoinColor.A, [0, 1, 2], [500, 500, 500], total=2000)
    spin = SpinPlan(spin_value=2000, combinations=(broken,))
    report = validate_result([spin], 2000, topology=TOPOLOGY)
    names = [check.name for check in report.failures]
    assert names == ["Spin 1 combination 1 cell total"]


def test_shared_cell_is_reported():
    spin = SpinPlan(
        spin_value=3000,
        combinations=(
            make_combination(CoinColor.A, [0, 1, 2], [500, 500, 500]),
            make_combination(CoinColor.B, [2, 3, 4], [500, 500, 500]),
        ),
    )
    report = validate_result([spin], 3000, topology=TOPOLOGY)
    failure = report.failures[0]
    assert failure.name == "Spin 1 cells are disjoint"
    assert failure.actual == [2]


def test_short_combination_and_off_unit_values_are_reported():
    spin = SpinPlan(
        spin_value=1250,
        combinations=(make_combination(CoinColor.C, [0, 1], [500, 750]),),
    )
    report = validate_result([spin], 1250, topology=TOPOLOGY, rounding_unit=500)
    names = {check.name for check in report.failures}
    assert names == {
        "Spin 1 combination 1 cell count in [3, 7]",
        "Spin 1 combination 1 values are multiples of 500",
    }


def test_report_serializes():
    data = validate_result([make_spin()], 3500).to_dict()
    assert data["passed"] is True
    assert all(check["passed"] for check in data["checks"])


def test_cell_above_coin_range_is_reported():
    spin = SpinPlan(
        spin_value=5500,
        combinations=(make_combination(CoinColor.A, [0, 1, 2], [1000, 1000, 3500]),),
    )
    report = validate_result([spin], 5500, topology=TOPOLOGY, rounding_unit=500, coin_range=(500, 1000))
    failure = report.failures[0]
    assert [check.name for check in report.failures] == ["Spin 1 combination 1 values within [500, 1000]"]
    assert failure.actual == [3500]


def test_cells_inside_coin_range_pass():
    report = validate_result([make_spin()], 3500, topology=TOPOLOGY, coin_range=(500, 5000))
    assert report.passed
