import pytest

from ordertone.scenario.io import read_orders
from ordertone.scenario.synthetic import DEFAULT_LINES, SyntheticScheduleSpec, generate_orders


def test_generate_orders_is_deterministic():
    spec = SyntheticScheduleSpec(num_days=5, seed=42)
    first = generate_orders(spec).orders
    second = generate_orders(spec).orders
    assert first == second


def test_generate_orders_stays_on_grid():
    bundle = generate_orders(SyntheticScheduleSpec(num_days=3, fill_ratio=1.0))
    assert len(bundle.orders) == 3 * 3 * len(DEFAULT_LINES)
    assert {order.shift for order in bundle.orders} == {1, 2, 3}
    assert {order.line for order in bundle.orders} == set(DEFAULT_LINES)
    assert len({order.id for order in bundle.orders}) == len(bundle.orders)


def test_stacked_and_unassigned_orders():
    spec = SyntheticScheduleSpec(num_days=4, fill_ratio=1.0, max_stack=3, unassigned_ratio=1.0, seed=9)
    bundle = generate_orders(spec)
    assert len(bundle.orders) >= 4 * 3 * len(DEFAULT_LINES)
    assert all(order.line is None for order in bundle.orders)
    summary = bundle.summary()
    assert summary["unassigned"] == summary["orders"]
    assert summary["placed"] == 0


def test_bundle_write_round_trip(tmp_path):
    bundle = generate_orders(SyntheticScheduleSpec(num_days=2, seed=1, unassigned_ratio=0.3))
    path = bundle.write(tmp_path / "orders.csv")
    assert read_orders(path) == bundle.orders


@pytest.mark.parametrize(
    "overrides",
    [{"fill_ratio": 1.5}, {"unassigned_ratio": -0.1}, {"max_stack": 0}],
)
def test_invalid_spec_rejected(overrides):
    with pytest.raises(ValueError):
        generate_orders(SyntheticScheduleSpec(**overrides))
