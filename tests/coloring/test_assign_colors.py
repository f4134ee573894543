import json
import time

from ordertone.coloring import ColorCache, assign_colors, assign_colors_with_stats
from ordertone.coloring.greedy import default_color
from ordertone.config import ColoringConfig
from ordertone.palette import PALETTE_SIZE
from ordertone.scenario.synthetic import SyntheticScheduleSpec, generate_orders


def test_empty_input_returns_empty_mapping():
    assert assign_colors([]) == {}
    assert assign_colors([], ColorCache()) == {}


def test_single_order_gets_palette_index(make_order):
    result = assign_colors([make_order(1)])
    assert list(result) == [1]
    assert 0 <= result[1] < PALETTE_SIZE


def test_collision_pair_matches_reference_scenario(make_order):
    result = assign_colors([make_order(1, "2025-01-15", 1, 1), make_order(2, "2025-01-15", 1, 1)])
    assert result == {1: 1, 2: 0}


def test_adjacent_shift_gets_distinct_color(make_order):
    result = assign_colors([make_order(1, shift=1), make_order(2, shift=2)])
    assert result[1] != result[2]


def test_adjacent_line_gets_distinct_color(make_order):
    result = assign_colors([make_order(1, line=1), make_order(2, line=2)])
    assert result[1] != result[2]


def test_two_cells_apart_still_constrained(make_order):
    result = assign_colors([make_order(1, shift=1), make_order(2, shift=3)])
    assert result[1] != result[2]


def test_distant_orders_are_unconstrained(make_order):
    orders = [make_order(1, "2025-01-15", shift=1), make_order(13, "2025-01-16", shift=1)]
    result = assign_colors(orders)
    assert result == {1: default_color(1), 13: default_color(13)}


def test_three_by_three_block_center_differs(make_order):
    orders = [
        make_order(1 + row * 3 + col, shift=col + 1, line=row + 1)
        for row in range(3)
        for col in range(3)
    ]
    result = assign_colors(orders)
    center = result[5]
    for order_id in (1, 2, 3, 4, 6, 7, 8, 9):
        assert result[order_id] != center


def test_three_way_collision_is_pairwise_distinct(make_order):
    result = assign_colors([make_order(1), make_order(2), make_order(3)])
    assert len(set(result.values())) == 3


def test_unassigned_line_uses_id_fallback(make_order):
    orders = [make_order(1), make_order(14, line=None), make_order(15, shift=9)]
    result = assign_colors(orders)
    assert set(result) == {1, 14, 15}
    assert result[14] == 14 % PALETTE_SIZE
    assert result[15] == 15 % PALETTE_SIZE


def test_cached_call_is_idempotent():
    orders = generate_orders(SyntheticScheduleSpec(num_days=10, seed=7)).orders
    cache = ColorCache()
    first = assign_colors(orders, cache)
    second = assign_colors(orders, cache)
    assert first == second
    assert cache.as_dict() == first


def test_incremental_call_preserves_existing_colors(make_order):
    bundle = generate_orders(SyntheticScheduleSpec(num_days=14, seed=11, max_stack=2))
    cache = ColorCache()
    before = assign_colors(bundle.orders, cache)
    newcomer = make_order(10_000, bundle.orders[0].date, bundle.orders[0].shift, bundle.orders[0].line)
    after = assign_colors([*bundle.orders, newcomer], cache)
    for order_id, color in before.items():
        assert after[order_id] == color
    assert 0 <= after[10_000] < PALETTE_SIZE


def test_new_order_contrasts_with_cached_neighbour(make_order):
    cache = ColorCache()
    first = assign_colors([make_order(1)], cache)
    second = assign_colors([make_order(1), make_order(2)], cache)
    assert second[1] == first[1]
    assert second[2] != second[1]


def test_cache_survives_window_shrink_and_clear(make_order):
    cache = ColorCache()
    full = assign_colors([make_order(1), make_order(2), make_order(3, shift=2)], cache)
    narrowed = assign_colors([make_order(2)], cache)
    assert narrowed == {2: full[2]}
    cache.clear()
    assert len(cache) == 0


def test_large_input_is_split_into_passes(make_order):
    orders = [make_order(order_id) for order_id in range(1, 6)]
    colors, stats = assign_colors_with_stats(orders, config=ColoringConfig(max_orders_per_pass=2))
    assert stats.passes == 3
    assert stats.collisions == 1
    assert len(set(colors.values())) == 5


def test_stats_report_cached_and_new(make_order):
    cache = ColorCache()
    assign_colors([make_order(1)], cache)
    _, stats = assign_colors_with_stats([make_order(1), make_order(2), make_order(3, line=None)], cache)
    assert stats.orders == 3
    assert stats.cached_orders == 1
    assert stats.new_orders == 2
    assert stats.unassigned_orders == 1
    assert stats.edges == 1


def test_fully_cached_call_still_reports_grid_stats(make_order):
    cache = ColorCache()
    orders = [make_order(1), make_order(2)]
    assign_colors(orders, cache)
    _, stats = assign_colors_with_stats(orders, cache)
    assert stats.new_orders == 0
    assert stats.passes == 0
    assert stats.collisions == 1
    assert stats.edges == 1


def test_telemetry_log_records_run(tmp_path, make_order):
    log_path = tmp_path / "telemetry" / "runs.jsonl"
    assign_colors_with_stats(
        [make_order(1), make_order(2)],
        telemetry_log=log_path,
        telemetry_source="orders.csv",
        telemetry_context={"command": "test"},
    )
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert len(records) == 1
    record = records[0]
    assert record["record_type"] == "run"
    assert record["solver"] == "greedy-contrast"
    assert record["status"] == "ok"
    assert record["metrics"]["orders"] == 2
    assert record["context"] == {"command": "test"}
    assert record["source"] == "orders.csv"
    steps = list((log_path.parent / "steps").glob("*.jsonl"))
    assert len(steps) == 1


def test_every_order_colored_on_full_schedule():
    bundle = generate_orders(SyntheticScheduleSpec(num_days=60, seed=3, unassigned_ratio=0.05))
    result = assign_colors(bundle.orders)
    assert len(result) == len(bundle.orders)
    assert all(0 <= color < PALETTE_SIZE for color in result.values())


def test_seven_hundred_orders_within_latency_budget():
    bundle = generate_orders(SyntheticScheduleSpec(num_days=60, fill_ratio=0.5, seed=5))
    orders = bundle.orders
    assert 600 <= len(orders) <= 850
    timings = []
    for _ in range(3):
        started = time.perf_counter()
        result = assign_colors(orders)
        timings.append(time.perf_counter() - started)
    assert len(result) == len(orders)
    assert min(timings) < 0.1
