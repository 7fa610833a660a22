from aod_justify.cost import (
    CUBE_LIMIT,
    INFINITE_COST,
    cube,
    delta,
    line_cost,
    prefix_sums,
    saturating_add,
)


def test_cube_within_bounds():
    assert cube(0) == 0
    assert cube(3) == 27
    assert cube(-2) == -8
    assert cube(CUBE_LIMIT) == CUBE_LIMIT**3
    assert cube(CUBE_LIMIT) < INFINITE_COST


def test_cube_saturates_outside_bounds():
    assert cube(CUBE_LIMIT + 1) == INFINITE_COST
    assert cube(-CUBE_LIMIT - 1) == INFINITE_COST


def test_saturating_add_clamps_at_sentinel():
    assert saturating_add(1, 2) == 3
    assert saturating_add(INFINITE_COST, 0) == INFINITE_COST
    assert saturating_add(0, INFINITE_COST) == INFINITE_COST
    assert saturating_add(INFINITE_COST - 1, 2) == INFINITE_COST
    assert saturating_add(INFINITE_COST - 1, 1) == INFINITE_COST


def test_delta_uses_prefix_sums():
    prefix = prefix_sums([3, 2, 2, 5])
    assert prefix == [0, 3, 5, 7, 12]
    assert delta(prefix, 0, 0) == 3
    assert delta(prefix, 0, 1) == 6
    assert delta(prefix, 1, 2) == 5
    assert delta(prefix, 0, 3) == 15


def test_line_cost_rejects_overflowing_lines():
    assert line_cost(4) == 64
    assert line_cost(0) == 0
    assert line_cost(-1) == INFINITE_COST
