import math

import pytest

from grassdoom.trig import PI, TABLE_SIZE, TrigTables, angle_index, get_tables


def test_angle_index_zero():
    assert angle_index(0.0) == 0


@pytest.mark.parametrize("angle", [-10.0, -1.0, -0.001, 0.5, 3.0, 6.5, 40.0])
def test_angle_index_in_range(angle):
    assert 0 <= angle_index(angle) < TABLE_SIZE


def test_angle_index_wraps_full_turn():
    quarter = angle_index(PI / 2)
    assert angle_index(PI / 2 + 2 * PI) in {quarter - 1, quarter, quarter + 1}


def test_negative_angle_lands_at_table_end():
    assert angle_index(-0.01) > TABLE_SIZE - 10


def test_table_lengths():
    tables = TrigTables()
    assert len(tables.cos_table) == TABLE_SIZE
    assert len(tables.sin_table) == TABLE_SIZE


def test_zero_angle_values():
    tables = TrigTables()
    assert tables.cos(0.0) == 1.0
    assert tables.sin(0.0) == 0.0


@pytest.mark.parametrize("angle", [0.3, 1.2, 2.5, 4.0, 5.9])
def test_pythagorean_identity(angle):
    tables = TrigTables()
    assert tables.cos(angle) ** 2 + tables.sin(angle) ** 2 == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [0.3, 1.2, 2.5, 4.0, 5.9])
def test_close_to_math(angle):
    tables = TrigTables()
    assert tables.cos(angle) == pytest.approx(math.cos(angle), abs=2e-3)
    assert tables.sin(angle) == pytest.approx(math.sin(angle), abs=2e-3)


def test_get_tables_returns_filled_tables():
    tables = get_tables()
    assert len(tables.cos_table) == TABLE_SIZE
    assert tables.cos(0.0) == 1.0
    assert tables.sin(0.0) == 0.0
    assert tables.sin(PI / 2) == pytest.approx(1.0, abs=2e-3)


def test_get_tables_is_shared():
    first = get_tables()
    second = get_tables()
    assert first is second
    assert first.cos_table == second.cos_table
    assert first.sin(1.0) == pytest.approx(math.sin(1.0), abs=2e-3)