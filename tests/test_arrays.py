import pytest

from clings.arrays import (
    WELL_DONE,
    WORK_HARD,
    aggregate,
    bump_marks,
    has_mark_at_least,
    insert_at,
    merge_sorted,
    remark,
    selection_sort,
    special_series,
)

CHROMOSOMES = [46, 42, 78, 38, 56, 48, 380]
SORTED_CHROMOSOMES = [38, 42, 46, 48, 56, 78, 380]
MORE_CHROMOSOMES = [8, 12, 20, 24, 32, 34, 1260]
MARKS = [100, 88, 86, 97, 90]


def test_aggregate_of_nothing_is_zero():
    assert aggregate([]) == 0


def test_aggregate_ignores_order():
    assert aggregate(MARKS) == aggregate(list(reversed(MARKS)))


def test_aggregate_accepts_generator():
    assert aggregate(m for m in MARKS) == aggregate(MARKS)


def test_insert_elephant_at_fifth_position():
    without = [46, 42, 78, 38, 48, 380]
    assert insert_at(without, 5, 56) == CHROMOSOMES


def test_insert_does_not_change_input():
    original = [1, 2, 3]
    insert_at(original, 1, 0)
    assert original == [1, 2, 3]


def test_insert_at_end():
    result = insert_at([46, 42], 3, 78)
    assert result[-1] == 78
    assert result[:2] == [46, 42]


@pytest.mark.parametrize("position", [0, 5, -1])
def test_insert_out_of_range(position):
    with pytest.raises(ValueError):
        insert_at([1, 2, 3], position, 9)


def test_selection_sort_chromosomes():
    assert selection_sort(CHROMOSOMES) == SORTED_CHROMOSOMES


def test_selection_sort_matches_sorted():
    values = [5, -1, 5, 0, 3, 3]
    assert selection_sort(values) == sorted(values)


def test_selection_sort_empty():
    assert selection_sort([]) == []


def test_merge_sorted_chromosomes():
    merged = merge_sorted(SORTED_CHROMOSOMES, MORE_CHROMOSOMES)
    assert merged == sorted(SORTED_CHROMOSOMES + MORE_CHROMOSOMES)
    assert len(merged) == len(SORTED_CHROMOSOMES) + len(MORE_CHROMOSOMES)


def test_merge_with_empty_side():
    assert merge_sorted([], MORE_CHROMOSOMES) == MORE_CHROMOSOMES
    assert merge_sorted(SORTED_CHROMOSOMES, []) == SORTED_CHROMOSOMES


def test_has_mark_at_least_boundary():
    assert has_mark_at_least([89, 90], 90) is True
    assert has_mark_at_least([89, 10], 90) is False


def test_remark_texts():
    assert remark(MARKS) == WELL_DONE
    assert remark([88, 86]) == WORK_HARD
    assert remark([], 90) == WORK_HARD


def test_special_series_start():
    series = special_series(10)
    assert len(series) == 10
    assert series[:2] == [0, 1]


def test_special_series_each_is_sum_of_previous_two():
    series = special_series(15)
    assert all(c == a + b for a, b, c in zip(series, series[1:], series[2:]))


def test_special_series_prefix_property():
    assert special_series(10)[:4] == special_series(4)


def test_special_series_negative():
    with pytest.raises(ValueError):
        special_series(-1)


def test_bump_marks_pattern():
    bumped = bump_marks(MARKS)
    assert [b - m for b, m in zip(bumped, MARKS)] == [4, 3, 4, 3, 0]


def test_bump_marks_keeps_last():
    assert bump_marks([90]) == [90]
    assert bump_marks([]) == []