import math

import pytest

from algocollection.arrays import (
    equilibrium_indices,
    find_pair_with_sum,
    find_sorted_triplet,
    fractional_knapsack,
    max_profit,
    min_max,
    nonnegative_product,
    reversed_elements,
    shortest_unsorted_subarray,
    trapped_rain_water,
)


def _is_subsequence(triplet, nums):
    it = iter(nums)
    return all(any(x == value for x in it) for value in triplet)


def test_sorted_triplet_source_example():
    assert find_sorted_triplet([1, 2, -1, 7, 5]) == (1, 2, 7)


@pytest.mark.parametrize(
    "nums",
    [[5, 1, 4, 2, 6], [3, 3, 1, 2, 2, 9], [10, 20, 1, 2, 3], [4, -2, 8, -5, 9]],
)
def test_sorted_triplet_is_increasing_subsequence(nums):
    result = find_sorted_triplet(nums)
    assert result is not None
    a, b, c = result
    assert a < b < c
    assert _is_subsequence(result, nums)


@pytest.mark.parametrize("nums", [[], [1, 2], [5, 4, 3, 2, 1], [2, 2, 2, 2]])
def test_sorted_triplet_absent(nums):
    assert find_sorted_triplet(nums) is None


def test_max_profit_source_example():
    assert max_profit([2, 4, 6, 3, 2, 3, 6]) == 8


def test_max_profit_rising_prices():
    prices = [1, 3, 4, 9, 12]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 7, 4, 1]) == 0


def test_equilibrium_indices_balance():
    values = [0, -3, 5, -4, -2, 3, 1, 0]
    found = equilibrium_indices(values)
    assert found
    assert found == sorted(found, reverse=True)
    for index in found:
        assert sum(values[:index]) == sum(values[index + 1:])


def test_equilibrium_indices_empty():
    assert equilibrium_indices([]) == []


def test_shortest_unsorted_example():
    assert shortest_unsorted_subarray([2, 6, 4, 8, 10, 9, 15]) == 5


@pytest.mark.parametrize("nums", [[], [7], [1, 2, 2, 3, 8]])
def test_shortest_unsorted_already_sorted(nums):
    assert shortest_unsorted_subarray(nums) == 0


def test_shortest_unsorted_fully_reversed():
    nums = [9, 7, 4, 2, -1]
    assert shortest_unsorted_subarray(nums) == len(nums)


def test_trapped_water_single_basin():
    assert trapped_rain_water([3, 0, 3]) == 3


@pytest.mark.parametrize("heights", [[1, 2, 3, 4], [5, 4, 2, 1], [2, 2, 2]])
def test_trapped_water_monotone_holds_none(heights):
    assert trapped_rain_water(heights) == 0


def test_trapped_water_bounded_by_tallest():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    water = trapped_rain_water(heights)
    assert 0 < water <= max(heights) * len(heights) - sum(heights)


def test_find_pair_source_example():
    nums = [8, 7, 2, 5, 3, 1]
    pair = find_pair_with_sum(nums, 10)
    assert pair is not None
    assert sum(pair) == 10
    assert nums.index(pair[0]) < nums.index(pair[1])


def test_find_pair_missing():
    assert find_pair_with_sum([1, 2, 3], 100) is None


def test_min_max_matches_builtins():
    values = [4, -7, 12, 0, 12, -7]
    assert min_max(values) == (min(values), max(values))


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])


def test_nonnegative_product():
    values = [2, -1, 3, 0, -5, 4]
    kept, product = nonnegative_product(values)
    assert kept == [v for v in values if v >= 0]
    assert product == math.prod(kept)


def test_nonnegative_product_all_negative():
    kept, product = nonnegative_product([-1, -2])
    assert kept == []
    assert product == math.prod([])


def test_reversed_elements_round_trip():
    values = [3, 1, 4, 1, 5]
    flipped = reversed_elements(values)
    assert reversed_elements(flipped) == values
    assert flipped[0] == values[-1]


def test_knapsack_everything_fits():
    items = [(60, 10), (100, 20), (120, 30)]
    total_weight = sum(w for _, w in items)
    assert fractional_knapsack(total_weight, items) == pytest.approx(
        sum(p for p, _ in items)
    )


def test_knapsack_zero_capacity():
    assert fractional_knapsack(0, [(60, 10)]) == 0


def test_knapsack_monotone_in_capacity():
    items = [(60, 10), (100, 20), (120, 30)]
    results = [fractional_knapsack(cap, items) for cap in range(0, 70, 5)]
    assert results == sorted(results)
    assert results[-1] == pytest.approx(sum(p for p, _ in items))


def test_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [(5, 0)])