import pytest

from algoshelf.dynamic_programming import (
    catalan_numbers,
    egg_drop,
    fibonacci,
    fibonacci_memo,
    is_armstrong,
    longest_common_substring,
    matrix_chain_cost,
    max_subarray_sum,
    min_coins,
    tree_height,
)


def test_catalan_sample():
    assert catalan_numbers(5) == [1, 1, 2, 5, 14, 42]


def test_catalan_zero():
    assert catalan_numbers(0) == [1]


def test_catalan_prefix_stable():
    assert catalan_numbers(8)[:6] == catalan_numbers(5)


def test_catalan_negative():
    with pytest.raises(ValueError):
        catalan_numbers(-1)


def test_min_coins_example():
    assert min_coins([1, 2, 3, 4], 15) == 4


def test_min_coins_single_unit_coin():
    assert min_coins([1], 9) == 9


def test_min_coins_zero_total():
    assert min_coins([5, 7], 0) == 0


def test_min_coins_unreachable():
    assert min_coins([2], 3) is None


def test_min_coins_bad_coin():
    with pytest.raises(ValueError):
        min_coins([0, 1], 3)


def test_egg_drop_known():
    assert egg_drop(2, 36) == 8


def test_egg_drop_one_egg_is_linear():
    assert egg_drop(1, 17) == 17


def test_egg_drop_zero_floors():
    assert egg_drop(3, 0) == 0


def test_egg_drop_more_eggs_never_worse():
    results = [egg_drop(eggs, 30) for eggs in range(1, 6)]
    assert results == sorted(results, reverse=True)


def test_egg_drop_no_eggs():
    with pytest.raises(ValueError):
        egg_drop(0, 10)


def test_fibonacci_recurrence():
    for n in range(30):
        assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


def test_fibonacci_start():
    assert [fibonacci(0), fibonacci(1), fibonacci(2)] == [0, 1, 1]


def test_fibonacci_memo_agrees():
    assert [fibonacci_memo(n) for n in range(50)] == [fibonacci(n) for n in range(50)]


def test_fibonacci_memo_large():
    assert fibonacci_memo(3000) == fibonacci(3000)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)
    with pytest.raises(ValueError):
        fibonacci_memo(-1)


def test_matrix_chain_example():
    assert matrix_chain_cost([10, 30, 5, 60]) == 4500


def test_matrix_chain_single_matrix():
    assert matrix_chain_cost([10, 30]) == 0


def test_matrix_chain_reverse_symmetry():
    dims = [40, 20, 30, 10, 30]
    assert matrix_chain_cost(dims) == matrix_chain_cost(dims[::-1])


def test_matrix_chain_empty():
    with pytest.raises(ValueError):
        matrix_chain_cost([])


@pytest.mark.parametrize("n", [0, 1, 153, 370, 371, 407, -153])
def test_armstrong_true(n):
    assert is_armstrong(n) is True


@pytest.mark.parametrize("n", [10, 100, 154, 9474])
def test_armstrong_false(n):
    assert is_armstrong(n) is False


def test_kadane_all_positive():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_kadane_all_negative():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_kadane_at_least_max_element():
    values = [2, -7, 5, -1, 3, -9, 4]
    assert max_subarray_sum(values) >= max(values)


def test_kadane_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_lcs_source_example():
    assert longest_common_substring("DEFBCD", "ABDEFJ") == "DEF"


def test_lcs_identical():
    assert longest_common_substring("hello", "hello") == "hello"


def test_lcs_nothing_shared():
    assert longest_common_substring("abc", "xyz") == ""


def test_lcs_found_in_both():
    first, second = "xxabcdyy", "zzbcdqq"
    result = longest_common_substring(first, second)
    assert result in first and result in second
    assert len(result) == len("bcd")


def test_tree_height_single_node():
    assert tree_height(1, []) == 1


def test_tree_height_chain():
    edges = [(i, i + 1) for i in range(1, 6)]
    assert tree_height(6, edges) == 6


def test_tree_height_star_matches_pair():
    star = [(1, i) for i in range(2, 6)]
    assert tree_height(5, star) == tree_height(2, [(1, 2)])


def test_tree_height_bad_edge():
    with pytest.raises(ValueError):
        tree_height(3, [(1, 4)])


def test_tree_height_no_nodes():
    with pytest.raises(ValueError):
        tree_height(0, [])