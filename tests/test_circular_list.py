import pytest

from algoshelf.circular_list import CircularList


@pytest.fixture
def sample():
    ring = CircularList()
    for value in (5, 10, 3, 7):
        ring.insert_front(value)
    for value in (18, 19, 20):
        ring.insert_tail(value)
    return ring


def test_insert_front_and_tail_order(sample):
    assert list(sample) == [7, 3, 10, 5, 18, 19, 20]
    assert len(sample) == 7


def test_find_item(sample):
    assert 10 in sample
    assert 30 not in sample


def test_last_item_is_found(sample):
    assert 20 in sample


def test_head(sample):
    assert sample.head() == 7


def test_advance_drops_head(sample):
    sample.advance()
    assert sample.head() == 3
    assert len(sample) == 6
    assert list(sample) == [3, 10, 5, 18, 19, 20]


def test_advance_through_everything():
    ring = CircularList()
    ring.insert_tail(1)
    ring.insert_tail(2)
    ring.advance()
    ring.advance()
    assert len(ring) == 0
    with pytest.raises(IndexError):
        ring.advance()


def test_head_of_empty_raises():
    with pytest.raises(IndexError):
        CircularList().head()


def test_render_empty():
    assert CircularList().render() == "List is empty !"


def test_render_single():
    ring = CircularList()
    ring.insert_front(5)
    assert ring.render() == "CLL list: 5 -> 5\nTotal element: 1"


def test_render_closes_ring(sample):
    first_line, second_line = sample.render().split("\n")
    assert first_line == "CLL list: 7 -> 3 -> 10 -> 5 -> 18 -> 19 -> 20 -> 7"
    assert second_line == "Total element: 7"


def test_insert_tail_on_empty_sets_head():
    ring = CircularList()
    ring.insert_tail(4)
    assert ring.head() == 4
    assert list(ring) == [4]