from concurrent.futures import ThreadPoolExecutor

import pytest

from filmgraph.common.concurrency.id_allocator import IdentityAllocator


def test_ids_start_at_configured_value_and_increase():
    ids = IdentityAllocator(start=7)
    assert ids.last is None
    assert ids.peek() == 7
    assert [ids.next_id() for _ in range(3)] == [7, 8, 9]
    assert ids.last == 9
    assert ids.peek() == 10


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        IdentityAllocator(start=-1)


def test_ids_unique_under_threads():
    ids = IdentityAllocator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        issued = list(pool.map(lambda _: ids.next_id(), range(2000)))
    assert len(set(issued)) == 2000
    assert sorted(issued) == list(range(1, 2001))
