import threading

import pytest

from ztoolkit.resource_pool import ResourcePool


class Box:
    def __init__(self):
        self.text = ""


class Counter:
    def __init__(self):
        self.made = 0

    def __call__(self):
        self.made += 1
        return Box()


def test_fresh_object_is_empty():
    factory = Counter()
    pool = ResourcePool(factory)
    handle = pool.obtain()
    assert handle.value.text == ""
    assert factory.made == 1


def test_released_object_is_reused():
    pool = ResourcePool(Box)
    handle = pool.obtain()
    first = handle.value
    first.text = "keeped by thread:0"
    handle.release()
    again = pool.obtain()
    assert again.value is first
    assert again.value.text == "keeped by thread:0"


def test_reserved_object_is_not_handed_out():
    pool = ResourcePool(Box, 50)
    reserved = pool.obtain()
    reserved.value.text = "This is a reserved object , and will never be used!"
    others = [pool.obtain() for _ in range(4)]
    for other in others:
        other.value.text = "overwritten"
        other.release()
    for _ in range(4):
        with pool.obtain() as box:
            assert box is not reserved.value
    assert reserved.value.text == "This is a reserved object , and will never be used!"


def test_released_reserved_object_returns_to_pool():
    pool = ResourcePool(Box, 50)
    reserved = pool.obtain()
    obj = reserved.value
    reserved.release()
    handle = pool.obtain()
    assert handle.value is obj


def test_quit_objects_do_not_return():
    factory = Counter()
    pool = ResourcePool(factory)
    handles = []
    for i in range(8):
        handle = pool.obtain()
        handle.value.text = str(i)
        handle.quit(i % 2 == 0)
        handles.append(handle)
    for handle in handles:
        handle.release()
    texts = sorted(pool.obtain().value.text for _ in range(4))
    assert texts == ["1", "3", "5", "7"]
    assert factory.made == 8
    pool.obtain()
    assert factory.made == 9


def test_quit_can_be_undone():
    pool = ResourcePool(Box)
    handle = pool.obtain()
    obj = handle.value
    handle.quit()
    handle.quit(False)
    handle.release()
    assert pool.obtain().value is obj


def test_size_limits_idle_objects():
    factory = Counter()
    pool = ResourcePool(factory)
    pool.set_size(1)
    a, b = pool.obtain(), pool.obtain()
    a.release()
    b.release()
    pool.obtain()
    pool.obtain()
    assert factory.made == 3


def test_negative_size_rejected():
    pool = ResourcePool(Box)
    with pytest.raises(ValueError):
        pool.set_size(-1)
    with pytest.raises(ValueError):
        ResourcePool(Box, -1)


def test_on_recycle_called_with_value():
    seen = []
    pool = ResourcePool(Box)
    handle = pool.obtain(seen.append)
    obj = handle.value
    handle.release()
    handle.release()
    assert seen == [obj]


def test_on_recycle_after_pool_gone():
    seen = []
    pool = ResourcePool(Box)
    handle = pool.obtain(seen.append)
    obj = handle.value
    del pool
    handle.release()
    assert seen == [obj]


def test_value_after_release_raises():
    pool = ResourcePool(Box)
    handle = pool.obtain()
    handle.release()
    assert handle.released is True
    with pytest.raises(RuntimeError):
        _ = handle.value


def test_context_manager_releases():
    pool = ResourcePool(Box)
    handle = pool.obtain()
    with handle as box:
        obj = box
    assert handle.released is True
    assert pool.obtain().value is obj


def test_dropping_handle_recycles():
    pool = ResourcePool(Box)
    handle = pool.obtain()
    obj = handle.value
    del handle
    assert pool.obtain().value is obj


def test_threads_never_share_held_object():
    pool = ResourcePool(Box, 50)
    reserved = pool.obtain()
    reserved.value.text = "reserved"
    clashes = []

    def run(num):
        for _ in range(200):
            with pool.obtain() as box:
                if box is reserved.value:
                    clashes.append(num)
                box.text = f"keeped by thread:{num}"

    threads = [threading.Thread(target=run, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert clashes == []
    assert reserved.value.text == "reserved"