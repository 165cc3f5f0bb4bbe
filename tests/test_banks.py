import pytest

from remy.banks import (
    Empty,
    Fixed,
    Mirrored,
    ReadOnlyMemory,
    WriteOnlyMemory,
    read_only,
    write_only,
)
from remy.memory import ErrorKind, MemoryAccessError


def test_fixed_get_and_set_work():
    memory = Fixed(10)
    memory.set_u8(1, 42)
    assert memory.get_u8(1) == 42


def test_fixed_get_raises_if_out_of_bounds():
    memory = Fixed(10)
    with pytest.raises(MemoryAccessError) as info:
        memory.get_u8(12)
    assert info.value.kind is ErrorKind.OUT_OF_BOUNDS
    assert info.value.detail == "attempted to read from 0xC, but size is 0xa"


def test_fixed_set_raises_if_out_of_bounds():
    memory = Fixed(10)
    with pytest.raises(MemoryAccessError) as info:
        memory.set_u8(12, 42)
    assert info.value.kind is ErrorKind.OUT_OF_BOUNDS


def test_fixed_starts_zeroed_with_size():
    memory = Fixed(5)
    assert len(memory) == 5
    assert memory.get(0, 5) == bytes(5)


def test_fixed_from_contents():
    memory = Fixed.from_contents([1, 2, 3])
    assert len(memory) == 3
    assert memory.get(0, 3) == bytes([1, 2, 3])


def test_empty_cannot_be_read_or_written():
    memory = Empty()
    assert len(memory) == 0
    with pytest.raises(MemoryAccessError) as read_info:
        memory.get_u8(0)
    assert read_info.value.kind is ErrorKind.MEMORY_NOT_READABLE
    with pytest.raises(MemoryAccessError) as write_info:
        memory.set_u8(0, 1)
    assert write_info.value.kind is ErrorKind.MEMORY_NOT_WRITABLE


def test_mirrored_read_and_write_inside_inner_bounds():
    memory = Mirrored(Fixed(10), 10)
    memory.set(1, bytes([42, 24]))
    assert memory.get(1, 2) == bytes([42, 24])


def test_mirrored_reads_can_wrap_around():
    memory = Mirrored(Fixed(6), 18)
    memory.set(0, bytes([1, 2, 3, 4, 5, 6]))
    assert memory.get(3, 6) == bytes([4, 5, 6, 1, 2, 3])


def test_mirrored_writes_can_wrap_around():
    memory = Mirrored(Fixed(6), 18)
    memory.set(3, bytes([1, 2, 3, 4, 5, 6]))
    assert memory.get(0, 6) == bytes([4, 5, 6, 1, 2, 3])


def test_mirrored_reads_can_wrap_around_multiple_times():
    memory = Mirrored(Fixed(2), 6)
    memory.set(0, bytes([1, 2]))
    assert memory.get(0, 6) == bytes([1, 2, 1, 2, 1, 2])


def test_mirrored_writes_can_wrap_around_multiple_times():
    memory = Mirrored(Fixed(2), 6)
    memory.set(0, bytes([1, 2, 3, 4, 5, 6]))
    assert memory.get(0, 6) == bytes([5, 6, 5, 6, 5, 6])


@pytest.mark.parametrize("start", [10, 9])
def test_mirrored_accesses_out_of_bounds_raise(start):
    memory = Mirrored(Fixed(10), 10)
    with pytest.raises(MemoryAccessError) as write_info:
        memory.set(start, bytes(2))
    assert write_info.value.kind is ErrorKind.OUT_OF_BOUNDS
    with pytest.raises(MemoryAccessError) as read_info:
        memory.get(start, 2)
    assert read_info.value.kind is ErrorKind.OUT_OF_BOUNDS


def test_mirrored_len_is_mirror_size():
    assert len(Mirrored(Fixed(4), 32)) == 32


def test_read_only_allows_reads_and_rejects_writes():
    memory = read_only(Fixed.from_contents([9, 8]))
    assert isinstance(memory, ReadOnlyMemory)
    assert len(memory) == 2
    assert memory.get_u8(1) == 8
    with pytest.raises(MemoryAccessError) as info:
        memory.set_u8(0, 1)
    assert info.value.kind is ErrorKind.MEMORY_NOT_WRITABLE


def test_write_only_allows_writes_and_rejects_reads():
    inner = Fixed(4)
    memory = write_only(inner)
    assert isinstance(memory, WriteOnlyMemory)
    assert len(memory) == 4
    memory.set_u8(2, 77)
    assert inner.get_u8(2) == 77
    with pytest.raises(MemoryAccessError) as info:
        memory.get_u8(2)
    assert info.value.kind is ErrorKind.MEMORY_NOT_READABLE