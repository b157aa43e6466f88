import logging

from pytest import raises, mark

from seqcontainers import (
    ArraySequence,
    DEFAULT_CAPACITY,
    ConcurrentStructuralChange,
    IndexOutOfRange,
    InvalidArgument,
    LinkedSequence,
)


def make(*values):
    seq = ArraySequence()
    seq.add_all(values)
    return seq


def test_default_capacity():
    seq = ArraySequence()
    assert seq.capacity == DEFAULT_CAPACITY == 10
    assert seq.size() == 0


def test_negative_capacity_rejected():
    with raises(InvalidArgument, match="-1"):
        ArraySequence(-1)
    # also usable as a plain ValueError
    with raises(ValueError):
        ArraySequence(-5)


def test_zero_capacity_grows_to_default():
    seq = ArraySequence(0)
    assert seq.capacity == 0
    seq.add("a")
    assert seq.capacity == 10
    assert seq.get(0) == "a"


def test_growth_from_small_capacity():
    seq = ArraySequence(2)
    seq.add(1)
    seq.add(2)
    assert seq.capacity == 2
    seq.add(3)
    assert seq.capacity == 10
    assert seq.size() == 3
    assert seq.get(2) == 3


def test_growth_doubles_past_default():
    seq = ArraySequence()
    for i in range(11):
        seq.add(i)
    assert seq.capacity == 20
    assert seq.to_list() == list(range(11))
    seq = ArraySequence(15)
    for i in range(16):
        seq.add(i)
    assert seq.capacity == 30


def test_growth_is_logged(caplog):
    seq = ArraySequence(1)
    with caplog.at_level(logging.DEBUG, logger="seqcontainers.array_sequence"):
        seq.add(1)
        seq.add(2)
    assert "grew buffer 1 -> 10" in caplog.text


def test_from_iterable_sizes_buffer_to_source():
    seq = ArraySequence.from_iterable([1, 2, 3])
    assert seq.capacity == 3
    assert seq.to_list() == [1, 2, 3]


@mark.parametrize("source", [None, [], ()])
def test_from_empty_source(source):
    seq = ArraySequence.from_iterable(source)
    assert seq.size() == 0
    assert seq.capacity == DEFAULT_CAPACITY


def test_insert_shifts_right():
    seq = make("a", "c")
    seq.insert(1, "b")
    assert seq.to_list() == ["a", "b", "c"]
    seq.insert(0, "z")
    assert seq.to_list() == ["z", "a", "b", "c"]


def test_insert_grows_only_when_full():
    seq = make(1, 2)
    seq.insert(0, 0)
    assert seq.capacity == DEFAULT_CAPACITY
    full = ArraySequence.from_iterable([1, 2, 3])
    full.insert(1, 9)
    assert full.capacity == DEFAULT_CAPACITY
    assert full.to_list() == [1, 9, 2, 3]


def test_insert_at_size_is_out_of_range():
    seq = make(1, 2)
    with raises(IndexOutOfRange):
        seq.insert(2, 3)
    with raises(IndexOutOfRange):
        ArraySequence().insert(0, 1)


def test_remove_clears_trailing_slot():
    seq = make(1, 2, 3)
    assert seq.remove(0) == 1
    assert seq.to_list() == [2, 3]
    assert seq._data[2] is None
    assert seq.capacity == DEFAULT_CAPACITY


def test_set_does_not_touch_mod_count():
    seq = make(1, 2)
    before = seq.mod_count
    assert seq.set(1, 5) == 2
    assert seq.mod_count == before
    assert seq.size() == 2


def test_mod_count_counts_structural_changes():
    seq = ArraySequence()
    seq.add(1)
    seq.insert(0, 0)
    seq.remove(1)
    assert seq.mod_count == 3


def test_sub_list_is_independent_copy():
    seq = make(0, 1, 2, 3, 4)
    sub = seq.sub_list(1, 4)
    assert sub.to_list() == [1, 2, 3]
    assert sub.capacity == 3
    sub.set(0, 100)
    sub.add(7)
    assert seq.to_list() == [0, 1, 2, 3, 4]


def test_sub_list_messages():
    seq = make(1, 2, 3)
    with raises(IndexOutOfRange, match=r"from=2, to=1"):
        seq.sub_list(2, 1)
    with raises(IndexOutOfRange, match=r"^from=-1$"):
        seq.sub_list(-1, 2)
    with raises(IndexOutOfRange, match=r"^to=4$"):
        seq.sub_list(0, 4)


def test_equality_and_hash():
    a = make(1, 2, 3)
    b = ArraySequence.from_iterable([1, 2, 3])
    assert a == b
    assert hash(a) == hash(b) == 30817
    assert a != make(1, 2)
    assert a != make(1, 2, 4)
    assert hash(ArraySequence()) == 1


def test_equality_ignores_capacity():
    a = ArraySequence(50)
    a.add_all([1, 2])
    assert a == ArraySequence.from_iterable([1, 2])


def test_not_equal_to_other_kinds():
    assert make(1, 2) != [1, 2]
    assert make(1, 2) != LinkedSequence.from_iterable([1, 2])


def test_hash_handles_none():
    # h = 31 * (31 * 1 + 0) + 7
    assert hash(make(None, 7)) == 968


class _Mutating:
    """Element whose comparison or hashing appends to a target sequence."""

    def __init__(self, target):
        self.target = target

    def __eq__(self, other):
        self.target.add("x")
        return True

    def __hash__(self):
        self.target.add("x")
        return 0


def test_eq_detects_structural_change():
    a = ArraySequence()
    a.add(_Mutating(a))
    b = make(object())
    with raises(ConcurrentStructuralChange):
        a == b


def test_hash_detects_structural_change():
    a = ArraySequence()
    a.add(_Mutating(a))
    with raises(ConcurrentStructuralChange):
        hash(a)


def test_str_and_repr():
    assert str(ArraySequence()) == "[]"
    assert str(make(5)) == "[5]"
    assert str(make(1, None, "a")) == "[1, None, a]"
    assert repr(make(1, "a")) == "ArraySequence([1, 'a'])"
