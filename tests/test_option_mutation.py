import pytest
from optionkit import Option, AbsentValueError


def test_insert():
    opt = Option.empty()
    assert opt.insert(3) == 3
    assert opt == Option.of(3)
    assert opt.insert(4) == 4
    assert opt.unwrap() == 4


def test_insert_none_is_present():
    opt = Option.empty()
    assert opt.insert(None) is None
    assert opt.is_some


def test_get_or_insert():
    opt = Option.empty()
    assert opt.get_or_insert(1) == 1
    assert opt.get_or_insert(2) == 1
    assert opt.unwrap() == 1


def test_get_or_insert_with_call_counts():
    calls = []

    def make():
        calls.append(1)
        return "made"

    opt = Option.empty()
    assert opt.get_or_insert_with(make) == "made"
    assert calls == [1]
    assert opt.unwrap() == "made"

    assert opt.get_or_insert_with(make) == "made"
    assert calls == [1]

    present = Option.of("kept")
    assert present.get_or_insert_with(make) == "kept"
    assert calls == [1]


def test_get_or_insert_with_returns_stored_object():
    opt = Option.empty()
    value = opt.get_or_insert_with(list)
    value.append(1)
    assert opt.unwrap() == [1]


def test_take():
    opt = Option.of(1)
    taken = opt.take()
    assert taken == Option.of(1)
    assert opt.is_none
    with pytest.raises(AbsentValueError):
        opt.unwrap()


def test_take_idempotent_on_empty():
    opt = Option.empty()
    assert opt.take().is_none
    assert opt.take().is_none
    assert opt.is_none


def test_take_returns_independent_container():
    opt = Option.of(1)
    taken = opt.take()
    opt.insert(2)
    assert taken == Option.of(1)


def test_replace():
    opt = Option.of(1)
    previous = opt.replace(2)
    assert previous == Option.of(1)
    assert opt == Option.of(2)


def test_replace_on_empty():
    opt = Option.empty()
    previous = opt.replace(5)
    assert previous.is_none
    assert opt.unwrap() == 5


def test_state_machine_round_trip():
    opt = Option.empty()
    opt.get_or_insert(1)
    assert opt.is_some
    opt.take()
    assert opt.is_none
    opt.replace(2)
    assert opt.unwrap() == 2


def test_callable_errors_leave_state_unchanged():
    def boom():
        raise RuntimeError("boom")

    opt = Option.empty()
    with pytest.raises(RuntimeError):
        opt.get_or_insert_with(boom)
    assert opt.is_none


class TrackedOption(Option):
    pass


def test_take_and_replace_keep_subclass():
    opt = TrackedOption.of(1)
    assert isinstance(opt, TrackedOption)
    taken = opt.take()
    assert isinstance(taken, TrackedOption)
    assert taken == Option.of(1)
    previous = opt.replace(2)
    assert isinstance(previous, TrackedOption)
    assert previous.is_none
    assert isinstance(TrackedOption.empty(), TrackedOption)
