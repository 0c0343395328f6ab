import pytest

from aocrun.day import Day
from aocrun.day import execute
from aocrun.day import Registry
from aocrun.exceptions import ExecutionError
from aocrun.exceptions import RegistryError


def test_day_is_abstract():
    with pytest.raises(TypeError):
        Day()


def test_registry_order(make_day):
    registry = Registry([make_day(n) for n in (5, 1, 3)])
    assert registry.day_numbers == [1, 3, 5]
    assert [impl.day for impl in registry] == [1, 3, 5]
    assert len(registry) == 3
    assert 3 in registry
    assert 2 not in registry
    assert registry[5].day == 5


def test_registry_duplicate(make_day):
    with pytest.raises(RegistryError) as cm:
        Registry([make_day(1), make_day(2), make_day(1)])
    assert "day 1 registered twice" in str(cm.value)


def test_registry_rejects_non_days():
    with pytest.raises(RegistryError):
        Registry([object()])


def test_registry_needs_day_number(make_day):
    impl = make_day(1)
    impl.day = "one"
    with pytest.raises(RegistryError):
        Registry([impl])


def test_missing_registry_entry(make_day):
    with pytest.raises(KeyError):
        Registry([make_day(1)])[2]


def test_has_example(make_day):
    assert not make_day(1).has_example
    assert make_day(1, example_input="").has_example


def test_repr(make_day):
    assert repr(make_day(3)) == "<Day03 day=3>"


def test_execute(sum_squares):
    impl = sum_squares()
    output, nums = execute(impl, 1, "4 5")
    assert (output, nums) == (9, [4, 5])
    assert execute(impl, 2, "4 5", nums) == 41


def test_execute_wraps_errors(sum_squares):
    with pytest.raises(ExecutionError) as cm:
        execute(sum_squares(), 1, "x")
    assert str(cm.value).startswith("day 1 part 1 raised ValueError(")
    assert cm.value.phase == "part 1"
    assert isinstance(cm.value.__cause__, ValueError)


def test_execute_custom_phase(sum_squares):
    with pytest.raises(ExecutionError) as cm:
        execute(sum_squares(), 2, "1 2", context=None, phase="example part 2")
    assert cm.value.day == 1
    assert cm.value.phase == "example part 2"
