import pook as pook_mod
import pytest

from aocrun.day import Day


class SumSquares(Day):
    # part 1 sums the numbers, part 2 reuses the parsed numbers via the context
    day = 1
    example_input = "1 2 3"
    example_part_1 = 6
    example_part_2 = 14

    def execute_part_1(self, data):
        nums = [int(x) for x in data.split()]
        return sum(nums), nums

    def execute_part_2(self, data, nums):
        return sum(n * n for n in nums)


class Echo(Day):
    day = 2

    def execute_part_1(self, data):
        return data.upper(), len(data)

    def execute_part_2(self, data, context):
        return f"{data}:{context}"


@pytest.fixture
def inputs_dir(tmp_path):
    return tmp_path / "inputs"


@pytest.fixture
def session_file(tmp_path):
    return tmp_path / "session"


@pytest.fixture(autouse=True)
def isolated_paths(inputs_dir, session_file, monkeypatch):
    monkeypatch.setattr("aocrun.config.INPUTS_DIR", inputs_dir)
    monkeypatch.setattr("aocrun.config.SESSION_FILE", session_file)
    monkeypatch.delenv("AOC_SESSION", raising=False)


@pytest.fixture
def test_token(session_file):
    session_file.write_text("thetesttoken")
    return session_file


@pytest.fixture(autouse=True)
def pook():
    # tests never talk to the AoC server, any unmocked request is an error
    pook_mod.on()
    yield pook_mod
    pook_mod.off()
    pook_mod.reset()


@pytest.fixture
def make_day():
    def factory(n, base=Echo, **attrs):
        cls = type(f"Day{n:02d}", (base,), {"day": n, **attrs})
        return cls()

    return factory


@pytest.fixture
def sum_squares():
    return SumSquares
