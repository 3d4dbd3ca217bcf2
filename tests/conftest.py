from collections import ChainMap

import pytest


class Record:
    kind = "record"  # class attribute, inherited by every instance

    def __init__(self, **fields):
        for name, value in fields.items():
            setattr(self, name, value)


@pytest.fixture
def abc():
    return {"a": 1, "b": 2, "c": 3}


@pytest.fixture
def mixed():
    return {"zero": 0, "one": 1, "empty": "", "word": "x", "none": None, "two": 2}


@pytest.fixture
def chained():
    return ChainMap({"own": 1, "also_own": 2}, {"inherited": 3, "own": 99})


@pytest.fixture
def record():
    return Record(x=10, y=20)
