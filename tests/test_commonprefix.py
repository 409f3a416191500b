import pytest

from isismock.commonprefix import common_prefix


@pytest.mark.parametrize(
    "strings, expected",
    [
        (["foo"], "foo"),
        (["foo", "bar"], ""),
        (["prefix_foo", "prefix_bar"], "prefix_"),
        (["prefix foo", "prefix bar"], "prefix "),
    ],
)
def test_everything(strings, expected):
    assert common_prefix(strings) == expected


def test_shortest_is_whole_prefix():
    assert common_prefix(["ab", "abc", "abd"]) == "ab"


def test_accepts_generator():
    assert common_prefix(s for s in ["show", "shutdown"]) == "sh"


def test_empty_raises():
    with pytest.raises(ValueError):
        common_prefix([])