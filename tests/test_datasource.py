import pytest

from transitmap.datasource import DataSource, StringDataSource


def test_end():
    assert StringDataSource("").end() is True
    assert StringDataSource("Hello").end() is False


def test_peek_does_not_consume():
    assert StringDataSource("").peek() is None
    source1 = StringDataSource("Hello")
    assert source1.peek() == "H"
    assert source1.peek() == "H"
    source2 = StringDataSource("Bye")
    assert source2.peek() == "B"
    assert source2.peek() == "B"


def test_get_consumes():
    assert StringDataSource("").get() is None
    source1 = StringDataSource("Hello")
    assert source1.get() == "H"
    assert source1.peek() == "e"
    assert source1.peek() == "e"
    source2 = StringDataSource("Bye")
    assert source2.get() == "B"
    assert source2.peek() == "y"
    assert source2.peek() == "y"


def test_read():
    assert StringDataSource("").read(3) == ""
    source1 = StringDataSource("Hello")
    assert source1.read(4) == "Hell"
    assert source1.peek() == "o"
    source2 = StringDataSource("Bye")
    assert source2.read(4) == "Bye"
    assert source2.peek() is None
    assert source2.end() is True


def test_get_until_end_returns_all_characters():
    source = StringDataSource("Hello")
    chars = []
    while not source.end():
        chars.append(source.get())
    assert "".join(chars) == "Hello"
    assert source.get() is None


def test_read_negative_count_reads_nothing():
    source = StringDataSource("Hello")
    assert source.read(-1) == ""
    assert source.peek() == "H"


def test_data_source_is_abstract():
    with pytest.raises(TypeError):
        DataSource()