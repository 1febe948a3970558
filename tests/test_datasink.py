import pytest

from transitmap.datasink import DataSink, StringDataSink


def test_empty():
    assert StringDataSink().string() == ""


def test_put():
    sink = StringDataSink()
    for ch in "Hell":
        sink.put(ch)
    assert sink.string() == "Hell"
    sink.put("o")
    assert sink.string() == "Hello"


def test_write():
    sink = StringDataSink()
    sink.write(["H", "e", "l", "l", "o"])
    assert sink.string() == "Hello"
    sink.write([" ", "W", "o", "r", "l", "d"])
    assert sink.string() == "Hello World"


def test_write_string():
    sink = StringDataSink()
    sink.write("Hello")
    sink.write(" World")
    assert sink.string() == "Hello World"


def test_put_rejects_multiple_characters():
    sink = StringDataSink()
    with pytest.raises(ValueError):
        sink.put("ab")
    assert sink.string() == ""


def test_data_sink_is_abstract():
    with pytest.raises(TypeError):
        DataSink()