import io

import pytest

from bigmul import main, multiply_text
from errors import MalformedInputError

def run_main(monkeypatch, data):
    if isinstance(data, str):
        data = data.encode("ascii")
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))
    return main([])

def test_prints_product(monkeypatch, capsys):
    assert run_main(monkeypatch, "123 456\n") == 0
    assert capsys.readouterr().out == "56088\n"

def test_prints_zero(monkeypatch, capsys):
    assert run_main(monkeypatch, "0 987654321") == 0
    assert capsys.readouterr().out == "0\n"

@pytest.mark.parametrize("text", ["", "42", "12 x3"])
def test_malformed_input_is_reported(monkeypatch, capsys, text):
    assert run_main(monkeypatch, text) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")

@pytest.mark.parametrize("data", [b"\xff\xfe 12\n", b"12 3\xc3\xa9\n", "١٢ 3".encode("utf-8")])
def test_undecodable_input_is_reported(monkeypatch, capsys, data):
    assert run_main(monkeypatch, data) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")
    assert "Traceback" not in captured.err

def test_multiply_text_accepts_bytes():
    assert multiply_text(b"123 456\n") == "56088"
    with pytest.raises(MalformedInputError):
        multiply_text(b"\xff\xfe 12\n")

def test_too_large_is_reported(monkeypatch, capsys):
    monkeypatch.setattr("bigmul.MAX_DIGITS", 3)
    assert run_main(monkeypatch, "1234 5") == 1
    assert "maximum is 3" in capsys.readouterr().err
