from pathlib import Path

import pytest  # noqa

import run
from huffcodec.errors import EmptyInput, InvalidFormat


_data = [
    "hello, huffman!\n",
    "windows\r\nline endings\r\n",
    "no trailing newline",
]


@pytest.mark.parametrize("text", _data)
def test_encode_decode_files(tmp_path: Path, text: str):
    source = tmp_path / "source.txt"
    encoded = tmp_path / "encoded.txt"
    restored = tmp_path / "restored.txt"
    source.write_bytes(text.encode("utf-8"))

    run.encode(str(source), str(encoded))
    run.decode(str(encoded), str(restored))

    assert restored.read_bytes() == source.read_bytes()


def test_encode_reports(tmp_path: Path, capsys):
    source = tmp_path / "source.txt"
    source.write_text("aaaa", encoding="utf-8")
    encoded = tmp_path / "encoded.txt"

    run.encode(str(source), str(encoded))

    assert encoded.read_text(encoding="utf-8") == "a:0\n0000"
    out = capsys.readouterr().out
    assert f"Done! Check {encoded} for the result." in out
    assert "Bits per symbol: 1.0000" in out


def test_encode_empty_file(tmp_path: Path):
    source = tmp_path / "source.txt"
    source.write_text("", encoding="utf-8")
    encoded = tmp_path / "encoded.txt"

    with pytest.raises(EmptyInput):
        run.encode(str(source), str(encoded))
    assert not encoded.exists()


def test_decode_invalid_document(tmp_path: Path):
    encoded = tmp_path / "encoded.txt"
    encoded.write_text("not-a-valid-document", encoding="utf-8")
    restored = tmp_path / "restored.txt"

    with pytest.raises(InvalidFormat):
        run.decode(str(encoded), str(restored))
    assert not restored.exists()


def test_main_reports_error(tmp_path: Path, monkeypatch, capsys):
    encoded = tmp_path / "encoded.txt"
    encoded.write_text("not-a-valid-document", encoding="utf-8")
    restored = tmp_path / "restored.txt"
    monkeypatch.setattr(
        "sys.argv", ["run.py", "decode", str(encoded), str(restored)]
    )

    with pytest.raises(SystemExit) as e:
        run.main()

    assert e.value.code == 1
    assert "Error: Invalid encoding" in capsys.readouterr().err
    assert not restored.exists()
