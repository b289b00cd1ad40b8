import pytest

from sdoc._config import Settings, load_settings, validate_encoding, validate_toc_depth
from sdoc._files import SourceReadError, read_sources


def test_defaults():
    assert load_settings({}) == Settings(stylesheet="apidoc.css", toc_depth="1-6", output_encoding="utf-8")


def test_values_from_mapping():
    settings = load_settings({
        "SDOC_STYLESHEET": "style/api.css",
        "SDOC_TOC_DEPTH": "3-4",
        "SDOC_OUTPUT_ENCODING": "latin-1",
    })
    assert settings.stylesheet == "style/api.css"
    assert settings.toc_depth == "3-4"
    assert settings.output_encoding == "latin-1"


@pytest.mark.parametrize("value", ["", "abc", "0", "7", "4-2", "1-9"])
def test_invalid_toc_depth(value):
    with pytest.raises(ValueError):
        validate_toc_depth(value)


def test_valid_toc_depth():
    assert validate_toc_depth(" 3 ") == "3"
    assert validate_toc_depth("2-5") == "2-5"


def test_invalid_encoding():
    with pytest.raises(ValueError):
        validate_encoding("no-such-codec")


def test_dotenv_file_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    # setenv + delenv: po teście zmienna wraca do stanu sprzed testu,
    # także gdy ustawi ją load_dotenv
    monkeypatch.setenv("SDOC_STYLESHEET", "placeholder")
    monkeypatch.delenv("SDOC_STYLESHEET")
    (tmp_path / ".env").write_text("SDOC_STYLESHEET=from-dotenv.css\n", encoding="utf-8")
    assert load_settings().stylesheet == "from-dotenv.css"


def test_read_sources_concatenates_without_separator(tmp_path):
    (tmp_path / "a.c").write_bytes(b"/** a")
    (tmp_path / "b.c").write_bytes(b" b **/")
    assert read_sources([tmp_path / "a.c", tmp_path / "b.c"]) == b"/** a b **/"


def test_read_sources_reports_missing_file(tmp_path):
    with pytest.raises(SourceReadError) as exc:
        read_sources([tmp_path / "missing.c"])
    assert "missing.c" in str(exc.value)
    assert isinstance(exc.value, OSError)
