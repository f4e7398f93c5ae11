from pathlib import Path

from xml_html_converter import settings


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert settings.get_output_dir() == Path(".")
    assert settings.get_include_styles() is True
    assert settings.get_max_text_length() == 100
    assert settings.get_fastmcp_port() == 8978


def test_env_file_and_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text(
        "# converter settings\n"
        "XML2HTML_OUTPUT_DIR=reports\n"
        "XML2HTML_INCLUDE_STYLES=false\n"
        "XML2HTML_MAX_TEXT_LENGTH=40\n"
    )
    monkeypatch.setenv("XML2HTML_MAX_TEXT_LENGTH", "25")

    assert settings.get_output_dir() == Path("reports")
    assert settings.get_include_styles() is False
    assert settings.get_max_text_length() == 25


def test_explicit_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "converter.env"
    config.write_text("FASTMCP_PORT=9100\n")
    monkeypatch.setenv("XML2HTML_CONFIG", str(config))

    assert settings.get_fastmcp_port() == 9100


def test_invalid_max_text_length(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XML2HTML_MAX_TEXT_LENGTH", "lots")

    assert settings.get_max_text_length() == 100
