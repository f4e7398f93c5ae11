import pytest
import requests

import core
from xml_html_converter.errors import MissingInputError, XmlParseError


def test_report_full_file(junit_file, tmp_path):
    out = tmp_path / "out"
    result = core.convert_test_report(str(junit_file), output_dir=str(out))

    assert result["html_file_paths"] == [str(out / "results-full.html")]
    html = (out / "results-full.html").read_text(encoding="utf-8")
    assert "<title>Test Results Report - results.xml</title>" in html
    assert result["total_tests"] == 3
    assert result["passed_tests"] == 2
    assert result["failed_tests"] == 1
    assert result["total_suites"] == 1
    assert result["total_time"] == "1.23"
    assert result["summary"]["totalTests"] == 3
    assert result["failures"] == [{
        "suite": "LocalTestSuite",
        "name": "test_failure",
        "status": "Failed",
        "failure_message": "Test failed locally",
        "error_message": None,
    }]


def test_report_all_formats_use_distinct_names(junit_file, tmp_path):
    out = tmp_path / "out"
    result = core.convert_test_report(str(junit_file), output_format="all",
                                      output_filename="nightly", output_dir=str(out))

    names = [p.rsplit("/", 1)[-1] for p in result["html_file_paths"]]
    assert names == ["nightly-full.html", "nightly-table.html",
                     "nightly-summary.html", "nightly-compact.html"]
    assert sorted(p.name for p in out.iterdir()) == sorted(names)


def test_report_code_output(junit_file):
    result = core.convert_test_report(str(junit_file), output_type="code", output_format="table",
                                      include_styles=False)

    assert "html_file_paths" not in result
    assert result["html_content"].startswith('<table class="test-results-table">')


def test_failed_count_and_failure_rows(junit_file):
    result = core.convert_test_report(str(junit_file), output_type="code", output_format="summary")

    assert result["failed_tests"] == 1
    assert [(f["name"], f["status"]) for f in result["failures"]] == [("test_failure", "Failed")]
    assert result["failures"][0]["failure_message"] == "Test failed locally"


def test_code_output_all_returns_mapping(junit_file):
    result = core.convert_test_report(str(junit_file), output_type="code", output_format="all")

    assert set(result["html_content"]) == {"full", "table", "summary", "compact"}


def test_generic_files(catalog_file, tmp_path):
    out = tmp_path / "out"
    result = core.convert_generic_xml(str(catalog_file), output_format="all", output_dir=str(out))

    names = [p.rsplit("/", 1)[-1] for p in result["html_file_paths"]]
    assert names == ["catalog-report.html", "catalog-table.html",
                     "catalog-summary.html", "catalog-compact.html"]
    assert result["total_elements"] == 5
    assert result["max_depth"] == 2
    assert result["element_types"] == ["catalog", "book", "title", "price", "slot"]


def test_generic_single_full_uses_report_suffix(catalog_file, tmp_path):
    result = core.convert_generic_xml(str(catalog_file), output_dir=str(tmp_path / "out"))

    assert result["html_file_paths"][0].endswith("catalog-report.html")


def test_generic_max_text_length_from_config(catalog_file, monkeypatch):
    monkeypatch.setenv("XML2HTML_MAX_TEXT_LENGTH", "3")
    result = core.convert_generic_xml(str(catalog_file), output_type="code",
                                      output_format="table")

    assert "XML..." in result["html_content"]


def test_missing_input(tmp_path):
    with pytest.raises(MissingInputError):
        core.convert_test_report(str(tmp_path / "missing.xml"), output_dir=str(tmp_path))


def test_malformed_input_writes_nothing(tmp_path):
    bad = tmp_path / "bad.xml"
    bad.write_text("<testsuites><testsuite>", encoding="utf-8")
    out = tmp_path / "out"

    with pytest.raises(XmlParseError):
        core.convert_test_report(str(bad), output_dir=str(out))
    assert not out.exists()


def test_unknown_output_type(junit_file):
    with pytest.raises(ValueError):
        core.convert_test_report(str(junit_file), output_type="email")


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status
        self.encoding = "utf-8"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_url_input(monkeypatch, local_suite_xml):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        return _FakeResponse(local_suite_xml)

    monkeypatch.setattr(core.requests, "get", fake_get)
    result = core.convert_test_report("https://ci.example.com/artifacts/junit_01.xml",
                                      output_type="code", output_format="summary")

    assert calls == ["https://ci.example.com/artifacts/junit_01.xml"]
    assert result["total_tests"] == 3


def test_url_input_failure(monkeypatch):
    monkeypatch.setattr(core.requests, "get", lambda url, **kwargs: _FakeResponse("", 404))

    with pytest.raises(MissingInputError):
        core.read_xml_source("https://ci.example.com/missing.xml")
