
import pytest
from bs4 import BeautifulSoup

from xml_html_converter import models
from xml_html_converter.converter import GenericXmlConverter, XmlConverter
from xml_html_converter.converter import TestReportConverter as ReportConverter


def test_local_suite_scenario(local_suite_xml):
    converter = ReportConverter()
    converter.load_string(local_suite_xml)

    summary = converter.summary
    assert summary.total_tests == 3
    assert summary.passed == 2
    assert summary.failed == 1
    assert summary.errors == 0
    assert summary.total_suites == 1
    assert summary.total_time == "1.23"

    soup = BeautifulSoup(converter.render_table(), "html.parser")
    rows = soup.select("tbody tr")
    assert [r.select_one("td.test-name").get_text() for r in rows] == [
        "test_success_1", "test_failure", "test_success_2",
    ]
    assert "status-failed" in rows[1].select_one("td.status").get("class")
    assert "status-passed" in rows[0].select_one("td.status").get("class")
    assert converter.records[1].failure_message == "Test failed locally"


def test_summary_to_dict(multi_suite_xml):
    converter = ReportConverter()
    converter.load_string(multi_suite_xml)

    assert converter.summary.to_dict() == {
        "totalTests": 5,
        "passed": 3,
        "failed": 0,
        "errors": 2,
        "skipped": 0,
        "totalSuites": 2,
        "suites": ["alpha", "beta"],
        "totalTime": "0.80",
    }


def test_loading_replaces_previous_document(local_suite_xml, multi_suite_xml):
    converter = ReportConverter()
    converter.load_string(multi_suite_xml)
    converter.load_string(local_suite_xml)

    assert len(converter.records) == 3
    assert converter.summary.suites == ["LocalTestSuite"]


def test_unloaded_converter_renders_placeholders():
    converter = ReportConverter()

    assert "<table" not in converter.render_table()
    assert "No test data available" in converter.render_summary()


def test_render_formats(local_suite_xml):
    converter = ReportConverter()
    converter.load_string(local_suite_xml)

    assert converter.render("table").startswith("\n<style>")
    assert converter.render("table", include_styles=False).startswith("<table")
    assert "test-summary" in converter.render("summary")
    assert "<table" not in converter.render("summary")
    compact = BeautifulSoup(converter.render("compact"), "html.parser")
    assert len(compact.select("thead th")) == 3
    assert converter.render("full").startswith("<!DOCTYPE html>")
    assert converter.render("bogus").startswith("<!DOCTYPE html>")


def test_render_all_suffixes(local_suite_xml, catalog_xml):
    report = ReportConverter()
    report.load_string(local_suite_xml)
    generic = GenericXmlConverter()
    generic.load_string(catalog_xml)

    assert list(report.render_all()) == ["full", "table", "summary", "compact"]
    assert list(generic.render_all()) == ["report", "table", "summary", "compact"]


def test_custom_table_class(local_suite_xml):
    converter = ReportConverter()
    converter.load_string(local_suite_xml)
    html = converter.render_table(table_class="nightly")

    assert '<table class="nightly">' in html
    assert ".nightly .status-failed" in html


def test_page_title_escaped_and_summary_optional(local_suite_xml):
    converter = ReportConverter()
    converter.load_string(local_suite_xml)

    page = converter.render_page(title="<Nightly & Co>")
    assert "<title>&lt;Nightly &amp; Co&gt;</title>" in page
    assert "test-summary" in page
    assert "<link" not in page
    assert "<script" not in page

    without = converter.render_page(include_summary=False, include_styles=False)
    assert "test-summary" not in without
    assert "<title>Test Results Report</title>" in without
    assert ".test-results-table th" not in without


def test_generic_catalog_summary(catalog_xml):
    converter = GenericXmlConverter()
    records = converter.load_string(catalog_xml)

    assert all(isinstance(r, models.ElementRecord) for r in records)
    assert converter.summary.to_dict() == {
        "totalElements": 5,
        "uniqueElements": 5,
        "elementsWithAttributes": 3,
        "elementsWithContent": 4,
        "maxLevel": 2,
        "totalAttributes": 4,
        "elementTypes": ["catalog", "book", "title", "price", "slot"],
    }


def test_generic_page_and_compact(catalog_xml):
    converter = GenericXmlConverter()
    converter.load_string(catalog_xml)

    page = converter.render_page()
    assert "<title>XML Data Report</title>" in page
    assert "Generated on" in page
    assert "xml-summary" in page
    assert "XML &amp; You" in page

    compact = BeautifulSoup(converter.render("compact", max_text_length=3), "html.parser")
    assert [th.get_text() for th in compact.select("thead th")] == ["Element", "Content", "Children"]
    assert compact.select("td.content")[2].get_text() == "XML..."


def test_generic_empty_document():
    converter = GenericXmlConverter()
    converter.load_string("<root><child/></root>")

    assert converter.records == []
    assert converter.summary.max_level == 0
    assert "No XML data available" in converter.render_table()
    assert "No XML data available for summary" in converter.render_summary()


def test_base_converter_is_abstract():
    with pytest.raises(TypeError):
        XmlConverter()


def test_generic_deeply_nested_document():
    depth = 1500
    xml = "".join(f'<n i="{k}">' for k in range(depth)) + "</n>" * depth
    converter = GenericXmlConverter()
    records = converter.load_string(xml)

    assert len(records) == depth
    assert records[-1].level == depth - 1
    assert records[-1].parent_tag == "n"
    assert converter.summary.max_level == depth - 1


def test_report_suite_inside_deep_wrappers():
    depth = 1500
    suite = '<testsuite name="deep" tests="1"><testcase name="t" time="0.5"/></testsuite>'
    converter = ReportConverter()
    records = converter.load_string("<g>" * depth + suite + "</g>" * depth)

    assert [(r.suite_name, r.name, r.test_time) for r in records] == [("deep", "t", "0.50")]


def test_table_class_must_be_a_css_identifier(local_suite_xml):
    converter = ReportConverter()
    converter.load_string(local_suite_xml)

    with pytest.raises(ValueError):
        converter.render_table(table_class="x</style><script>")
