import asyncio
import json

import pytest

pytest.importorskip("fastmcp")

import mcp_server


def _call(tool, **kwargs):
    fn = getattr(tool, "fn", tool)
    return json.loads(asyncio.run(fn(**kwargs)))


def test_convert_test_report_tool(junit_file):
    result = _call(mcp_server.convert_test_report, xml_file=str(junit_file),
                   output_format="summary")

    assert result["total_tests"] == 3
    assert "test-summary" in result["html_content"]


def test_convert_xml_tool(catalog_file):
    result = _call(mcp_server.convert_xml, xml_file=str(catalog_file), output_format="table")

    assert result["total_elements"] == 5


def test_tool_errors_are_returned(tmp_path):
    result = _call(mcp_server.convert_xml, xml_file=str(tmp_path / "missing.xml"))

    assert "XML file not found" in result["error"]
