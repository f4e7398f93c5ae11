#!/usr/bin/env python3
"""
Core operations shared between MCP server and CLI.
Contains the conversion logic: read the XML input, run one pipeline, and
either return the rendered HTML or write it to files.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests

from xml_html_converter.converter import (
    DEFAULT_OUTPUT_FORMAT,
    GenericXmlConverter,
    TestReportConverter,
    XmlConverter,
)
from xml_html_converter.errors import MissingInputError
from xml_html_converter.models import TestStatus
from xml_html_converter.settings import get_include_styles, get_max_text_length, get_output_dir

logger = logging.getLogger(__name__)

OUTPUT_TYPES = ("file", "code")


def _is_url(source: str) -> bool:
    return urlparse(str(source)).scheme in ("http", "https")


def read_xml_source(source: str) -> str:
    """
    Read XML content from a local path or an http(s) URL.

    Raises:
        MissingInputError: If the file does not exist or the download fails.
    """
    if _is_url(source):
        logger.info(f"Downloading {source}")
        try:
            response = requests.get(source, timeout=60,
                                    headers={"User-Agent": "xml-html-converter/0.1.0"})
            response.raise_for_status()
        except requests.RequestException as e:
            raise MissingInputError(f"Failed to download XML file {source}: {e}") from e
        response.encoding = response.encoding or "utf-8"
        return response.text

    path = Path(source)
    if not path.is_file():
        raise MissingInputError(f"XML file not found: {source}")
    return path.read_text(encoding="utf-8")


def _source_name(source: str) -> str:
    if _is_url(source):
        return Path(urlparse(source).path).name or "report.xml"
    return Path(source).name


def write_html_files(contents: dict[str, str], base_name: str,
                     output_dir: Optional[Path] = None) -> list[str]:
    """
    Write each rendered document to `<base_name>-<suffix>.html`.

    Every file goes through a temp file and an atomic rename, so an
    interrupted run never leaves a truncated report behind.
    """
    output_dir = Path(output_dir) if output_dir else get_output_dir()
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = []
    for suffix, html in contents.items():
        target = output_dir / f"{base_name}-{suffix}.html"
        temp_fd, temp_path = tempfile.mkstemp(dir=output_dir, suffix='.tmp')
        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                f.write(html)
            os.replace(temp_path, target)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise
        logger.info(f"Generated: {target}")
        paths.append(str(target))
    return paths


def _run(converter: XmlConverter, xml_file: str, title: str, output_type: str,
         output_format: str, output_filename: Optional[str], output_dir: Optional[str],
         include_styles: bool, options: dict) -> dict:
    """Load, render and deliver one document. Returns the output values."""
    if output_type not in OUTPUT_TYPES:
        raise ValueError(f"Unknown output type '{output_type}', expected one of {OUTPUT_TYPES}")

    logger.info(f"Converting XML file: {xml_file}")
    logger.info(f"Output type: {output_type}")
    logger.info(f"Output format: {output_format}")

    content = read_xml_source(xml_file)
    logger.info(f"XML file size: {len(content)} characters")
    converter.load_string(content)

    result = {"xml_file": str(xml_file), "output_type": output_type,
              "output_format": output_format}

    if output_format == "all":
        rendered = converter.render_all(title=title, include_styles=include_styles, **options)
    else:
        html = converter.render(output_format, title=title,
                                include_styles=include_styles, **options)
        rendered = {converter.suffix_for(output_format): html}

    if output_type == "code":
        result["html_content"] = rendered if output_format == "all" else next(iter(rendered.values()))
    else:
        base_name = output_filename or Path(_source_name(xml_file)).stem
        result["html_file_paths"] = write_html_files(rendered, base_name, output_dir)

    return result


def convert_test_report(
    xml_file: str,
    output_type: str = "file",
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    output_filename: str = None,
    output_dir: str = None,
    include_styles: bool = None,
    show_suite_info: bool = True,
    show_timestamps: bool = True
) -> dict:
    """
    Convert a JUnit-style XML report to HTML.

    Args:
        xml_file: Path or http(s) URL of the XML report
        output_type: "file" to write HTML files, "code" to return the HTML inline
        output_format: table, summary, compact, full or all
        output_filename: Base name for written files (defaults to the XML file stem)
        output_dir: Directory for written files (defaults to XML2HTML_OUTPUT_DIR)
        include_styles: Embed table styles (defaults to XML2HTML_INCLUDE_STYLES)
        show_suite_info: Include suite columns in the table
        show_timestamps: Include timestamp columns in the table

    Returns:
        dict with summary counts, failing tests and the HTML or file paths
    """
    if include_styles is None:
        include_styles = get_include_styles()

    converter = TestReportConverter()
    title = f"Test Results Report - {_source_name(xml_file)}"
    result = _run(converter, xml_file, title, output_type, output_format, output_filename,
                  output_dir, include_styles,
                  {"show_suite_info": show_suite_info, "show_timestamps": show_timestamps})

    summary = converter.summary
    logger.info(f"Test Results Summary: {summary.total_tests} tests, "
                f"{summary.passed} passed, {summary.failed} failed")

    result.update({
        "summary": summary.to_dict(),
        "total_tests": summary.total_tests,
        "passed_tests": summary.passed,
        "failed_tests": summary.failed,
        "error_tests": summary.errors,
        "skipped_tests": summary.skipped,
        "total_suites": summary.total_suites,
        "total_time": summary.total_time,
        "failures": [
            {
                "suite": r.suite_name,
                "name": r.name,
                "status": r.status.value,
                "failure_message": r.failure_message,
                "error_message": r.error_message,
            }
            for r in converter.records
            if r.status in (TestStatus.FAILED, TestStatus.ERROR)
        ],
    })
    return result


def convert_generic_xml(
    xml_file: str,
    output_type: str = "file",
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    output_filename: str = None,
    output_dir: str = None,
    include_styles: bool = None,
    show_attributes: bool = True,
    show_hierarchy: bool = True,
    max_text_length: int = None
) -> dict:
    """
    Convert an arbitrary XML document to an HTML element table.

    Args:
        xml_file: Path or http(s) URL of the XML document
        output_type: "file" to write HTML files, "code" to return the HTML inline
        output_format: table, summary, compact, full or all
        output_filename: Base name for written files (defaults to the XML file stem)
        output_dir: Directory for written files (defaults to XML2HTML_OUTPUT_DIR)
        include_styles: Embed table styles (defaults to XML2HTML_INCLUDE_STYLES)
        show_attributes: Include the attributes column
        show_hierarchy: Include the parent and level columns
        max_text_length: Truncate element text beyond this many characters

    Returns:
        dict with element counts and the HTML or file paths
    """
    if include_styles is None:
        include_styles = get_include_styles()
    if max_text_length is None:
        max_text_length = get_max_text_length()

    converter = GenericXmlConverter()
    title = f"XML Data Report - {_source_name(xml_file)}"
    result = _run(converter, xml_file, title, output_type, output_format, output_filename,
                  output_dir, include_styles,
                  {"show_attributes": show_attributes, "show_hierarchy": show_hierarchy,
                   "max_text_length": max_text_length})

    summary = converter.summary
    logger.info(f"XML Structure: {summary.total_elements} elements, "
                f"{summary.unique_elements} unique types, max depth {summary.max_level}")

    result.update({
        "summary": summary.to_dict(),
        "total_elements": summary.total_elements,
        "unique_elements": summary.unique_elements,
        "elements_with_attributes": summary.elements_with_attributes,
        "elements_with_content": summary.elements_with_content,
        "max_depth": summary.max_level,
        "total_attributes": summary.total_attributes,
        "element_types": list(summary.element_types),
    })
    return result
