"""
Conversion pipelines: load an XML document, extract records, render HTML.

Each converter instance owns the state of exactly one loaded document.
Loading another document replaces its records and summary, so concurrent
conversions must each use their own instance.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from . import extractors, renderers, styles, summaries
from .dom import MinidomTreeProvider, TreeProvider, XmlNode
from .page import GENERIC_THEME, REPORT_THEME, assemble_page

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "summary", "compact", "full", "all")
DEFAULT_OUTPUT_FORMAT = "full"


class XmlConverter(ABC):
    """Base pipeline: extractor, column layout and summary are supplied by subclasses."""

    default_title = "XML Report"
    table_class = "xml-table"
    table_placeholder = renderers.REPORT_TABLE_PLACEHOLDER
    # File suffix used for the complete page when writing files
    full_suffix = "full"
    theme = REPORT_THEME

    def __init__(self, provider: Optional[TreeProvider] = None):
        self.provider = provider or MinidomTreeProvider()
        self.root: Optional[XmlNode] = None
        self.records: list = []
        self.summary = self.summarize([])

    # Strategy hooks

    @abstractmethod
    def extract(self, root: XmlNode) -> list:
        ...

    @abstractmethod
    def summarize(self, records: list):
        ...

    @abstractmethod
    def columns(self, **options) -> list[renderers.Column]:
        ...

    @abstractmethod
    def table_styles(self, table_class: str) -> str:
        ...

    @abstractmethod
    def summary_html(self, summary) -> str:
        ...

    @abstractmethod
    def compact_options(self, **options) -> dict:
        """Display options for the compact table, given the caller's options."""

    # Loading

    def load_string(self, xml_string: str) -> list:
        root = self.provider.parse(xml_string)
        self.root = root
        self.records = self.extract(root)
        self.summary = self.summarize(self.records)
        logger.debug(f"Loaded document <{root.tag_name}> with {len(self.records)} records")
        return self.records

    # Rendering

    def render_table(self, include_styles: bool = True, table_class: Optional[str] = None,
                     **options) -> str:
        table_class = table_class or self.table_class
        return renderers.render_table(
            self.records,
            self.columns(**options),
            table_class,
            styles=self.table_styles if include_styles else None,
            placeholder=self.table_placeholder,
        )

    def render_summary(self) -> str:
        return self.summary_html(self.summary)

    def render_page(self, title: Optional[str] = None, include_summary: bool = True,
                    include_styles: bool = True, **options) -> str:
        summary_html = self.render_summary() if include_summary else ""
        table_html = self.render_table(include_styles=include_styles, **options)
        return assemble_page(title or self.default_title, summary_html, table_html, self.theme)

    def render(self, output_format: str = DEFAULT_OUTPUT_FORMAT, title: Optional[str] = None,
               include_styles: bool = True, **options) -> str:
        """Render a single output format. Unknown formats fall back to the full page."""
        if output_format == "table":
            return self.render_table(include_styles=include_styles, **options)
        if output_format == "summary":
            return self.render_summary()
        if output_format == "compact":
            return self.render_table(include_styles=include_styles,
                                     **self.compact_options(**options))
        if output_format != "full":
            logger.warning(f"Unknown output format '{output_format}', rendering full page")
        return self.render_page(title=title, include_summary=True,
                                include_styles=include_styles, **options)

    def render_all(self, title: Optional[str] = None, include_styles: bool = True,
                   **options) -> dict[str, str]:
        """Render every format, keyed by the file suffix it should be written under."""
        return {
            self.full_suffix: self.render("full", title, include_styles, **options),
            "table": self.render("table", title, include_styles, **options),
            "summary": self.render("summary", title, include_styles, **options),
            "compact": self.render("compact", title, include_styles, **options),
        }

    def suffix_for(self, output_format: str) -> str:
        if output_format in ("table", "summary", "compact"):
            return output_format
        return self.full_suffix


class TestReportConverter(XmlConverter):
    """JUnit-style testsuites/testsuite/testcase reports."""

    default_title = "Test Results Report"
    table_class = "test-results-table"
    table_placeholder = renderers.REPORT_TABLE_PLACEHOLDER
    full_suffix = "full"
    theme = REPORT_THEME

    def extract(self, root):
        return extractors.extract_test_records(root)

    def summarize(self, records):
        return summaries.summarize_tests(records)

    def columns(self, show_suite_info: bool = True, show_timestamps: bool = True):
        return renderers.report_columns(show_suite_info, show_timestamps)

    def table_styles(self, table_class):
        return styles.report_table_styles(table_class)

    def summary_html(self, summary):
        return renderers.render_test_summary(summary)

    def compact_options(self, **options):
        return {"show_suite_info": False, "show_timestamps": False}


class GenericXmlConverter(XmlConverter):
    """Arbitrary XML, flattened element by element."""

    default_title = "XML Data Report"
    table_class = "xml-data-table"
    table_placeholder = renderers.ELEMENT_TABLE_PLACEHOLDER
    full_suffix = "report"
    theme = GENERIC_THEME

    def extract(self, root):
        return extractors.extract_element_records(root)

    def summarize(self, records):
        return summaries.summarize_elements(records)

    def columns(self, show_attributes: bool = True, show_hierarchy: bool = True,
                max_text_length: int = 100):
        return renderers.element_columns(show_attributes, show_hierarchy, max_text_length)

    def table_styles(self, table_class):
        return styles.element_table_styles(table_class)

    def summary_html(self, summary):
        return renderers.render_element_summary(summary)

    def compact_options(self, max_text_length: int = 100, **options):
        return {"show_attributes": False, "show_hierarchy": False,
                "max_text_length": max_text_length}
