"""
Table and summary rendering.

Both pipelines render through `render_table`; they only differ in the column
layout they pass in and the stylesheet scoped to their table class.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .markup import escape_html, format_attributes, status_class, truncate, validate_table_class
from .models import ElementSummary, TestSummary
from .styles import ELEMENT_SUMMARY_CSS, REPORT_SUMMARY_CSS

REPORT_TABLE_PLACEHOLDER = "<p>No test data available. Please load an XML file first.</p>"
ELEMENT_TABLE_PLACEHOLDER = "<p>No XML data available. Please load an XML file first.</p>"
REPORT_SUMMARY_PLACEHOLDER = "<p>No test data available for summary.</p>"
ELEMENT_SUMMARY_PLACEHOLDER = "<p>No XML data available for summary.</p>"


@dataclass
class Column:
    """A table column: header text, cell value and optional cell CSS class."""
    header: str
    value: Callable[[Any], Any]
    css_class: Optional[Callable[[Any], str]] = None


def _cell(column: Column, record) -> str:
    value = column.value(record)
    if value is None:
        value = ""
    text = escape_html(value) if isinstance(value, str) else str(value)
    if column.css_class is None:
        return f"<td>{text}</td>"
    return f'<td class="{column.css_class(record)}">{text}</td>'


def render_table(records: list, columns: list[Column], table_class: str,
                 styles: Optional[Callable[[str], str]] = None,
                 placeholder: str = REPORT_TABLE_PLACEHOLDER) -> str:
    """Render records as an HTML table, optionally preceded by its stylesheet.

    An empty record list yields the placeholder paragraph instead of a table.
    Raises ValueError when `table_class` is not a CSS identifier.
    """
    validate_table_class(table_class)
    if not records:
        return placeholder

    parts = []
    if styles is not None:
        parts.append(styles(table_class))

    parts.append(f'<table class="{escape_html(table_class)}">')
    parts.append("<thead><tr>")
    parts.extend(f"<th>{escape_html(c.header)}</th>" for c in columns)
    parts.append("</tr></thead>")

    parts.append("<tbody>")
    for record in records:
        parts.append("<tr>")
        parts.extend(_cell(c, record) for c in columns)
        parts.append("</tr>")
    parts.append("</tbody>")
    parts.append("</table>")
    return "".join(parts)


def report_columns(show_suite_info: bool = True,
                        show_timestamps: bool = True) -> list[Column]:
    columns = []
    if show_suite_info:
        columns += [
            Column("Suite Name", lambda r: r.suite_name),
            Column("Suite Tests", lambda r: r.suite_tests),
            Column("Suite Failures", lambda r: r.suite_failures),
            Column("Suite Time (s)", lambda r: r.suite_time),
        ]
        if show_timestamps:
            columns.append(Column("Suite Timestamp", lambda r: r.suite_timestamp))
    columns += [
        Column("Test Name", lambda r: r.name, lambda r: "test-name"),
        Column("Status", lambda r: r.status.value,
               lambda r: f"status {status_class(r.status.value)}"),
        Column("Test Time (s)", lambda r: r.test_time),
    ]
    if show_timestamps:
        columns.append(Column("Test Timestamp", lambda r: r.test_timestamp))
    return columns


def element_columns(show_attributes: bool = True, show_hierarchy: bool = True,
                    max_text_length: int = 100) -> list[Column]:
    columns = [Column("Element", lambda r: r.tag_name, lambda r: "element-name")]
    if show_hierarchy:
        columns += [
            Column("Parent", lambda r: r.parent_tag, lambda r: "parent-element"),
            Column("Level", lambda r: r.level, lambda r: f"level-{r.level}"),
        ]
    columns.append(Column("Content",
                          lambda r: truncate(r.text_content, max_text_length),
                          lambda r: "content"))
    if show_attributes:
        columns.append(Column("Attributes", lambda r: format_attributes(r.attributes),
                              lambda r: "attributes"))
    columns.append(Column("Children", lambda r: r.child_count, lambda r: "child-count"))
    return columns


def render_test_summary(summary: TestSummary) -> str:
    if summary.total_tests == 0:
        return REPORT_SUMMARY_PLACEHOLDER

    items = [
        ("Total Tests:", summary.total_tests, ""),
        ("Passed:", summary.passed, " passed"),
        ("Failed:", summary.failed, " failed"),
        ("Errors:", summary.errors, " error"),
        ("Skipped:", summary.skipped, ""),
        ("Total Suites:", summary.total_suites, ""),
        ("Total Time:", f"{summary.total_time}s", ""),
    ]
    cards = "".join(
        f"""
        <div class="summary-item">
            <span class="summary-label">{label}</span>
            <span class="summary-value{modifier}">{escape_html(str(value))}</span>
        </div>"""
        for label, value, modifier in items
    )
    return f"""
<div class="test-summary">
    <h2>Test Results Summary</h2>
    <div class="summary-grid">{cards}
    </div>
</div>
{REPORT_SUMMARY_CSS}"""


def render_element_summary(summary: ElementSummary) -> str:
    if summary.total_elements == 0:
        return ELEMENT_SUMMARY_PLACEHOLDER

    cards = [
        ("📋", summary.total_elements, "Total Elements"),
        ("🔖", summary.unique_elements, "Unique Tags"),
        ("⚙️", summary.elements_with_attributes, "With Attributes"),
        ("📝", summary.elements_with_content, "With Content"),
        ("📊", summary.max_level, "Max Depth"),
        ("🏷️", summary.total_attributes, "Total Attributes"),
    ]
    cards_html = "".join(
        f"""
        <div class="summary-card">
            <div class="summary-icon">{icon}</div>
            <div class="summary-content">
                <span class="summary-value">{value}</span>
                <span class="summary-label">{label}</span>
            </div>
        </div>"""
        for icon, value, label in cards
    )
    tags_html = "".join(f'<span class="element-tag">{escape_html(tag)}</span>'
                        for tag in summary.element_types)
    return f"""
<div class="xml-summary">
    <h2>📊 XML Structure Summary</h2>
    <div class="summary-grid">{cards_html}
    </div>
    <div class="element-types">
        <h3>Element Types Found:</h3>
        <div class="element-tags">{tags_html}</div>
    </div>
</div>
{ELEMENT_SUMMARY_CSS}"""
