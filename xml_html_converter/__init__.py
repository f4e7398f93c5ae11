from xml_html_converter.converter import (
    OUTPUT_FORMATS,
    GenericXmlConverter,
    TestReportConverter,
    XmlConverter,
)
from xml_html_converter.dom import MinidomTreeProvider, TreeProvider, XmlNode
from xml_html_converter.errors import ConversionError, MissingInputError, XmlParseError
from xml_html_converter.markup import escape_html
from xml_html_converter.models import (
    ElementRecord,
    ElementSummary,
    TestRecord,
    TestStatus,
    TestSummary,
)

__all__ = [
    "OUTPUT_FORMATS",
    "XmlConverter",
    "TestReportConverter",
    "GenericXmlConverter",
    "TreeProvider",
    "MinidomTreeProvider",
    "XmlNode",
    "ConversionError",
    "XmlParseError",
    "MissingInputError",
    "escape_html",
    "TestRecord",
    "TestStatus",
    "TestSummary",
    "ElementRecord",
    "ElementSummary",
]
