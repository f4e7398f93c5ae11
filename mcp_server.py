#!/usr/bin/env python3
"""
MCP Server for xml-html-converter.
Provides tools for converting JUnit reports and arbitrary XML files to HTML.
"""

import asyncio
import json
import logging

from fastmcp import FastMCP

import core
from xml_html_converter.settings import get_fastmcp_port

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# FastMCP server
mcp = FastMCP("xml-html-converter")


@mcp.tool(
    name="convert_test_report",
    description="""Convert a JUnit-style XML test report into HTML.
        Args:
            xml_file: Path or http(s) URL of the XML report
            output_format: table, summary, compact, full or all (default: full)
            output_type: "code" returns the HTML, "file" writes it (default: code)
            output_filename: Base name for written files
            include_styles: Embed table styles (default: true)
            show_suite_info: Include suite columns (default: true)
            show_timestamps: Include timestamp columns (default: true)
    """
)
async def convert_test_report(
    xml_file: str,
    output_format: str = "full",
    output_type: str = "code",
    output_filename: str = None,
    include_styles: bool = True,
    show_suite_info: bool = True,
    show_timestamps: bool = True
) -> str:
    try:
        result = core.convert_test_report(
            xml_file,
            output_type=output_type,
            output_format=output_format,
            output_filename=output_filename,
            include_styles=include_styles,
            show_suite_info=show_suite_info,
            show_timestamps=show_timestamps,
        )
        return json.dumps(result, indent=2, default=str)
    except Exception as e:
        logger.error(f"Error in convert_test_report: {str(e)}")
        return json.dumps({"error": str(e)})


@mcp.tool(
    name="convert_xml",
    description="""Convert any XML document into an HTML table of its elements.
        Args:
            xml_file: Path or http(s) URL of the XML document
            output_format: table, summary, compact, full or all (default: full)
            output_type: "code" returns the HTML, "file" writes it (default: code)
            output_filename: Base name for written files
            include_styles: Embed table styles (default: true)
            show_attributes: Include the attributes column (default: true)
            show_hierarchy: Include parent and level columns (default: true)
            max_text_length: Truncate element text beyond this length (default: 100)
    """
)
async def convert_xml(
    xml_file: str,
    output_format: str = "full",
    output_type: str = "code",
    output_filename: str = None,
    include_styles: bool = True,
    show_attributes: bool = True,
    show_hierarchy: bool = True,
    max_text_length: int = 100
) -> str:
    try:
        result = core.convert_generic_xml(
            xml_file,
            output_type=output_type,
            output_format=output_format,
            output_filename=output_filename,
            include_styles=include_styles,
            show_attributes=show_attributes,
            show_hierarchy=show_hierarchy,
            max_text_length=max_text_length,
        )
        return json.dumps(result, indent=2, default=str)
    except Exception as e:
        logger.error(f"Error in convert_xml: {str(e)}")
        return json.dumps({"error": str(e)})


async def main():
    port = get_fastmcp_port()
    logger.info(f"Starting MCP server on port {port}")
    await mcp.run_async(transport="sse", host="0.0.0.0", port=port)


if __name__ == "__main__":
    asyncio.run(main())
