#!/usr/bin/env python3
"""CLI for XML to HTML Converter."""

import argparse
import json
import logging
import sys

import core
from xml_html_converter.converter import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS
from xml_html_converter.errors import ConversionError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )


def _common_kwargs(args) -> dict:
    return {
        "output_type": args.output_type,
        "output_format": args.output_format,
        "output_filename": args.output_filename,
        "output_dir": args.output_dir,
        "include_styles": False if args.no_styles else None,
    }


def _print_result(result: dict, rows: list[tuple[str, str]], fmt: str):
    if fmt == 'json':
        print(json.dumps(result, indent=2, default=str))
        return

    print(f"\n{'='*60}")
    print(f"Source: {result['xml_file']}")
    for label, key in rows:
        value = result.get(key)
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        print(f"  {label:<26}{value}")

    if "html_file_paths" in result:
        print(f"\nGenerated files ({len(result['html_file_paths'])}):")
        for path in result["html_file_paths"]:
            print(f"  - {path}")
    print(f"{'='*60}\n")

    content = result.get("html_content")
    if isinstance(content, dict):
        for suffix, html in content.items():
            print(f"<!-- {suffix} -->")
            print(html)
    elif content is not None:
        print(content)


def cmd_report(args):
    """Convert a JUnit-style test report."""
    result = core.convert_test_report(
        args.xml_file,
        show_suite_info=not args.hide_suite_info,
        show_timestamps=not args.hide_timestamps,
        **_common_kwargs(args)
    )

    failures = result.get("failures", [])
    if failures and args.format == 'text':
        print(f"\nFailed Tests ({len(failures)}):")
        for t in failures[:10]:
            print(f"  - [{t['status']}] {t['suite']} :: {t['name'][:70]}")
        if len(failures) > 10:
            print(f"  ... and {len(failures) - 10} more")

    _print_result(result, [
        ("Total Tests:", "total_tests"),
        ("Passed:", "passed_tests"),
        ("Failed:", "failed_tests"),
        ("Errors:", "error_tests"),
        ("Skipped:", "skipped_tests"),
        ("Total Suites:", "total_suites"),
        ("Total Time (s):", "total_time"),
    ], args.format)
    return 0


def cmd_generic(args):
    """Convert an arbitrary XML document."""
    result = core.convert_generic_xml(
        args.xml_file,
        show_attributes=not args.hide_attributes,
        show_hierarchy=not args.hide_hierarchy,
        max_text_length=args.max_text_length,
        **_common_kwargs(args)
    )
    _print_result(result, [
        ("Total Elements:", "total_elements"),
        ("Unique Element Types:", "unique_elements"),
        ("Elements with Attributes:", "elements_with_attributes"),
        ("Elements with Content:", "elements_with_content"),
        ("Maximum Depth:", "max_depth"),
        ("Total Attributes:", "total_attributes"),
        ("Element Types:", "element_types"),
    ], args.format)
    return 0


def _add_output_args(p):
    p.add_argument('xml_file', help='XML file path or http(s) URL')
    p.add_argument('--output-type', choices=list(core.OUTPUT_TYPES), default='file',
                   help='Write HTML files or print the HTML (default: file)')
    p.add_argument('--output-format', choices=list(OUTPUT_FORMATS), default=DEFAULT_OUTPUT_FORMAT,
                   help='Which HTML to produce (default: full)')
    p.add_argument('--output-filename', help='Base name for generated files (default: XML file stem)')
    p.add_argument('--output-dir', help='Directory for generated files (default: XML2HTML_OUTPUT_DIR or .)')
    p.add_argument('--no-styles', action='store_true', help='Do not embed table styles')
    p.add_argument('--format', '-f', choices=['text', 'json'], default='text')


def main(argv=None):
    parser = argparse.ArgumentParser(description='XML to HTML Converter')
    parser.add_argument('-v', '--verbose', action='store_true')

    sub = parser.add_subparsers(dest='command')

    p = sub.add_parser('report', help='Convert a JUnit XML test report')
    _add_output_args(p)
    p.add_argument('--hide-suite-info', action='store_true', help='Omit suite columns')
    p.add_argument('--hide-timestamps', action='store_true', help='Omit timestamp columns')

    p = sub.add_parser('generic', help='Convert any XML document into an element table')
    _add_output_args(p)
    p.add_argument('--hide-attributes', action='store_true', help='Omit the attributes column')
    p.add_argument('--hide-hierarchy', action='store_true', help='Omit parent and level columns')
    p.add_argument('--max-text-length', type=int,
                   help='Truncate element text beyond this length (default: 100)')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    cmds = {
        'report': cmd_report,
        'generic': cmd_generic,
    }
    try:
        return cmds[args.command](args)
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
