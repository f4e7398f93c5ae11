"""
Extraction strategies: walk a parsed XML tree and flatten it into records.
"""

import logging
import math
from datetime import datetime
from typing import Optional, Union

from .dom import XmlNode
from .models import ElementRecord, TestRecord, TestStatus

logger = logging.getLogger(__name__)


def parse_duration(value: Optional[str]) -> float:
    """Seconds as a float. Missing or non-numeric values count as zero."""
    if value is None or not value.strip():
        return 0.0
    try:
        seconds = float(value)
    except ValueError:
        logger.debug(f"Non-numeric duration {value!r}, using 0")
        return 0.0
    if not math.isfinite(seconds):
        logger.debug(f"Non-finite duration {value!r}, using 0")
        return 0.0
    return seconds


def format_duration(value: Optional[str]) -> str:
    return f"{parse_duration(value):.2f}"


def format_timestamp(value: Optional[str]) -> str:
    """Render an ISO-8601 timestamp in the locale's format, or pass it through."""
    if not value:
        return ""
    raw = value.strip()
    # fromisoformat() only accepts a trailing Z from 3.11 on
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw).strftime("%c")
    except ValueError:
        logger.debug(f"Unparsable timestamp {value!r}, keeping raw value")
        return value


def parse_count(value: Optional[str]) -> Union[int, str, None]:
    """Integer count, or the raw attribute text when it is not an integer."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return value


def extract_test_records(root: XmlNode) -> list[TestRecord]:
    """Flatten every <testsuite>/<testcase> pair into a TestRecord.

    Suites are visited in document order, whether the root is a <testsuites>
    wrapper or a single <testsuite>. Only direct <testcase> children belong to
    a suite, so nested suites do not produce duplicate rows.
    """
    records = []
    for suite in root.iter("testsuite"):
        suite_name = suite.get("name") or ""
        suite_tests = parse_count(suite.get("tests"))
        suite_failures = parse_count(suite.get("failures"))
        suite_errors = parse_count(suite.get("errors"))
        suite_skipped = parse_count(suite.get("skipped"))
        suite_time = format_duration(suite.get("time"))
        suite_timestamp = format_timestamp(suite.get("timestamp"))

        for testcase in suite.findall("testcase"):
            duration = parse_duration(testcase.get("time"))
            record = TestRecord(
                suite_name=suite_name,
                name=testcase.get("name") or "",
                suite_tests=suite_tests,
                suite_failures=suite_failures,
                suite_errors=suite_errors,
                suite_skipped=suite_skipped,
                suite_time=suite_time,
                suite_timestamp=suite_timestamp,
                classname=testcase.get("classname") or "",
                duration=duration,
                test_time=f"{duration:.2f}",
                test_timestamp=format_timestamp(testcase.get("timestamp")),
            )

            # An <error> overrides a <failure>; both messages are kept.
            failure = testcase.find("failure")
            if failure is not None:
                record.status = TestStatus.FAILED
                record.failure_message = failure.text_content
            error = testcase.find("error")
            if error is not None:
                record.status = TestStatus.ERROR
                record.error_message = error.text_content

            records.append(record)

    logger.debug(f"Extracted {len(records)} test records")
    return records


def _depth(node: XmlNode) -> int:
    level = 0
    parent = node.parent
    while parent is not None:
        level += 1
        parent = parent.parent
    return level


def extract_element_records(root: XmlNode) -> list[ElementRecord]:
    """Pre-order walk emitting one record per element with text or attributes.

    Pure wrapper elements are skipped, but their descendants are still visited
    and keep the depth of the full ancestor chain.
    """
    records = []
    stack = [root]
    while stack:
        node = stack.pop()
        text = node.text_content.strip()
        attributes = dict(node.attributes)
        children = node.children
        if text or attributes:
            parent = node.parent
            records.append(ElementRecord(
                tag_name=node.tag_name,
                text_content=text,
                attributes=attributes,
                parent_tag=parent.tag_name if parent is not None else "root",
                child_count=len(children),
                level=_depth(node),
            ))
        stack.extend(reversed(children))

    logger.debug(f"Extracted {len(records)} element records")
    return records
