"""
Data models for converted XML records and their summaries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class TestStatus(Enum):
    """Status of a single test case."""
    PASSED = "Passed"
    FAILED = "Failed"
    ERROR = "Error"
    SKIPPED = "Skipped"


@dataclass
class TestRecord:
    """One row per <testcase>, with its suite's metadata copied on."""
    suite_name: str
    name: str
    suite_tests: Union[int, str, None] = None
    suite_failures: Union[int, str, None] = None
    suite_errors: Union[int, str, None] = None
    suite_skipped: Union[int, str, None] = None
    suite_time: str = "0.00"
    suite_timestamp: str = ""
    classname: str = ""
    duration: float = 0.0
    test_time: str = "0.00"
    test_timestamp: str = ""
    status: TestStatus = TestStatus.PASSED
    failure_message: Optional[str] = None
    error_message: Optional[str] = None


@dataclass
class ElementRecord:
    """One row per XML element that carries text or attributes."""
    tag_name: str
    text_content: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    parent_tag: str = "root"
    child_count: int = 0
    level: int = 0

    @property
    def has_children(self) -> bool:
        return self.child_count > 0


@dataclass
class TestSummary:
    """Aggregate counts over all test records of a document."""
    total_tests: int = 0
    passed: int = 0
    failed: int = 0
    errors: int = 0
    skipped: int = 0
    suites: list[str] = field(default_factory=list)
    total_time: str = "0.00"

    @property
    def total_suites(self) -> int:
        return len(self.suites)

    def to_dict(self) -> dict:
        return {
            "totalTests": self.total_tests,
            "passed": self.passed,
            "failed": self.failed,
            "errors": self.errors,
            "skipped": self.skipped,
            "totalSuites": self.total_suites,
            "suites": list(self.suites),
            "totalTime": self.total_time,
        }


@dataclass
class ElementSummary:
    """Aggregate counts over all element records of a document."""
    total_elements: int = 0
    unique_elements: int = 0
    elements_with_attributes: int = 0
    elements_with_content: int = 0
    max_level: int = 0
    total_attributes: int = 0
    element_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalElements": self.total_elements,
            "uniqueElements": self.unique_elements,
            "elementsWithAttributes": self.elements_with_attributes,
            "elementsWithContent": self.elements_with_content,
            "maxLevel": self.max_level,
            "totalAttributes": self.total_attributes,
            "elementTypes": list(self.element_types),
        }
