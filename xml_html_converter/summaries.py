"""Aggregate statistics over extracted records."""

from .models import ElementRecord, ElementSummary, TestRecord, TestStatus, TestSummary


def summarize_tests(records: list[TestRecord]) -> TestSummary:
    summary = TestSummary(total_tests=len(records))
    total_time = 0.0
    for record in records:
        if record.suite_name not in summary.suites:
            summary.suites.append(record.suite_name)
        total_time += record.duration

        if record.status == TestStatus.PASSED:
            summary.passed += 1
        elif record.status == TestStatus.FAILED:
            summary.failed += 1
        elif record.status == TestStatus.ERROR:
            summary.errors += 1
        elif record.status == TestStatus.SKIPPED:
            summary.skipped += 1

    summary.total_time = f"{total_time:.2f}"
    return summary


def summarize_elements(records: list[ElementRecord]) -> ElementSummary:
    if not records:
        return ElementSummary()

    # dict.fromkeys keeps first-seen order
    element_types = list(dict.fromkeys(r.tag_name for r in records))
    return ElementSummary(
        total_elements=len(records),
        unique_elements=len(element_types),
        elements_with_attributes=sum(1 for r in records if r.attributes),
        elements_with_content=sum(1 for r in records if r.text_content),
        max_level=max(r.level for r in records),
        total_attributes=sum(len(r.attributes) for r in records),
        element_types=element_types,
    )
