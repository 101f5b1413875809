"""JUnit XML formatter for CI/CD integration.

Each scanned file becomes a testsuite and each finding a testcase. Files
that could not be read are reported as errors.
"""

from __future__ import annotations

from pathlib import Path
from xml.dom import minidom
from xml.etree import ElementTree as ET

from ..models.result import ProjectResult


def build_junit_tree(
    result: ProjectResult,
    fail_on: list[str] | None = None,
    project_name: str = "quantum-audit",
) -> tuple[ET.Element, dict]:
    """Build the <testsuites> element for a project scan.

    Returns the element and a dict with: total_tests, failures, errors, passed.
    """
    if fail_on is None:
        fail_on = ["HIGH"]
    fail_set = set(fail_on)

    testsuites = ET.Element("testsuites")
    testsuites.set("name", project_name)
    testsuites.set("timestamp", result.scanned.strftime("%Y-%m-%dT%H:%M:%S"))

    total_tests = 0
    total_failures = 0
    total_errors = 0

    for file_result in result.files:
        if not file_result.findings and not file_result.error:
            continue

        testsuite = ET.SubElement(testsuites, "testsuite")
        testsuite.set("name", file_result.file)
        suite_tests = 0
        suite_failures = 0
        suite_errors = 0

        if file_result.error:
            suite_tests += 1
            suite_errors += 1
            testcase = ET.SubElement(testsuite, "testcase")
            testcase.set("name", "read")
            testcase.set("classname", file_result.file)
            error = ET.SubElement(testcase, "error")
            error.set("message", file_result.error)
            error.set("type", "read_error")

        for finding in file_result.findings:
            suite_tests += 1

            testcase = ET.SubElement(testsuite, "testcase")
            testcase.set("name", f"{finding.category.value}: {finding.message}")
            testcase.set("classname", file_result.file)
            testcase.set("file", file_result.file)
            if finding.line is not None:
                testcase.set("line", str(finding.line))

            severity = finding.severity.value
            if severity in fail_set:
                suite_failures += 1

                failure = ET.SubElement(testcase, "failure")
                failure.set("message", f"[{severity}] {finding.category.value}")
                failure.set("type", severity.lower())

                text_parts = [f"Severity: {severity}", f"File: {file_result.file}"]
                if finding.line is not None:
                    text_parts.append(f"Line: {finding.line}")
                text_parts.append(f"\nDescription:\n{finding.message}")
                text_parts.append(f"\nRemediation:\n{finding.fix}")

                failure.text = "\n".join(text_parts)

        testsuite.set("tests", str(suite_tests))
        testsuite.set("failures", str(suite_failures))
        testsuite.set("errors", str(suite_errors))
        testsuite.set("skipped", "0")

        total_tests += suite_tests
        total_failures += suite_failures
        total_errors += suite_errors

    testsuites.set("tests", str(total_tests))
    testsuites.set("failures", str(total_failures))
    testsuites.set("errors", str(total_errors))

    stats = {
        "total_tests": total_tests,
        "failures": total_failures,
        "errors": total_errors,
        "passed": total_tests - total_failures - total_errors,
    }
    return testsuites, stats


def render_junit(result: ProjectResult, fail_on: list[str] | None = None) -> str:
    """Render a project scan as a pretty-printed JUnit XML string."""
    testsuites, _ = build_junit_tree(result, fail_on=fail_on)
    rough = ET.tostring(testsuites, encoding="unicode")
    return minidom.parseString(rough).toprettyxml(indent="  ")


def export_junit_results(
    result: ProjectResult,
    output_path: Path,
    fail_on: list[str] | None = None,
) -> dict:
    """Write a project scan as JUnit XML.

    Returns:
        Dict with: path, total_tests, failures, errors, passed.
    """
    testsuites, stats = build_junit_tree(result, fail_on=fail_on)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Pretty-print XML
    rough = ET.tostring(testsuites, encoding="unicode")
    dom = minidom.parseString(rough)
    xml_str = dom.toprettyxml(indent="  ", encoding="UTF-8")
    output_path.write_bytes(xml_str)

    return {"path": str(output_path), **stats}
