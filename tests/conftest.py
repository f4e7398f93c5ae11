import pytest

LOCAL_SUITE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<testsuites>
  <testsuite name="LocalTestSuite" tests="3" failures="1" time="1.234">
    <testcase name="test_success_1" classname="com.example.LocalTest" time="0.123"/>
    <testcase name="test_failure" classname="com.example.LocalTest" time="0.456">
      <failure message="Test failed locally">Test failed locally</failure>
    </testcase>
    <testcase name="test_success_2" classname="com.example.LocalTest" time="0.655"/>
  </testsuite>
</testsuites>
"""

MULTI_SUITE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<testsuites>
  <testsuite name="alpha" tests="2" failures="0" skipped="1" time="0.5"
             timestamp="2024-01-15T10:30:00">
    <testcase name="a1" time="0.25"/>
    <testcase name="a2" time="0.25"><skipped/></testcase>
  </testsuite>
  <testsuite name="beta" tests="3" failures="1" time="oops">
    <testcase name="b1" time="0.1"/>
    <testcase name="b2">
      <failure>first</failure>
      <error>second</error>
    </testcase>
    <testcase name="b3" time="0.2"><error message="boom">Traceback</error></testcase>
  </testsuite>
</testsuites>
"""

CATALOG_XML = """<?xml version="1.0"?>
<catalog version="2">
  <book id="bk101" lang="en">
    <title>XML &amp; You</title>
    <price>44.95</price>
  </book>
  <shelf>
    <slot position="1"/>
  </shelf>
</catalog>
"""


@pytest.fixture
def local_suite_xml():
    return LOCAL_SUITE_XML


@pytest.fixture
def multi_suite_xml():
    return MULTI_SUITE_XML


@pytest.fixture
def catalog_xml():
    return CATALOG_XML


@pytest.fixture
def junit_file(tmp_path):
    path = tmp_path / "results.xml"
    path.write_text(LOCAL_SUITE_XML, encoding="utf-8")
    return path


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.xml"
    path.write_text(CATALOG_XML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    for key in ("XML2HTML_CONFIG", "XML2HTML_OUTPUT_DIR", "XML2HTML_INCLUDE_STYLES",
                "XML2HTML_MAX_TEXT_LENGTH", "FASTMCP_PORT"):
        monkeypatch.delenv(key, raising=False)
