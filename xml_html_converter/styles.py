"""
Inline CSS for tables, summary blocks and page chrome.

Table styles are scoped to a table class so several tables can share one page.
"""

from string import Template

REPORT_TABLE_CSS = Template("""
<style>
.$table_class {
    width: 100%;
    border-collapse: collapse;
    font-family: Arial, sans-serif;
    margin: 20px 0;
    box-shadow: 0 2px 5px rgba(0,0,0,0.1);
}

.$table_class th,
.$table_class td {
    padding: 12px;
    text-align: left;
    border: 1px solid #ddd;
}

.$table_class th {
    background-color: #f4f4f4;
    font-weight: bold;
    color: #333;
}

.$table_class tr:nth-child(even) {
    background-color: #f9f9f9;
}

.$table_class tr:hover {
    background-color: #f5f5f5;
}

.$table_class .test-name {
    font-weight: 500;
    max-width: 300px;
    word-wrap: break-word;
}

.$table_class .status {
    font-weight: bold;
    padding: 4px 8px;
    border-radius: 4px;
    text-align: center;
}

.$table_class .status-passed {
    background-color: #d4edda;
    color: #155724;
}

.$table_class .status-failed {
    background-color: #f8d7da;
    color: #721c24;
}

.$table_class .status-error {
    background-color: #fff3cd;
    color: #856404;
}

.$table_class .status-skipped {
    background-color: #e2e3e5;
    color: #6c757d;
}
</style>
""")

ELEMENT_TABLE_CSS = Template("""<style>
.$table_class {
    width: 100%;
    border-collapse: collapse;
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    margin: 20px 0;
    box-shadow: 0 4px 6px rgba(0,0,0,0.1);
    border-radius: 8px;
    overflow: hidden;
}
.$table_class th,
.$table_class td {
    padding: 12px 15px;
    text-align: left;
    border-bottom: 1px solid #e0e0e0;
}
.$table_class th {
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    color: white;
    font-weight: 600;
    text-transform: uppercase;
    font-size: 12px;
    letter-spacing: 0.5px;
}
.$table_class tr:nth-child(even) {
    background-color: #f8f9ff;
}
.$table_class tr:hover {
    background-color: #e3f2fd;
    transition: all 0.2s ease;
}
.$table_class .element-name {
    font-weight: 600;
    color: #2c3e50;
    background-color: #ecf0f1;
    font-family: 'Courier New', monospace;
}
.$table_class .parent-element {
    color: #7f8c8d;
    font-style: italic;
    font-size: 0.9em;
}
.$table_class .level-0 { color: #e74c3c; font-weight: bold; }
.$table_class .level-1 { color: #f39c12; font-weight: bold; }
.$table_class .level-2 { color: #f1c40f; font-weight: bold; }
.$table_class .level-3 { color: #27ae60; font-weight: bold; }
.$table_class .level-4 { color: #3498db; font-weight: bold; }
.$table_class .level-5 { color: #9b59b6; font-weight: bold; }
.$table_class .content {
    max-width: 300px;
    word-wrap: break-word;
    font-family: 'Courier New', monospace;
    font-size: 0.9em;
    background-color: #f8f9fa;
}
.$table_class .attributes {
    font-family: 'Courier New', monospace;
    font-size: 0.85em;
    color: #6c757d;
    background-color: #fff3cd;
    max-width: 250px;
    word-wrap: break-word;
}
.$table_class .child-count {
    text-align: center;
    font-weight: bold;
    color: #495057;
    background-color: #e9ecef;
}
</style>""")

REPORT_SUMMARY_CSS = """
<style>
.test-summary {
    background-color: #f8f9fa;
    padding: 20px;
    border-radius: 8px;
    margin: 20px 0;
    border: 1px solid #dee2e6;
}

.test-summary h2 {
    margin-top: 0;
    color: #333;
}

.summary-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 15px;
}

.summary-item {
    display: flex;
    justify-content: space-between;
    padding: 10px;
    background-color: white;
    border-radius: 4px;
    border: 1px solid #e9ecef;
}

.summary-label {
    font-weight: 500;
    color: #6c757d;
}

.summary-value {
    font-weight: bold;
    color: #495057;
}

.summary-value.passed {
    color: #28a745;
}

.summary-value.failed {
    color: #dc3545;
}

.summary-value.error {
    color: #ffc107;
}
</style>
"""

ELEMENT_SUMMARY_CSS = """
<style>
.xml-summary {
    background: linear-gradient(135deg, #f5f7fa 0%, #c3cfe2 100%);
    padding: 25px;
    border-radius: 12px;
    margin: 20px 0;
    border: 1px solid #e1e8ed;
    box-shadow: 0 4px 6px rgba(0, 0, 0, 0.05);
}
.xml-summary h2 {
    margin-top: 0;
    color: #2c3e50;
    text-align: center;
    font-size: 1.8em;
    margin-bottom: 25px;
}
.summary-grid {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 20px;
    margin-bottom: 25px;
}
.summary-card {
    display: flex;
    align-items: center;
    padding: 20px;
    background: white;
    border-radius: 8px;
    box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
}
.summary-icon { font-size: 2em; margin-right: 15px; }
.summary-content { display: flex; flex-direction: column; }
.summary-value { font-size: 1.8em; font-weight: bold; color: #2c3e50; line-height: 1; }
.summary-label { font-size: 0.9em; color: #7f8c8d; margin-top: 5px; }
.element-types { background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1); }
.element-types h3 { margin-top: 0; color: #34495e; margin-bottom: 15px; }
.element-tags { display: flex; flex-wrap: wrap; gap: 8px; }
.element-tag {
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    color: white;
    padding: 6px 12px;
    border-radius: 20px;
    font-size: 0.85em;
    font-weight: 500;
    font-family: 'Courier New', monospace;
}
</style>
"""

REPORT_PAGE_CSS = """
        body {
            font-family: Arial, sans-serif;
            line-height: 1.6;
            margin: 0;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            background-color: white;
            padding: 30px;
            border-radius: 8px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        h1 {
            color: #333;
            text-align: center;
            margin-bottom: 30px;
        }
"""

GENERIC_PAGE_CSS = """
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            line-height: 1.6;
            color: #333;
            background: linear-gradient(135deg, #f5f7fa 0%, #c3cfe2 100%);
            min-height: 100vh;
            padding: 20px;
        }
        .container {
            max-width: 1400px;
            margin: 0 auto;
            background: white;
            border-radius: 12px;
            box-shadow: 0 10px 30px rgba(0, 0, 0, 0.1);
            overflow: hidden;
        }
        .header {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 30px;
            text-align: center;
        }
        .header h1 { font-size: 2.5em; margin-bottom: 10px; font-weight: 300; }
        .header p { font-size: 1.1em; opacity: 0.9; }
        .content { padding: 30px; }
"""


def report_table_styles(table_class: str) -> str:
    return REPORT_TABLE_CSS.substitute(table_class=table_class)


def element_table_styles(table_class: str) -> str:
    return ELEMENT_TABLE_CSS.substitute(table_class=table_class)
