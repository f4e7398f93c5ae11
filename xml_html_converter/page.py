"""Standalone HTML page assembly."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .markup import escape_html
from .styles import GENERIC_PAGE_CSS, REPORT_PAGE_CSS


@dataclass
class PageTheme:
    """Page chrome: inline stylesheet plus whether to show a generated-on banner."""
    styles: str
    banner: bool = False


REPORT_THEME = PageTheme(styles=REPORT_PAGE_CSS)
GENERIC_THEME = PageTheme(styles=GENERIC_PAGE_CSS, banner=True)


def assemble_page(title: str, summary_html: str, table_html: str,
                  theme: PageTheme = REPORT_THEME,
                  generated_at: Optional[datetime] = None) -> str:
    """Combine a summary block and a table into one self-contained document."""
    title = escape_html(title)
    if theme.banner:
        generated_at = generated_at or datetime.now()
        heading = f"""<div class="header">
            <h1>{title}</h1>
            <p>Generated on {generated_at.strftime("%x")} at {generated_at.strftime("%X")}</p>
        </div>
        <div class="content">
            {summary_html}
            {table_html}
        </div>"""
    else:
        heading = f"""<h1>{title}</h1>
        {summary_html}
        {table_html}"""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{theme.styles}    </style>
</head>
<body>
    <div class="container">
        {heading}
    </div>
</body>
</html>"""
