"""
Creates reports in different formats (text, JSON, HTML).

The HTML page comes from a template file with `$placeholder` fields
(string.Template syntax). Lists are turned into escaped HTML fragments
here and dropped into the template as ready-made markup.
"""
import html
import json
import sys
from datetime import datetime
from string import Template

from pinfo.errors import TemplateError
from pinfo.log import get_logger
from pinfo.parsing.sections import decode_section_flags

logger = get_logger(__name__)

TEMPLATE_NAME = 'binpage.html'
LABEL_WIDTH = 15


def generate_text_report(report):
    """Fixed-width summary for the terminal."""
    rows = [
        ("MD5 Hash: ", report.md5),
        ("SHA1 Hash: ", report.sha1),
        ("SHA256 Hash: ", report.sha256),
        ("File Type: ", report.file_type),
        ("Magic: ", report.magic),
        ("File Size: ", report.file_size)
    ]

    lines = ["---Basic Info---"]
    for label, value in rows:
        lines.append(f"{label:<{LABEL_WIDTH}}{value}")

    return "\n".join(lines)


def generate_json_report(report):
    """Create a JSON report with all the data."""
    return json.dumps(report.to_dict(), indent=2)


def load_template(template_path=TEMPLATE_NAME):
    """Read an HTML template from disk."""
    try:
        with open(template_path, 'r', encoding='utf-8') as f:
            return Template(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Could not load template {template_path}: {e}", str(template_path)) from e


def _list_items(values, empty_text):
    if not values:
        return f"<li class='empty'>{html.escape(empty_text)}</li>"
    return "\n".join(f"<li class='code'>{html.escape(value)}</li>" for value in values)


def _section_rows(sections):
    if not sections:
        return "<tr><td colspan='7' class='empty'>No sections</td></tr>"

    rows = []
    for section in sections:
        rows.append(
            "<tr>"
            f"<td>{html.escape(section.name)}</td>"
            f"<td>0x{section.virtual_address:X}</td>"
            f"<td>0x{section.virtual_size:X}</td>"
            f"<td>0x{section.pointer_to_raw_data:X}</td>"
            f"<td>0x{section.size_of_raw_data:X}</td>"
            f"<td>0x{section.characteristics:08X}</td>"
            f"<td>{decode_section_flags(section.characteristics)}</td>"
            "</tr>"
        )
    return "\n".join(rows)


def describe_classification(result):
    """Human text for the classifier verdict; None means it was not run."""
    if result is None:
        return "Not run"
    return "Positive" if result else "Negative"


def template_fields(report):
    """Values substituted into the HTML template."""
    return {
        'name': html.escape(report.name),
        'md5': report.md5,
        'sha1': report.sha1,
        'sha256': report.sha256,
        'file_type': html.escape(report.file_type),
        'magic': html.escape(report.magic),
        'file_size': report.file_size,
        'classification': describe_classification(report.classifier_result),
        'library_count': str(len(report.libraries)),
        'libraries': _list_items(report.libraries, "No imported libraries"),
        'symbol_count': str(len(report.symbols)),
        'symbols': _list_items(report.symbols, "No imported symbols"),
        'section_count': str(len(report.sections)),
        'section_rows': _section_rows(report.sections),
        'warnings': _list_items(report.warnings, "None"),
        'generated': datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    }


def generate_html_report(report, template_path=TEMPLATE_NAME):
    """Render the report through the HTML template."""
    template = load_template(template_path)
    try:
        return template.substitute(template_fields(report))
    except KeyError as e:
        raise TemplateError(f"Template {template_path} uses unknown field {e}", str(template_path)) from e
    except ValueError as e:
        raise TemplateError(f"Template {template_path} is malformed: {e}", str(template_path)) from e


def export_html(report, stream=None, template_path=TEMPLATE_NAME):
    """Write the rendered HTML page to `stream` (stdout by default)."""
    content = generate_html_report(report, template_path)
    (stream or sys.stdout).write(content)


def save_report(report, output_path, format_type='text', template_path=TEMPLATE_NAME):
    """Save a report to a file."""
    try:
        if format_type == 'json':
            content = generate_json_report(report)
        elif format_type == 'html':
            content = generate_html_report(report, template_path)
        else:
            content = generate_text_report(report) + "\n"

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)

        return True
    except (OSError, TemplateError) as e:
        logger.error(f"Error saving report: {e}")
        return False
