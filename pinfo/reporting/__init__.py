"""Report generation functionality."""

from .report_generator import (
    TEMPLATE_NAME,
    generate_text_report,
    generate_json_report,
    generate_html_report,
    load_template,
    export_html,
    save_report
)

__all__ = [
    'TEMPLATE_NAME',
    'generate_text_report',
    'generate_json_report',
    'generate_html_report',
    'load_template',
    'export_html',
    'save_report'
]
