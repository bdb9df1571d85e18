#!/usr/bin/env python3
"""
pinfo CLI - Command-line interface for PE metadata reports.
"""
import argparse
import os
import shlex
import sys
from dataclasses import replace

from colorama import init

from pinfo.analyzer import analyze_file
from pinfo.config import check_timeout, load_settings
from pinfo.errors import PinfoError
from pinfo.log import get_logger, setup_logging
from pinfo.reporting import export_html, generate_json_report, generate_text_report, save_report

logger = get_logger('cli')


def build_parser():
    parser = argparse.ArgumentParser(
        description="pinfo - PE file metadata reporter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pinfo sample.exe
  pinfo sample.exe --model
  pinfo library.dll --report html > report.html
  pinfo sample.exe --report json --output analysis.json
        """
    )

    parser.add_argument('file', help='Path to the PE file to analyze')
    parser.add_argument(
        '--model', '-m',
        action='store_true',
        help='Ask the external classifier for a verdict'
    )
    parser.add_argument(
        '--report', '-r',
        choices=['text', 'json', 'html'],
        default='text',
        help='Report format (default: text)'
    )
    parser.add_argument(
        '--output', '-o',
        help='Save report to file (default: print to stdout)'
    )
    parser.add_argument(
        '--template', '-t',
        help='HTML template path (default: binpage.html in the working directory)'
    )
    parser.add_argument(
        '--classifier-cmd',
        help='Classifier command line; the file path is appended'
    )
    parser.add_argument(
        '--classifier-timeout',
        type=float,
        help='Seconds to wait for the classifier'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show detailed progress information'
    )
    return parser


def main(argv=None):
    init()
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.template:
        overrides['template_path'] = args.template
    if args.classifier_cmd:
        overrides['classifier_cmd'] = tuple(shlex.split(args.classifier_cmd))
    try:
        if args.classifier_timeout is not None:
            overrides['classifier_timeout'] = check_timeout(args.classifier_timeout, '--classifier-timeout')
        settings = replace(load_settings(), **overrides)
    except PinfoError as e:
        setup_logging('INFO')
        logger.error(str(e))
        return 1

    setup_logging('DEBUG' if args.verbose else settings.log_level)

    if not os.path.exists(args.file):
        logger.error(f"Error: File not found: {args.file}")
        return 1

    try:
        report = analyze_file(args.file, use_model=args.model, settings=settings)

        if args.output:
            logger.info(f"Saving {args.report} report to: {args.output}")
            if not save_report(report, args.output, args.report, settings.template_path):
                logger.error("Failed to save report")
                return 1
            logger.info("Report saved successfully!")
        elif args.report == 'html':
            export_html(report, sys.stdout, settings.template_path)
        elif args.report == 'json':
            print(generate_json_report(report))
        else:
            print(generate_text_report(report))
    except PinfoError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        sys.exit(0)
