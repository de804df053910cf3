"""Main CLI interface for the Survey Summarizer."""

import argparse
import logging
import sys
from typing import Optional

from survey_summarizer.core.summarizer import SurveySummarizer
from survey_summarizer.config.settings import Settings
from survey_summarizer.models.errors import SurveySummarizerError
from survey_summarizer.utils.validators import (
    TEMPLATE_FILE_FORMATS,
    validate_first_name,
    validate_input_file,
)


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Survey Summarizer - template-driven feedback summaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Summarize a feedback form export
  survey-summarizer evaluate responses.xlsx -t templates.csv -n Jane

  # Write the summary table and a statistics report
  survey-summarizer evaluate responses.xlsx -t templates.csv -n Jane -o summary.xlsx --report
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Evaluate command
    evaluate_parser = subparsers.add_parser('evaluate', aliases=['eval'], help='Summarize survey responses')
    evaluate_parser.add_argument('input_file', help='Response file path (.xlsx, .xls, .csv, .tsv)')
    evaluate_parser.add_argument('-t', '--template', required=True,
                                 help='Template config CSV')
    evaluate_parser.add_argument('-n', '--first-name', required=True,
                                 help='Name substituted into the templates')
    evaluate_parser.add_argument('-o', '--output',
                                 help='Summary output file path (.xlsx or .csv)')
    evaluate_parser.add_argument('-s', '--sheet',
                                 help='Excel sheet name (optional)')
    evaluate_parser.add_argument('--strict', action='store_true',
                                 help='Abort on the first non-numeric grade')
    evaluate_parser.add_argument('--report', action='store_true',
                                 help='Write summary workbook and statistics to the output directory')

    # Config command
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='config_action')

    config_subparsers.add_parser('show', help='Show current configuration')
    config_subparsers.add_parser('test', help='Test configuration')

    # Global options
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='INFO', help='Logging level')
    parser.add_argument('--log-file', help='Log file path')
    parser.add_argument('--env-file', help='Environment file path')

    return parser


def command_evaluate(args, settings: Settings):
    """Handle evaluate command."""
    print(f"Starting summary of {args.input_file}...")

    for path, formats in ((args.input_file, None), (args.template, TEMPLATE_FILE_FORMATS)):
        is_valid, error_msg = validate_input_file(path, formats)
        if not is_valid:
            print(f"❌ Input validation failed: {error_msg}")
            return 1

    errors = validate_first_name(args.first_name)
    if errors:
        print(f"❌ Input validation failed: {'; '.join(errors)}")
        return 1

    try:
        if args.strict:
            settings.grade_error_policy = "fail"

        summarizer = SurveySummarizer(settings)

        report = summarizer.summarize_file(
            template_file=args.template,
            responses_file=args.input_file,
            first_name=args.first_name.strip(),
            output_file=args.output,
            sheet_name=args.sheet
        )

        stats = report.get_statistics()
        print("\n📊 Summary:")
        print(f"  • Sheets scanned: {len(stats['sheets'])}")
        for kind, count in stats['accumulations'].items():
            print(f"  • {kind.capitalize()} categories: {count} ({stats['values'][kind]} answers)")
        print(f"  • Summary rows: {stats['summary_rows']}")

        if report.skipped_rows:
            print(f"\n⚠️  {len(report.skipped_rows)} statement(s) matched no template:")
            for skipped in report.skipped_rows:
                print(f"  • {skipped.statement}")

        invalid_values = report.get_invalid_values()
        if invalid_values:
            print(f"\n⚠️  {len(invalid_values)} grade value(s) skipped:")
            for invalid in invalid_values:
                print(f"  • {invalid.reason}")

        if args.report:
            report_files = summarizer.generate_report()
            print("\nReports generated:")
            for report_type, file_path in report_files.items():
                print(f"  • {report_type.capitalize()}: {file_path}")

        if args.output:
            print(f"\n✅ Summary saved to: {args.output}")

        print("\n🎉 Summary completed successfully!")
        return 0

    except SurveySummarizerError as e:
        print(f"❌ Summary failed: {str(e)}")
        logging.error(f"Summary error: {str(e)}", exc_info=True)
        return 1


def command_config(args, settings: Settings):
    """Handle config command."""
    if args.config_action == 'show':
        print("⚙️  Current Configuration:")
        print(f"  • Summary Sheet: {settings.summary_sheet_name}")
        print(f"  • Output Directory: {settings.output_dir}")
        print(f"  • Name Placeholder: {settings.name_placeholder}")
        print(f"  • Header Columns Skipped: {settings.header_columns_to_skip}")
        print(f"  • Grade Error Policy: {settings.grade_error_policy}")
        print(f"  • Empty Cell Marker: {settings.empty_cell_marker}")
        print(f"  • Ignore Blank Answers: {settings.ignore_blank_answers}")
        return 0

    elif args.config_action == 'test':
        print("🧪 Testing configuration...")
        try:
            settings.validate()
            print("✅ Configuration is valid!")
            return 0
        except ValueError as e:
            print(f"❌ Configuration error: {str(e)}")
            return 1

    return 0


def main(argv=None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env(args.env_file)

        if args.command in ('evaluate', 'eval'):
            return command_evaluate(args, settings)
        elif args.command == 'config':
            return command_config(args, settings)
        else:
            print(f"Unknown command: {args.command}")
            return 1

    except (SurveySummarizerError, ValueError) as e:
        print(f"❌ Error: {str(e)}")
        logging.error(f"Main error: {str(e)}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
