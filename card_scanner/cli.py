"""
Command-line interface for the business card scanner.
"""

import sys
import argparse
from typing import List, Optional

from .logging_setup import setup_logger, log_stats
from .entities import load_entities
from .models import CONTACT_FIELDS
from .pdf_render import DEFAULT_RESOLUTION
from .pipeline import process_file
from .session import ScannerSession
from .views import SortState, ASCENDING, DESCENDING
from .writer import write_csv, write_json


def print_banner(logger):
    """Print startup banner."""
    logger.info("═" * 40)
    logger.info("  BUSINESS CARD SCANNER v1.0")
    logger.info("  PDF → OCR → Contacts")
    logger.info("═" * 40)
    logger.info("")


def print_summary(contacts, logger):
    """Print extraction summary statistics."""
    total = len(contacts)

    logger.info("")
    logger.info("═" * 40)
    logger.info("  SCANNING COMPLETE")
    logger.info("═" * 40)
    log_stats(logger, {
        "Total Contacts": total,
        "With Names": (sum(1 for c in contacts if c.has_name), total),
        "With Emails": (sum(1 for c in contacts if c.has_email), total),
        "With Phones": (sum(1 for c in contacts if c.phone), total),
        "Complete Records": (sum(1 for c in contacts if c.is_complete), total),
    }, title="Summary Statistics")


def print_page(view, logger):
    """Print one page of contacts."""
    logger.info("")
    logger.info(f"Page {view.page} of {view.total_pages} ({view.total_matches} matching contacts)")

    for i, contact in enumerate(view.contacts, 1):
        name = contact.name or "N/A"
        company = contact.company or "N/A"
        email = contact.email or "N/A"
        phone = contact.phone or "N/A"
        logger.info(f"{i}. {name} - {company} - {email} - {phone}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Extract contacts from scanned business cards in PDF files',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'files',
        nargs='+',
        help='PDF files to scan (non-PDF files are skipped)'
    )

    parser.add_argument(
        '--search', '-s',
        default='',
        help='Only export contacts containing this text'
    )

    parser.add_argument(
        '--sort',
        choices=CONTACT_FIELDS,
        default='name',
        help='Sort field (default: name)'
    )

    parser.add_argument(
        '--desc',
        action='store_true',
        help='Sort in descending order'
    )

    parser.add_argument(
        '--page', '-p',
        type=int,
        default=1,
        help='Page of results to print (default: 1)'
    )

    parser.add_argument(
        '--output', '-o',
        choices=['csv', 'json'],
        default='csv',
        help='Output format (default: csv)'
    )

    parser.add_argument(
        '--output-dir',
        default='output',
        help='Output directory (default: output)'
    )

    parser.add_argument(
        '--filename',
        default=None,
        help='Output file name (default: timestamped)'
    )

    parser.add_argument(
        '--entities',
        default=None,
        help='JSON file with known companies, names and titles (default: bundled table)'
    )

    parser.add_argument(
        '--resolution',
        type=int,
        default=DEFAULT_RESOLUTION,
        help=f'Page render resolution in dpi (default: {DEFAULT_RESOLUTION})'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Logging level (default: INFO)'
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logger = setup_logger(level=args.log_level)

    print_banner(logger)

    logger.info(f"Files: {len(args.files)}")
    logger.info(f"Search: {args.search or 'None'}")
    logger.info(f"Sort: {args.sort} ({'desc' if args.desc else 'asc'})")
    logger.info(f"Output format: {args.output}")
    logger.info("")

    try:
        entities = load_entities(args.entities)
        session = ScannerSession(logger=logger)

        failed = []
        scanned = []
        for path in args.files:
            result = process_file(
                path,
                session.store,
                entities=entities,
                resolution=args.resolution,
                logger=logger
            )
            if result is None:
                continue
            scanned.append(result.source)
            if not result.succeeded:
                failed.append(result.source)

        session.set_search(args.search)
        session.sort = SortState(args.sort, DESCENDING if args.desc else ASCENDING)

        # Export every contact that matches the search
        session.toggle_select_all()
        selected = session.selected_contacts()

        print_summary(session.store.contacts, logger)
        print_page(session.go_to_page(args.page), logger)

        if selected:
            if args.output == 'json':
                output_path = write_json(
                    session.sort.apply(selected),
                    scanned,
                    output_dir=args.output_dir,
                    filename=args.filename
                )
            else:
                output_path = write_csv(
                    session.sort.apply(selected),
                    output_dir=args.output_dir,
                    filename=args.filename
                )
            logger.info("")
            logger.info(f"{args.output.upper()} output saved: {output_path}")
        else:
            logger.warning("No contacts to export")

        if failed:
            logger.error(f"Processing stopped early for: {', '.join(failed)}")
            return 1

        logger.info("")
        logger.info("Scanning completed successfully")
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Scanning failed: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
