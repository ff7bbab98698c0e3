#!/usr/bin/env python3
"""
Portfolio Site Database Initialization Script

Creates the schema, imports the pages from the content archive and extracts
the archive assets into the temporary directory.
"""

import os
import sys
import argparse
from dotenv import load_dotenv

load_dotenv('.flaskenv')
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from app import app, archive_path, logger
from app.seeding import ArchiveError, seed_database, extract_archive
from extensions import db
from models import Page


def init_db(args=None):
    """Initialize the portfolio database and the extracted assets."""
    print("\n" + "="*80)
    print("PORTFOLIO SITE INITIALIZATION")
    print("="*80)

    if args and args.files_dir:
        app.config['FILES_DIR'] = os.path.abspath(args.files_dir)
    if args and args.zip_name:
        app.config['ARCHIVE_NAME'] = args.zip_name
    if args and args.temporary_dir:
        app.config['TEMPORARY_DIR'] = os.path.abspath(args.temporary_dir)

    zip_path = archive_path()
    print(f"\nArchive: {zip_path}")

    with app.app_context():
        print("\nInitializing database schema...")
        db.create_all()
        print("✓ Database schema initialized successfully!")

        try:
            pages_added, links_added = seed_database(zip_path, force=bool(args and args.force))
        except ArchiveError as e:
            logger.error(f"Seeding failed: {e}")
            sys.exit(1)

        if pages_added:
            print(f"✓ Imported {pages_added} pages and {links_added} links")
        elif Page.query.first() is not None:
            print("✓ Database already contains pages (use --force to re-import)")
        else:
            print("⚠️  Archive contains no pages, database left empty")

    if args and args.skip_extract:
        print("✓ Skipped archive extraction")
    else:
        try:
            written = extract_archive(zip_path, app.config['TEMPORARY_DIR'])
        except ArchiveError as e:
            logger.error(f"Extraction failed: {e}")
            sys.exit(1)
        print(f"✓ Extracted {len(written)} files to {app.config['TEMPORARY_DIR']}")

    print("\n" + "="*80)
    print(" Portfolio Initialization Complete!")
    print("="*80)
    print("\nNext steps:")
    print("  1. Start the site:")
    print("     → flask run --port=9090         # Development")
    print("     → python run.py                 # Runner with seeding on start")
    print("="*80)


if __name__ == '__main__':
    parser = argparse.ArgumentParser(
        description='Initialize the portfolio site database',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--files-dir',
                       help='Directory holding the content archive (default: ./files)')
    parser.add_argument('--zip-name',
                       help='File name of the content archive (default: files.zip)')
    parser.add_argument('--temporary-dir',
                       help='Directory the archive is extracted into (default: ./temporary)')
    parser.add_argument('--force', action='store_true',
                       help='Clear pages and links and import them again')
    parser.add_argument('--skip-extract', action='store_true',
                       help='Only seed the database, do not extract the archive')

    args = parser.parse_args()

    init_db(args)
