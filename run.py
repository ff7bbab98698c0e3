#!/usr/bin/env python3
"""
Portfolio site runner.
Uses Flask development server for local development.
For production, use Gunicorn or Waitress with proper configuration.
"""

from dotenv import load_dotenv
import os
import sys

# Load .flaskenv before importing app
load_dotenv('.flaskenv')

from app import app, archive_path, logger
from app.seeding import ArchiveError, seed_database, extract_archive
from extensions import db


def prepare_content():
    """Create the schema, seed an empty database and extract the archive."""
    zip_path = archive_path()

    with app.app_context():
        db.create_all()
        pages_added, links_added = seed_database(zip_path)
        if pages_added:
            logger.info(f"Seeded {pages_added} pages and {links_added} links")

    extract_archive(zip_path, app.config['TEMPORARY_DIR'])


if __name__ == '__main__':
    try:
        prepare_content()
    except ArchiveError as e:
        logger.error(f"Could not prepare content: {e}")
        sys.exit(1)

    port = int(os.environ.get('SERVICE_PORT', 9090))
    logger.info(f"Listening on :{port}")
    app.run(host=os.environ.get('SERVICE_HOST', '0.0.0.0'), port=port, debug=True)
