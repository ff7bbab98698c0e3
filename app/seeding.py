"""
Content Seeding

Imports pages from the bundled archive into the database and extracts the
archive's assets so they can be served under /temporary/.
"""

from app import logger
from extensions import db
from models import Page, Link
import json
import os
import zipfile

PAGES_MEMBER = 'data/pages.json'

# Characters replaced when a title is turned into a URL tag
TAG_REPLACEMENTS = (
    ('ä', 'a'),
    ('ö', 'o'),
    ('ü', 'u'),
    ('ß', 'ss'),
    (' ', ''),
)


class ArchiveError(Exception):
    """The content archive is missing, unreadable or unsafe to extract."""


def convert_to_tag(title):
    """Turn a page title into its URL tag."""
    tag = title.lower()
    for old, new in TAG_REPLACEMENTS:
        tag = tag.replace(old, new)
    return tag


def page_from_entry(entry):
    """Build a Page from one object of data/pages.json."""
    title = entry.get('title') or ''
    return Page(
        type=entry.get('type'),
        tag=convert_to_tag(title),
        title=title,
        description=entry.get('description'),
        content=entry.get('content'),
        custom_css=entry.get('customCSS') or None,
        custom_js=entry.get('customScript') or None,
        images=list(entry.get('images') or []),
        video=entry.get('video') or None
    )


def read_pages(zip_path, member=PAGES_MEMBER):
    """
    Read the page list stored inside the archive.

    Returns:
        list: page entries as dicts

    Raises:
        ArchiveError: archive or member missing or unreadable, the JSON is
            invalid, or an entry is not an object with a list of images
    """
    try:
        with zipfile.ZipFile(zip_path) as archive:
            raw = archive.read(member)
    except FileNotFoundError:
        raise ArchiveError(f"Archive not found: {zip_path}")
    except KeyError:
        raise ArchiveError(f"{member} not found in {zip_path}")
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveError(f"Could not open {zip_path}: {e}")

    try:
        pages = json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, ValueError) as e:
        raise ArchiveError(f"Could not parse {member}: {e}")

    if not isinstance(pages, list):
        raise ArchiveError(f"{member} must contain a JSON array")

    for position, entry in enumerate(pages):
        if not isinstance(entry, dict):
            raise ArchiveError(f"Entry {position} of {member} is not an object")
        images = entry.get('images')
        if images is not None and not isinstance(images, list):
            raise ArchiveError(f"Entry {position} of {member}: images must be a list")

    return pages


def seed_database(zip_path, force=False):
    """
    Add every archived page and its navigation link to the database.

    Seeding runs once: an already populated database is left alone unless
    force is set, which clears both tables first.

    Returns:
        tuple: (pages_added, links_added)
    """
    if Page.query.first() is not None and not force:
        logger.info("Database already seeded, skipping")
        return 0, 0

    entries = read_pages(zip_path)

    try:
        if force:
            Link.query.delete()
            Page.query.delete()

        pages_added = 0
        links_added = 0

        for entry in entries:
            page = page_from_entry(entry)
            db.session.add(page)
            pages_added += 1
            logger.info(f"Added Page: {page.type}/{page.tag}")

            link = Link.for_page(page)
            db.session.add(link)
            links_added += 1
            logger.info(f"Added Link: {link.url}")

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return pages_added, links_added


def extract_archive(zip_path, target_dir):
    """
    Copy every archive member into target_dir, keeping the directory layout.

    All member paths are checked before anything is written, so an unsafe
    archive leaves the target untouched.

    Returns:
        list: paths of the written files
    """
    target_root = os.path.realpath(target_dir)

    try:
        archive = zipfile.ZipFile(zip_path)
    except FileNotFoundError:
        raise ArchiveError(f"Archive not found: {zip_path}")
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveError(f"Could not open {zip_path}: {e}")

    written = []

    with archive:
        members = []
        for member in archive.infolist():
            destination = os.path.realpath(os.path.join(target_root, member.filename))
            if os.path.commonpath([target_root, destination]) != target_root:
                raise ArchiveError(f"Refusing to extract {member.filename} outside {target_dir}")
            members.append((member, destination))

        try:
            os.makedirs(target_root, exist_ok=True)

            for member, destination in members:
                if member.is_dir():
                    os.makedirs(destination, exist_ok=True)
                    continue

                os.makedirs(os.path.dirname(destination), exist_ok=True)
                with archive.open(member) as source, open(destination, 'wb') as out:
                    out.write(source.read())

                logger.info(f"Extracted file: {destination}")
                written.append(destination)
        except OSError as e:
            raise ArchiveError(f"Could not extract {zip_path} to {target_dir}: {e}")

    return written
