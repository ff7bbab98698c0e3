import argparse

import pytest

from init_db import init_db
from models import Link, Page
from run import prepare_content
from conftest import MAP_SCRIPT, SAMPLE_PAGES, build_archive


def init_args(archive, temporary_dir, force=False, skip_extract=False):
    return argparse.Namespace(
        files_dir=str(archive.parent),
        zip_name=archive.name,
        temporary_dir=str(temporary_dir),
        force=force,
        skip_extract=skip_extract
    )


def test_init_db_seeds_and_extracts(app, archive, tmp_path, capsys):
    target = tmp_path / 'extracted'

    init_db(init_args(archive, target))

    assert Page.query.count() == len(SAMPLE_PAGES)
    assert Link.query.count() == len(SAMPLE_PAGES)
    assert (target / 'assets' / 'js' / 'map.js').read_bytes() == MAP_SCRIPT
    assert f"Imported {len(SAMPLE_PAGES)} pages" in capsys.readouterr().out


def test_init_db_second_run_keeps_pages(app, archive, tmp_path, capsys):
    init_db(init_args(archive, tmp_path / 'extracted'))
    capsys.readouterr()

    init_db(init_args(archive, tmp_path / 'extracted'))

    assert Page.query.count() == len(SAMPLE_PAGES)
    assert 'Database already contains pages' in capsys.readouterr().out


def test_init_db_force_reimports(app, archive, tmp_path):
    init_db(init_args(archive, tmp_path / 'extracted'))
    smaller = build_archive(tmp_path / 'smaller.zip', pages=SAMPLE_PAGES[:3])

    init_db(init_args(smaller, tmp_path / 'extracted', force=True))

    assert Page.query.count() == 3
    assert Link.query.count() == 3


def test_init_db_skip_extract(app, archive, tmp_path, capsys):
    target = tmp_path / 'extracted'

    init_db(init_args(archive, target, skip_extract=True))

    assert Page.query.count() == len(SAMPLE_PAGES)
    assert not target.exists()
    assert 'Skipped archive extraction' in capsys.readouterr().out


def test_init_db_empty_archive(app, tmp_path, capsys):
    empty = build_archive(tmp_path / 'empty.zip', pages=[])

    init_db(init_args(empty, tmp_path / 'extracted', skip_extract=True))

    out = capsys.readouterr().out
    assert 'Archive contains no pages' in out
    assert 'already contains pages' not in out


def test_init_db_missing_archive_exits(app, tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        init_db(init_args(tmp_path / 'missing.zip', tmp_path / 'extracted'))

    assert exc_info.value.code == 1
    assert Page.query.count() == 0


def test_init_db_bad_entry_exits(app, tmp_path):
    broken = build_archive(tmp_path / 'broken.zip', pages=['oops'])

    with pytest.raises(SystemExit) as exc_info:
        init_db(init_args(broken, tmp_path / 'extracted'))

    assert exc_info.value.code == 1


def test_prepare_content_seeds_empty_database(app):
    prepare_content()

    assert Page.query.count() == len(SAMPLE_PAGES)
    temporary = app.config['TEMPORARY_DIR']
    with open(f"{temporary}/assets/js/map.js", 'rb') as f:
        assert f.read() == MAP_SCRIPT


def test_prepare_content_leaves_seeded_database(seeded):
    prepare_content()

    assert Page.query.count() == len(SAMPLE_PAGES)
    assert Link.query.count() == len(SAMPLE_PAGES)
