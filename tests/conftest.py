import json
import os
import zipfile

import pytest

os.environ['DATABASE_URL'] = 'sqlite://'
os.environ.setdefault('SECRET_KEY', 'test-secret')

from app import app as flask_app  # noqa: E402
from app.seeding import seed_database  # noqa: E402
from extensions import db  # noqa: E402

SAMPLE_PAGES = [
    {
        'type': 'index',
        'title': 'Portfolio',
        'description': 'Startseite',
        'content': '<p>Willkommen im Portfolio</p>',
        'images': ['images/me.jpg']
    },
    {
        'type': 'main',
        'title': 'Über mich',
        'description': 'Wer ich bin',
        'content': '<p>Hallo <strong>Welt</strong></p>'
    },
    {
        'type': 'main',
        'title': 'Galerie',
        'content': '<p>Bilder</p>',
        'images': ['images/one.jpg', 'images/two.jpg', 'images/three.jpg']
    },
    {
        'type': 'main',
        'title': 'Anfahrt',
        'content': '<div id="map"></div>',
        'customCSS': 'assets/css/map.css',
        'customScript': 'assets/js/map.js'
    },
    {
        'type': 'footer',
        'title': 'Impressum',
        'content': '<p>Angaben gemäß TMG</p>'
    },
    {
        'type': 'article',
        'title': 'Straßen Kunst',
        'content': '<p>Graffiti</p>',
        'images': ['images/street.jpg', 'images/wall.jpg']
    },
    {
        'type': 'article',
        'title': 'Video Projekt',
        'content': '<p>Ein Film</p>',
        'images': ['images/film.jpg'],
        'video': 'abc123'
    },
]

MAP_SCRIPT = b'map = new OpenLayers.Map("map");\n'


def build_archive(path, pages=SAMPLE_PAGES, extra=None):
    """Write a content archive the way files.zip is laid out."""
    with zipfile.ZipFile(path, 'w') as archive:
        archive.writestr('data/', '')
        archive.writestr('data/pages.json', json.dumps(pages))
        archive.writestr('assets/', '')
        archive.writestr('assets/js/', '')
        archive.writestr('assets/js/map.js', MAP_SCRIPT)
        archive.writestr('assets/css/map.css', '#map { height: 20rem; }\n')
        archive.writestr('images/me.jpg', b'\xff\xd8\xff')
        for name, data in (extra or {}).items():
            archive.writestr(name, data)
    return path


@pytest.fixture
def archive(tmp_path):
    files_dir = tmp_path / 'files'
    files_dir.mkdir()
    return build_archive(files_dir / 'files.zip')


@pytest.fixture
def app(tmp_path, archive, monkeypatch):
    monkeypatch.setitem(flask_app.config, 'TESTING', True)
    monkeypatch.setitem(flask_app.config, 'FILES_DIR', str(archive.parent))
    monkeypatch.setitem(flask_app.config, 'ARCHIVE_NAME', archive.name)
    monkeypatch.setitem(flask_app.config, 'TEMPORARY_DIR', str(tmp_path / 'temporary'))

    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seeded(app, archive):
    seed_database(str(archive))
    return app


@pytest.fixture
def client(seeded):
    return seeded.test_client()
