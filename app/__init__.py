from flask import Flask
import os
import secrets

app = Flask(
    __name__,
    instance_relative_config=True,
    template_folder=os.environ.get('TEMPLATES_DIR', 'templates'),
    static_folder=os.environ.get('STATIC_DIR', 'static'),
)

# Set secret key for sessions
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

# Service configuration
app.config['SERVICE_NAME'] = os.environ.get('SERVICE_NAME', 'portfolio')
app.config['INDEX_TAG'] = os.environ.get('INDEX_TAG', 'portfolio')

# Content archive and the directory it is extracted into
app.config['FILES_DIR'] = os.path.abspath(os.environ.get('FILES_DIR', 'files'))
app.config['ARCHIVE_NAME'] = os.environ.get('ARCHIVE_NAME', 'files.zip')
app.config['TEMPORARY_DIR'] = os.path.abspath(os.environ.get('TEMPORARY_DIR', 'temporary'))

# Load database connection from config file
import configparser
try:
    os.makedirs(app.instance_path)
except OSError:
    pass

config_path = os.path.join(app.instance_path, 'site.conf')
config = configparser.RawConfigParser()
config.read(config_path)
app.config['SITE_CONFIG'] = config

# Database configuration
app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL') or config.get(
    'database', 'connection_string',
    fallback=f"sqlite:///{os.path.join(app.instance_path, 'site.db')}")
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

from extensions import db
db.init_app(app)

from app.site_logger import init_logger
logger = init_logger(app.config['SERVICE_NAME'], os.environ.get('LOG_LEVEL', 'INFO'))


def archive_path():
    """Full path of the bundled content archive."""
    return os.path.join(app.config['FILES_DIR'], app.config['ARCHIVE_NAME'])


from app import routes

logger.info(f"{app.config['SERVICE_NAME']} service configured")
