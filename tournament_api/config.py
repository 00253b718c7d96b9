import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

ORGANIZER_ROLE = 'organizador'

# Session tokens expire two hours after issuance
TOKEN_MAX_AGE = 2 * 60 * 60


def build_database_uri() -> str:
    """Build the store URL from DATABASE_URL or the DB_* variables."""
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    return URL.create(
        'mysql+pymysql',
        username=os.getenv('DB_USER'),
        password=os.getenv('DB_PASS'),
        host=os.getenv('DB_HOST', 'localhost'),
        database=os.getenv('DB_NAME'),
    ).render_as_string(hide_password=False)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


class Config:
    SECRET_KEY = os.getenv('JWT_SECRET')
    TOKEN_MAX_AGE = TOKEN_MAX_AGE

    # Database
    SQLALCHEMY_DATABASE_URI = build_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # Server
    PORT = int(os.getenv('PORT', '5000'))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*').split(',')

    # Server errors echo the raw exception text unless disabled
    EXPOSE_ERROR_DETAIL = _env_flag('EXPOSE_ERROR_DETAIL', 'true')

    PASSWORD_HASH_METHOD = os.getenv('PASSWORD_HASH_METHOD', 'scrypt')


class DevelopmentConfig(Config):
    DEBUG = True
    SECRET_KEY = os.getenv('JWT_SECRET', 'dev-secret-key-change-in-prod')


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = os.getenv('SQLALCHEMY_DATABASE_URI', 'sqlite:///:memory:')
    SQLALCHEMY_ENGINE_OPTIONS = {}
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
