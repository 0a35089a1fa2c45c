import os
from dotenv import load_dotenv

load_dotenv()


def _default_db_uri() -> str:
    # Prefer PyMySQL driver for Windows compatibility
    user = os.environ.get('MYSQL_USER', 'root')
    password = os.environ.get('MYSQL_PASSWORD', 'root')
    host = os.environ.get('MYSQL_HOST', '127.0.0.1')
    port = os.environ.get('MYSQL_PORT', '3306')
    db = os.environ.get('MYSQL_DB', 'roster')
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{db}"


DEFAULT_SCHOOL_DIRECTORY_URL = (
    'https://catalogue.data.govt.nz/dataset/c1923d33-e781-46c9-9ea1-d9b850082be4/'
    'resource/4b292323-9fcc-41f8-814b-3c7b19cf14b3/download/'
    'schooldirectory-02-01-2026-074519.csv'
)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'change-this-in-production'
    # Use DATABASE_URL if present; else build a sensible default using PyMySQL
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or _default_db_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    # Bearer tokens issued at login
    TOKEN_MAX_AGE = int(os.environ.get('TOKEN_MAX_AGE', 7 * 24 * 60 * 60))

    # School directory import
    SCHOOL_DIRECTORY_URL = os.environ.get('SCHOOL_DIRECTORY_URL', DEFAULT_SCHOOL_DIRECTORY_URL)
    SCHOOL_DIRECTORY_TIMEOUT = int(os.environ.get('SCHOOL_DIRECTORY_TIMEOUT', 60))
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'uploads')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB upload limit

    MAX_GENERATE_COUNT = 10000

    # Logging (file handlers only when LOG_DIR is set)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
