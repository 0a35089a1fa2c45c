import logging
import os
import sqlite3
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine
from werkzeug.exceptions import HTTPException
from config import Config

# ✅ Fix for Windows: Use PyMySQL instead of MySQLdb
import pymysql
pymysql.install_as_MySQLdb()

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        # Import models and routes here to register with the app
        from roster.models import School, User, UserSchool, Group, GroupStudent, Student
        from roster.routes import auth, main, schools, my_schools, groups, students, ast

        # Register blueprints
        app.register_blueprint(main.bp)
        app.register_blueprint(auth.bp)
        app.register_blueprint(schools.bp)
        app.register_blueprint(my_schools.bp)
        app.register_blueprint(groups.bp)
        app.register_blueprint(students.bp)
        app.register_blueprint(ast.bp)

        # Create all database tables (if not already created)
        db.create_all()

        # Register error handlers
        register_error_handlers(app)

    return app


def configure_logging(app):
    """Set the app logger level and attach rotating file handlers when LOG_DIR is configured"""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(level)

    log_dir = app.config.get('LOG_DIR')
    if not log_dir or app.testing:
        return

    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')

    combined = RotatingFileHandler(os.path.join(log_dir, 'combined.log'), maxBytes=20 * 1024 * 1024, backupCount=14)
    combined.setFormatter(formatter)
    combined.setLevel(level)

    errors = RotatingFileHandler(os.path.join(log_dir, 'error.log'), maxBytes=20 * 1024 * 1024, backupCount=14)
    errors.setFormatter(formatter)
    errors.setLevel(logging.ERROR)

    app.logger.addHandler(combined)
    app.logger.addHandler(errors)


def register_error_handlers(app):
    """Register global error handlers"""
    from roster.errors import RosterError

    @app.errorhandler(RosterError)
    def roster_error(error):
        return jsonify({'error': error.message}), error.code

    @app.errorhandler(413)
    def too_large_error(error):
        return jsonify({'error': 'File too large (max 10MB)'}), 413

    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(Exception)
    def handle_exception(e):
        # HTTP exceptions keep their status code
        if isinstance(e, HTTPException):
            return jsonify({'error': e.description}), e.code

        # Log the error
        app.logger.error(f'Unhandled exception: {str(e)}', exc_info=e)

        # For any other exception, return 500
        db.session.rollback()
        return jsonify({'error': 'Internal server error'}), 500
