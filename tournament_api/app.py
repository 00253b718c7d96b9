import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError

from .account_service import AccountService
from .auth import TokenIssuer
from .config import config
from .errors import ConfigurationError, StoreUnavailable, register_error_handlers
from .models import db
from .participant_service import ParticipantService
from .tournament_service import TournamentService

logger = logging.getLogger(__name__)


def create_app(config_name: str = None, config_overrides: dict = None) -> Flask:
    """Application factory for the tournament API."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if config_overrides:
        app.config.update(config_overrides)

    if not app.config.get('SECRET_KEY'):
        logger.critical("JWT_SECRET is not set")
        raise ConfigurationError('JWT_SECRET must be set to sign session tokens')

    # Initialize extensions
    db.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'])

    # Connect once at start-up; a dead store stops the process here
    with app.app_context():
        try:
            db.session.execute(db.text('SELECT 1'))
            db.create_all()
        except SQLAlchemyError as e:
            logger.critical(f"Error al conectar a la base de datos: {e}")
            raise StoreUnavailable(str(e)) from e
        finally:
            db.session.remove()
    logger.info("Conectado a la base de datos.")

    # Store services on app for access in routes
    app.tokens = TokenIssuer(app.config['SECRET_KEY'], max_age=app.config['TOKEN_MAX_AGE'])
    app.accounts = AccountService(db, app.tokens, hash_method=app.config['PASSWORD_HASH_METHOD'])
    app.tournaments = TournamentService(db)
    app.participants = ParticipantService(db)

    register_error_handlers(app)
    register_routes(app)

    return app


def register_routes(app: Flask):
    """Register API blueprints and the health check."""
    from .routes import accounts, participants, tournaments
    app.register_blueprint(accounts.bp)
    app.register_blueprint(tournaments.bp)
    app.register_blueprint(participants.bp)

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        try:
            db.session.execute(db.text('SELECT 1'))
            db_ok = True
        except SQLAlchemyError:
            db.session.rollback()
            db_ok = False

        status = 'healthy' if db_ok else 'unhealthy'
        code = 200 if db_ok else 503

        return jsonify({
            'status': status,
            'database': 'connected' if db_ok else 'disconnected'
        }), code


def close_store(app: Flask):
    """Release every pooled store connection."""
    with app.app_context():
        db.engine.dispose()
