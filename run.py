#!/usr/bin/env python3
"""
Entry point for the Tournament API.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development or production (default: development)
    PORT: Port to run on (default: 5000)
    LOG_LEVEL: Logging level (default: INFO)
    DB_HOST, DB_USER, DB_PASS, DB_NAME or DATABASE_URL: store connection
    JWT_SECRET: token-signing secret
"""
import logging
import os
import sys


def run_api():
    """Run the API server, exiting at once if the store is unreachable."""
    from tournament_api.app import close_store, create_app
    from tournament_api.errors import ConfigurationError, StoreUnavailable

    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    try:
        app = create_app()
    except (ConfigurationError, StoreUnavailable):
        sys.exit(1)

    port = app.config['PORT']
    debug = os.getenv('FLASK_ENV', 'development') == 'development'

    logging.getLogger(__name__).info(f"Servidor corriendo en el puerto {port}")
    try:
        app.run(host='0.0.0.0', port=port, debug=debug, use_reloader=False)
    finally:
        close_store(app)


if __name__ == '__main__':
    run_api()
