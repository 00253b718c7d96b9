"""
Pytest configuration and fixtures for tournament API tests.
"""
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'
os.environ['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'

from tournament_api.app import create_app
from tournament_api.models import db, Account, Tournament, Participant


ORGANIZER = {
    'nombre': 'Ana',
    'apellido': 'García',
    'club': 'Club Pádel Norte',
    'telefono': '600111222',
    'correo': 'ana@example.com',
    'usuario': 'ana',
    'contraseña': 'pw1',
    'rol': 'organizador'
}

TOURNAMENT = {
    'nombre': 'Open de Primavera',
    'club': 'Club Pádel Norte',
    'participantes': 16,
    'pistas': 4,
    'grupos': 4,
    'fecha': '2025-04-12'
}


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    app = create_app('testing')

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def db_session(app):
    """Clear all tables before each test."""
    db.session.remove()

    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()

    yield db.session

    db.session.rollback()


@pytest.fixture(scope='function')
def client(app, db_session):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def organizer_payload():
    return dict(ORGANIZER)


@pytest.fixture
def tournament_payload():
    return dict(TOURNAMENT)


def register_and_login(client, **overrides):
    """Register an account through the API and return its session token."""
    payload = dict(ORGANIZER, **overrides)
    response = client.post('/register', json=payload)
    assert response.status_code == 201

    response = client.post('/login', json={
        'usuario': payload['usuario'],
        'contraseña': payload['contraseña'],
        'rol': payload['rol']
    })
    assert response.status_code == 200
    return response.get_json()['token']


@pytest.fixture
def organizer_token(client):
    """Session token for a registered organizer."""
    return register_and_login(client)


@pytest.fixture
def player_token(client):
    """Session token for a registered account without the organizer role."""
    return register_and_login(client, usuario='luis', rol='jugador')


@pytest.fixture
def auth_headers(organizer_token):
    return {'Authorization': f'Bearer {organizer_token}'}


@pytest.fixture
def sample_tournament(app, db_session):
    """Create a sample tournament directly in the store."""
    tournament = app.tournaments.create(dict(TOURNAMENT))
    return tournament


@pytest.fixture
def failing_store(mocker):
    """A stand-in store handle whose session fails every round-trip."""
    from sqlalchemy.exc import OperationalError

    store = mocker.MagicMock()
    error = OperationalError('SELECT 1', {}, Exception('Lost connection to MySQL server'))
    store.session.commit.side_effect = error
    store.session.query.side_effect = error
    return store
