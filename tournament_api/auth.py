"""
Session tokens and the guards that protect organizer-only routes.

``require_session`` verifies the bearer token and hands the decoded identity
to the view as the ``identity`` keyword argument. ``require_role`` then checks
that identity against an accepted role set. Stack them in that order:

    @require_session
    @require_role('organizador')
    def view(identity): ...
"""
from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import current_app, request
from itsdangerous import BadData, URLSafeTimedSerializer

from .config import TOKEN_MAX_AGE
from .errors import AccessDenied, InvalidToken, MissingToken


@dataclass(frozen=True)
class SessionIdentity:
    id: int
    usuario: str
    rol: str

    def to_claims(self) -> dict:
        return {'id': self.id, 'usuario': self.usuario, 'rol': self.rol}


class TokenIssuer:
    """Issues and verifies signed, time-bounded session tokens."""

    SALT = 'session-token'

    def __init__(self, secret_key: str, max_age: int = TOKEN_MAX_AGE):
        self.max_age = max_age
        self._serializer = URLSafeTimedSerializer(secret_key, salt=self.SALT)

    def issue(self, account) -> str:
        identity = SessionIdentity(id=account.id, usuario=account.usuario, rol=account.rol)
        return self._serializer.dumps(identity.to_claims())

    def verify(self, token: str) -> SessionIdentity:
        """Decode a token, raising InvalidToken on a bad signature, expiry or payload."""
        try:
            claims = self._serializer.loads(token, max_age=self.max_age)
        except BadData:
            raise InvalidToken('Token inválido')

        if not isinstance(claims, dict):
            raise InvalidToken('Token inválido')
        try:
            return SessionIdentity(id=claims['id'], usuario=claims['usuario'], rol=claims.get('rol'))
        except KeyError:
            raise InvalidToken('Token inválido')


def extract_bearer_token(header: Optional[str]) -> Optional[str]:
    """Return the token part of an ``Authorization: Bearer <token>`` header."""
    if not header:
        return None
    parts = header.split(' ')
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def require_session(view):
    """Reject requests without a valid bearer token."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        token = extract_bearer_token(request.headers.get('Authorization'))
        if not token:
            raise MissingToken('No se proporcionó un token')

        kwargs['identity'] = current_app.tokens.verify(token)
        return view(*args, **kwargs)

    return wrapper


def require_role(*roles: str):
    """Reject requests whose identity does not hold one of ``roles``."""
    accepted = set(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = kwargs.get('identity')
            role = identity.rol if identity else None
            if not role or role not in accepted:
                raise AccessDenied('Acceso denegado: No tienes el rol adecuado.')
            return view(*args, **kwargs)

        return wrapper

    return decorator
