import logging
from typing import Tuple

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import check_password_hash, generate_password_hash

from .auth import TokenIssuer
from .errors import AccountNotFound, CredentialMismatch, StoreError, require_fields
from .models import Account

logger = logging.getLogger(__name__)

REGISTER_FIELDS = ('nombre', 'apellido', 'club', 'telefono', 'correo', 'usuario', 'contraseña', 'rol')
LOGIN_FIELDS = ('usuario', 'contraseña', 'rol')


class AccountService:
    """
    Registers accounts and authenticates them.

    Accounts are looked up by the (usuario, rol) pair at login, so the role a
    client claims is part of the credential.
    """

    def __init__(self, db: SQLAlchemy, tokens: TokenIssuer, hash_method: str = 'scrypt'):
        self.db = db
        self.tokens = tokens
        self.hash_method = hash_method

    def hash_password(self, password: str) -> str:
        """Salted one-way hash; the salt is random on every call."""
        return generate_password_hash(password, method=self.hash_method)

    def verify_password(self, pwhash: str, password: str) -> bool:
        """Check a password against a stored hash.

        Hashes in a format Werkzeug cannot read, such as bcrypt '$2b$' hashes
        from an earlier deployment, never match.
        """
        try:
            return check_password_hash(pwhash, password)
        except ValueError as e:
            logger.warning(f"Unreadable password hash format: {e}")
            return False

    def register(self, data: dict) -> Account:
        """Persist a new account with its password hashed."""
        require_fields(data, REGISTER_FIELDS, 'Todos los campos son obligatorios')

        account = Account(
            nombre=data['nombre'],
            apellido=data['apellido'],
            club=data['club'],
            telefono=data['telefono'],
            correo=data['correo'],
            usuario=data['usuario'],
            contrasena=self.hash_password(data['contraseña']),
            rol=data['rol']
        )

        try:
            self.db.session.add(account)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Failed to register account {data['usuario']}: {e}")
            raise StoreError('Error al registrar el usuario', detail=str(e))

        logger.info(f"Registered account {account.usuario} with role {account.rol}")
        return account

    def login(self, data: dict) -> Tuple[str, Account]:
        """Verify credentials and return a fresh session token with its account."""
        require_fields(data, LOGIN_FIELDS, 'Todos los campos son obligatorios')

        try:
            account = self.db.session.query(Account).filter_by(
                usuario=data['usuario'],
                rol=data['rol']
            ).first()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Failed to look up account {data['usuario']}: {e}")
            raise StoreError('Error en el servidor', detail=str(e))

        # Deliberately ambiguous between unknown user and wrong role
        if account is None:
            raise AccountNotFound('Usuario o rol incorrecto')

        if not self.verify_password(account.contrasena, data['contraseña']):
            raise CredentialMismatch('Contraseña incorrecta')

        return self.tokens.issue(account), account
