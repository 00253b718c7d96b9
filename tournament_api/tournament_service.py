import logging
from datetime import date
from typing import List

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreError, require_fields
from .models import Tournament

logger = logging.getLogger(__name__)

TOURNAMENT_FIELDS = ('nombre', 'club', 'participantes', 'pistas', 'grupos', 'fecha')


def parse_date(value) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


class TournamentService:
    """Creates and lists tournament records."""

    def __init__(self, db: SQLAlchemy):
        self.db = db

    def create(self, data: dict) -> Tournament:
        """Persist one tournament and return it with its generated id."""
        require_fields(data, TOURNAMENT_FIELDS, 'Todos los campos son obligatorios.')

        try:
            tournament = Tournament(
                nombre=data['nombre'],
                club=data['club'],
                participantes=data['participantes'],
                pistas=data['pistas'],
                grupos=data['grupos'],
                fecha=parse_date(data['fecha'])
            )
            self.db.session.add(tournament)
            self.db.session.commit()
        except (SQLAlchemyError, ValueError) as e:
            self.db.session.rollback()
            logger.error(f"Error al crear torneo: {e}")
            raise StoreError('Error al crear el torneo.')

        logger.info(f"Created tournament {tournament.id} for club {tournament.club}")
        return tournament

    def list_all(self) -> List[Tournament]:
        """All tournaments, in whatever order the store returns them."""
        try:
            return self.db.session.query(Tournament).all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Failed to list tournaments: {e}")
            raise StoreError('Error al obtener los torneos', detail=str(e))
