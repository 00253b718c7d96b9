import logging
from typing import List

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

from .errors import StoreError, ValidationError, require_fields
from .models import Participant

logger = logging.getLogger(__name__)

PARTICIPANT_FIELDS = ('torneoId', 'nombre', 'apellido', 'telefono', 'correo', 'club')


class ParticipantService:
    """
    Registers participants against a tournament and lists them.

    The tournament reference is not checked here; the store's foreign key
    decides whether it is valid.
    """

    def __init__(self, db: SQLAlchemy):
        self.db = db

    def create(self, data: dict) -> Participant:
        require_fields(data, PARTICIPANT_FIELDS, 'Todos los campos son obligatorios')

        participant = Participant(
            torneo_id=data['torneoId'],
            nombre=data['nombre'],
            apellido=data['apellido'],
            telefono=data['telefono'],
            correo=data['correo'],
            club=data['club']
        )

        try:
            self.db.session.add(participant)
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error al agregar participante: {e}")
            raise StoreError('Error al agregar el participante.')

        return participant

    def list_for_tournament(self, torneo_id) -> List[Participant]:
        if not torneo_id:
            raise ValidationError('El ID del torneo es obligatorio')

        try:
            return self.db.session.query(Participant).filter_by(torneo_id=torneo_id).all()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error al obtener participantes: {e}")
            raise StoreError('Error al obtener participantes')
