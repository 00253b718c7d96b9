from flask import Blueprint, current_app, jsonify, request

from ..auth import require_role, require_session
from ..config import ORGANIZER_ROLE

bp = Blueprint('participants', __name__)


@bp.route('/participantes', methods=['POST'])
@require_session
@require_role(ORGANIZER_ROLE)
def create_participant(identity):
    """Register a participant in a tournament (organizers only)."""
    data = request.get_json(silent=True) or {}
    current_app.participants.create(data)
    return jsonify({'message': 'Participante agregado exitosamente.'}), 201


@bp.route('/participantes', methods=['GET'])
def list_participants():
    """List the participants of the tournament given by ?torneoId=."""
    participants = current_app.participants.list_for_tournament(request.args.get('torneoId'))
    return jsonify([p.to_dict() for p in participants]), 200
