from flask import Blueprint, current_app, jsonify, request

from ..auth import require_role, require_session
from ..config import ORGANIZER_ROLE

bp = Blueprint('tournaments', __name__)


@bp.route('/torneos', methods=['POST'])
@require_session
@require_role(ORGANIZER_ROLE)
def create_tournament(identity):
    """Create a tournament (organizers only)."""
    data = request.get_json(silent=True) or {}
    tournament = current_app.tournaments.create(data)
    current_app.logger.info(f"Tournament {tournament.id} created by {identity.usuario}")
    return jsonify({
        'message': 'Torneo creado exitosamente.',
        'torneoId': tournament.id
    }), 201


@bp.route('/torneos', methods=['GET'])
def list_tournaments():
    """List every tournament."""
    tournaments = current_app.tournaments.list_all()
    return jsonify([t.to_dict() for t in tournaments]), 200
