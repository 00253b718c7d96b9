from flask import Blueprint, current_app, jsonify, request

bp = Blueprint('accounts', __name__)


@bp.route('/register', methods=['POST'])
def register():
    """Register a new account."""
    data = request.get_json(silent=True) or {}
    current_app.accounts.register(data)
    return jsonify({'message': 'Usuario registrado exitosamente'}), 201


@bp.route('/login', methods=['POST'])
def login():
    """Exchange credentials plus role for a session token."""
    data = request.get_json(silent=True) or {}
    token, account = current_app.accounts.login(data)
    return jsonify({
        'message': 'Inicio de sesión exitoso',
        'token': token,
        'rol': account.rol
    }), 200
