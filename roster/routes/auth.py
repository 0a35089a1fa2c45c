from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required, current_user
from roster.services.auth_service import AuthService

bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    credential = data.get('credential') or data.get('email') or data.get('username')

    user, token = AuthService.login(credential)

    current_app.logger.info(f'POST /api/auth/login - 200 user_id={user.user_id}')
    return jsonify({
        'success': True,
        'token': token,
        'user': user.to_dict()
    })


@bp.route('/logout', methods=['POST'])
def logout():
    # Tokens are stateless; the client discards its copy
    return jsonify({
        'success': True,
        'message': 'Logged out successfully'
    })


@bp.route('/me')
@login_required
def me():
    return jsonify({
        'success': True,
        'user': current_user.to_dict()
    })
