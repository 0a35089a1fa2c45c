from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required, current_user
from roster.services.favorite_service import FavoriteService

bp = Blueprint('my_schools', __name__, url_prefix='/api/my-schools')


@bp.route('', methods=['GET'])
@login_required
def index():
    schools = FavoriteService.list_schools(current_user)
    return jsonify({
        'success': True,
        'count': len(schools),
        'schools': schools
    })


@bp.route('/<school_id>', methods=['POST'])
@login_required
def add(school_id):
    data = request.get_json(silent=True) or {}
    FavoriteService.add(current_user, school_id, notes=data.get('notes'))
    current_app.logger.info(f'POST /api/my-schools/{school_id} - 200')
    return jsonify({
        'success': True,
        'message': 'School added to your list'
    })


@bp.route('/<school_id>', methods=['DELETE'])
@login_required
def remove(school_id):
    FavoriteService.remove(current_user, school_id)
    current_app.logger.info(f'DELETE /api/my-schools/{school_id} - 200')
    return jsonify({
        'success': True,
        'message': 'School removed from your list'
    })


@bp.route('/check/<school_id>')
@login_required
def check(school_id):
    return jsonify({
        'success': True,
        'isInList': FavoriteService.contains(current_user, school_id)
    })


@bp.route('/school-ids')
@login_required
def school_ids():
    return jsonify({
        'success': True,
        'schoolIds': FavoriteService.school_ids(current_user)
    })
