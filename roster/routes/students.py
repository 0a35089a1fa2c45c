from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required

from roster.services.student_generator import GenerationOptions
from roster.services.student_service import StudentService
from roster.utils.codes import ETHNICITY_CODES, LANGUAGE_CODES, as_options
from roster.utils.validators import validate_count

bp = Blueprint('students', __name__, url_prefix='/api/students')


@bp.route('', methods=['GET'])
@login_required
def index():
    students = StudentService.get_all()
    return jsonify({
        'success': True,
        'count': len(students),
        'students': [student.to_dict() for student in students]
    })


@bp.route('', methods=['DELETE'])
@login_required
def delete_all():
    StudentService.delete_all()
    return jsonify({
        'success': True,
        'message': 'All students deleted'
    })


@bp.route('/generate', methods=['POST'])
@login_required
def generate():
    data = request.get_json(silent=True) or {}
    count = validate_count(data.get('count'), current_app.config['MAX_GENERATE_COUNT'])
    options = GenerationOptions.from_dict(data.get('options'))

    created = StudentService.create_generated(count, options=options)

    current_app.logger.info(f'POST /api/students/generate - 200 count={len(created)}')
    return jsonify({
        'success': True,
        'count': len(created),
        'students': [student.to_dict() for student in created]
    })


@bp.route('/<student_id>', methods=['PUT'])
@login_required
def update(student_id):
    student = StudentService.update(student_id, request.get_json(silent=True))
    return jsonify({
        'success': True,
        'student': student.to_dict()
    })


@bp.route('/ethnicity-codes')
def ethnicity_codes():
    return jsonify({'success': True, 'codes': as_options(ETHNICITY_CODES)})


@bp.route('/language-codes')
def language_codes():
    return jsonify({'success': True, 'codes': as_options(LANGUAGE_CODES)})
