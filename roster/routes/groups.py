from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required, current_user

from roster.errors import ValidationError
from roster.services.group_service import GroupService
from roster.services.student_generator import GenerationOptions
from roster.services.student_service import StudentService
from roster.utils.validators import validate_count

bp = Blueprint('groups', __name__, url_prefix='/api/groups')


@bp.route('/school/<school_id>')
@login_required
def by_school(school_id):
    groups = GroupService.list_for_school(current_user, school_id)
    return jsonify({
        'success': True,
        'count': len(groups),
        'groups': [group.to_dict() for group in groups]
    })


@bp.route('/user')
@login_required
def by_user():
    groups, grouped = GroupService.list_for_user(current_user)
    return jsonify({
        'success': True,
        'total': len(groups),
        'groups': {school_id: [group.to_dict() for group in items] for school_id, items in grouped.items()}
    })


@bp.route('', methods=['POST'])
@login_required
def create():
    data = request.get_json(silent=True) or {}
    school_id = data.get('school_id')
    if not school_id or not isinstance(school_id, str):
        raise ValidationError('school_id is required')

    group = GroupService.create(current_user, school_id, data.get('group_name'))

    current_app.logger.info(f'POST /api/groups - 200 group_id={group.group_id}')
    return jsonify({
        'success': True,
        'group': group.to_dict()
    })


@bp.route('/<group_id>', methods=['PUT'])
@login_required
def update(group_id):
    data = request.get_json(silent=True) or {}
    group = GroupService.rename(current_user, group_id, data.get('group_name'))
    return jsonify({
        'success': True,
        'message': 'Group updated successfully',
        'group': group.to_dict()
    })


@bp.route('/<group_id>', methods=['DELETE'])
@login_required
def delete(group_id):
    purged = GroupService.delete(current_user, group_id)
    current_app.logger.info(f'DELETE /api/groups/{group_id} - 200 students_deleted={purged}')
    return jsonify({
        'success': True,
        'message': 'Group deleted successfully',
        'studentsDeleted': purged
    })


@bp.route('/<group_id>/students')
@login_required
def students(group_id):
    group, members = GroupService.members(current_user, group_id)
    return jsonify({
        'success': True,
        'group': group.to_dict(),
        'count': len(members),
        'students': [student.to_dict() for student in members]
    })


@bp.route('/<group_id>/students/generate', methods=['POST'])
@login_required
def generate_students(group_id):
    data = request.get_json(silent=True) or {}
    count = validate_count(data.get('count'), current_app.config['MAX_GENERATE_COUNT'])
    options = GenerationOptions.from_dict(data.get('options'))

    group = GroupService.get_owned(current_user, group_id)
    created = StudentService.create_generated(count, options=options, group=group)

    current_app.logger.info(f'POST /api/groups/{group_id}/students/generate - 200 count={len(created)}')
    return jsonify({
        'success': True,
        'count': len(created),
        'students': [student.to_dict() for student in created]
    })


@bp.route('/<group_id>/students/<student_id>', methods=['DELETE'])
@login_required
def remove_student(group_id, student_id):
    GroupService.remove_member(current_user, group_id, student_id)
    return jsonify({
        'success': True,
        'message': 'Student removed from group'
    })
