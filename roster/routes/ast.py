from flask import Blueprint, request, current_app, Response
from flask_login import login_required, current_user

from roster.errors import ValidationError
from roster.services.ast_service import AstService

bp = Blueprint('ast', __name__, url_prefix='/api/ast')


def _export_from_request():
    data = request.get_json(silent=True) or {}
    school_id = data.get('schoolId')
    if not school_id or not isinstance(school_id, str):
        raise ValidationError('schoolId is required')

    csv_text, total = AstService.export(current_user, school_id, group_id=data.get('groupId'))
    return school_id, csv_text, total


@bp.route('/generate', methods=['POST'])
@login_required
def generate():
    school_id, csv_text, total = _export_from_request()
    current_app.logger.info(f'POST /api/ast/generate - 200 school_id={school_id} students={total}')
    return Response(csv_text, mimetype='text/csv')


@bp.route('/download', methods=['POST'])
@login_required
def download():
    school_id, csv_text, total = _export_from_request()
    filename = AstService.download_filename(school_id)

    current_app.logger.info(f'POST /api/ast/download - 200 filename={filename} students={total}')
    response = Response(csv_text, mimetype='text/csv')
    response.headers['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
