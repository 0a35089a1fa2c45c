import os
import uuid

from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required
from werkzeug.utils import secure_filename

from roster.errors import ValidationError
from roster.services.school_service import SchoolService

bp = Blueprint('schools', __name__, url_prefix='/api/schools')

CSV_MIMETYPES = ('text/csv', 'application/vnd.ms-excel')


@bp.route('', methods=['GET'])
def index():
    schools = SchoolService.get_all()
    current_app.logger.info(f'GET /api/schools - 200 count={len(schools)}')
    return jsonify({
        'schools': [school.to_dict() for school in schools],
        'count': len(schools)
    })


@bp.route('/refresh', methods=['POST'])
@login_required
def refresh():
    count = SchoolService.refresh_from_remote()
    current_app.logger.info(f'POST /api/schools/refresh - 200 count={count}')
    return jsonify({
        'success': True,
        'message': f'Successfully loaded {count} schools',
        'count': count
    })


@bp.route('/upload', methods=['POST'])
@login_required
def upload():
    file = request.files.get('csvFile')
    if not file or not file.filename:
        raise ValidationError('No file uploaded')

    if not (file.mimetype in CSV_MIMETYPES or file.filename.lower().endswith('.csv')):
        raise ValidationError('Only CSV files are allowed')

    upload_dir = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_dir, exist_ok=True)
    path = os.path.join(upload_dir, f'{uuid.uuid4().hex}_{secure_filename(file.filename)}')
    file.save(path)

    current_app.logger.info(f'POST /api/schools/upload filename={file.filename}')
    count = SchoolService.import_upload(path)

    return jsonify({
        'success': True,
        'message': f'Successfully loaded {count} schools from uploaded file',
        'count': count
    })


@bp.route('', methods=['DELETE'])
@login_required
def delete_all():
    SchoolService.delete_all()
    current_app.logger.info('DELETE /api/schools - 200')
    return jsonify({'success': True, 'message': 'All schools deleted'})
