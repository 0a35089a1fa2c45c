import io
import os

import pandas as pd
import requests
from flask import current_app

from roster import db
from roster.errors import ValidationError
from roster.models.school import School

BOM = '\ufeff'

# Ministry school directory download
DIRECTORY_FIELDS = {
    'school_name': 'School Name',
    'address': 'Address',
    'suburb': 'Suburb',
    'town': 'Town',
    'postcode': 'Postcode',
    'phone': 'Phone',
    'email': 'Email',
    'website': 'Website',
    'principal': 'Principal',
    'school_type': 'School Type',
    'authority': 'Authority',
    'gender': 'Gender',
    'org_code': 'Org_Code',
    'takiwa': 'Takiwā',
    'local_body': 'Local Body',
}

# "Tidy" directory export from the education counts site
TIDY_FIELDS = {
    'school_id': 'School_Id',
    'school_name': 'Org_Name',
    'address': 'Add1_Line1',
    'suburb': 'Add1_Suburb',
    'town': 'Add1_City',
    'postcode': 'Add2_Postal_Code',
    'phone': 'Telephone',
    'email': 'Email',
    'website': 'URL',
    'principal': 'Contact1_Name',
    'school_type': 'Org_Type',
    'authority': 'Authority',
    'gender': 'CoEd_Status',
    'org_code': 'School_Id',
    'takiwa': 'Takiwā',
    'local_body': 'Territorial_Authority',
}


def _to_int(value):
    try:
        return int(float(str(value).strip()))
    except (TypeError, ValueError):
        return 0


def _is_yes(value):
    return str(value or '').strip().lower() == 'yes'


def decode_csv(raw):
    """Decode CSV bytes as UTF-8, replacing undecodable bytes with U+FFFD"""
    return raw.decode('utf-8-sig', errors='replace')


def _read_rows(text):
    if text.startswith(BOM):
        text = text[len(BOM):]
    if not text.strip():
        return []
    try:
        df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
    except pd.errors.ParserError as e:
        raise ValidationError(f'Invalid CSV file: {e}')
    df.columns = [str(col).replace(BOM, '').strip() for col in df.columns]
    return df.to_dict(orient='records')


def _clean(value):
    return str(value).strip() if value is not None else ''


def map_directory_row(row):
    school = {field: _clean(row.get(column)) for field, column in DIRECTORY_FIELDS.items()}
    school['school_id'] = _clean(row.get('School Id')) or _clean(row.get('Org_Code'))
    school['decile'] = _to_int(row.get('Decile'))
    school['roll_number'] = _to_int(row.get('Roll Number') or row.get('Total'))
    school['is_primary'] = _is_yes(row.get('IsPrimary'))
    school['is_secondary'] = _is_yes(row.get('IsSecondary'))
    school['is_composite'] = _is_yes(row.get('IsComposite'))
    return school


def map_tidy_row(row):
    school = {field: _clean(row.get(column)) for field, column in TIDY_FIELDS.items()}
    school['decile'] = _to_int(row.get('EQi_Index'))
    school['roll_number'] = _to_int(row.get('Total'))
    school['is_primary'] = False
    school['is_secondary'] = False
    school['is_composite'] = False
    return school


class SchoolService:

    @staticmethod
    def parse_csv(text):
        """
        Map a school directory CSV to school dicts.

        Both the directory download and the tidy export are accepted; the
        mapping is chosen from the header. Rows without a name or id are
        dropped and a repeated school id keeps the last row.
        """
        rows = _read_rows(text)
        if not rows:
            return []

        mapper = map_tidy_row if 'Org_Name' in rows[0] else map_directory_row
        schools = {}
        for row in rows:
            school = mapper(row)
            if school['school_name'] and school['school_id']:
                schools[school['school_id']] = school

        current_app.logger.info(f'CSV parsing complete: {len(rows)} rows read, {len(schools)} schools parsed')
        return list(schools.values())

    @staticmethod
    def get_all():
        return School.query.order_by(School.school_name).all()

    @staticmethod
    def exists(school_id):
        return db.session.query(School.id).filter_by(school_id=school_id).first() is not None

    @staticmethod
    def replace_all(schools):
        """Delete every school and insert ``schools`` in one transaction"""
        try:
            School.query.delete()
            db.session.add_all([School(**school) for school in schools])
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info(f'Replaced schools table with {len(schools)} rows')
        return len(schools)

    @staticmethod
    def delete_all():
        try:
            deleted = School.query.delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return deleted

    @staticmethod
    def fetch_directory(url=None):
        """Download the remote directory CSV and return its text"""
        url = url or current_app.config['SCHOOL_DIRECTORY_URL']
        current_app.logger.info(f'Fetching CSV from remote URL: {url}')
        response = requests.get(url, timeout=current_app.config.get('SCHOOL_DIRECTORY_TIMEOUT', 60))
        response.raise_for_status()
        return decode_csv(response.content)

    @staticmethod
    def refresh_from_remote(url=None):
        schools = SchoolService.parse_csv(SchoolService.fetch_directory(url))
        return SchoolService.replace_all(schools)

    @staticmethod
    def import_upload(path):
        """Load schools from an uploaded file on disk; the file is removed afterwards"""
        try:
            with open(path, 'rb') as handle:
                text = decode_csv(handle.read())
        finally:
            if os.path.exists(path):
                os.remove(path)
        return SchoolService.replace_all(SchoolService.parse_csv(text))
