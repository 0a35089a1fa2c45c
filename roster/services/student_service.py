from flask import current_app
from sqlalchemy.exc import IntegrityError

from roster import db
from roster.errors import Conflict, NotFound, ValidationError
from roster.models.group import GroupStudent
from roster.models.student import Student
from roster.services.student_generator import generate_students
from roster.utils.nsn import is_valid_nsn


class StudentService:

    @staticmethod
    def get_all():
        return Student.query.order_by(Student.student_id).all()

    @staticmethod
    def existing_nsns():
        return {nsn for (nsn,) in db.session.query(Student.nsn).all()}

    @staticmethod
    def create_generated(count, options=None, group=None):
        """
        Generate up to ``count`` students, store them and optionally add them
        to ``group``. Everything is committed in one transaction.
        """
        records = generate_students(count, existing_nsns=StudentService.existing_nsns(), options=options)
        students = [Student(**record) for record in records]

        try:
            db.session.add_all(students)
            if group is not None:
                db.session.flush()
                for student in students:
                    db.session.add(GroupStudent(group_id=group.id, student_id=student.student_id))
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict('Generated students collided with existing records, please retry')

        current_app.logger.info(f'Generated {len(students)} of {count} requested students')
        return students

    @staticmethod
    def update(student_id, fields):
        if not isinstance(fields, dict) or not fields:
            raise ValidationError('No fields to update')

        invalid = [name for name in fields if name not in Student.EDITABLE_FIELDS]
        if invalid:
            raise ValidationError(f'Invalid field(s): {", ".join(sorted(invalid))}')

        for name, value in fields.items():
            if name == 'language':
                if value is not None and not isinstance(value, str):
                    raise ValidationError('language must be a string')
            elif not isinstance(value, str) or not value.strip():
                raise ValidationError(f'{name} must be a non-empty string')
            elif name == 'nsn' and not is_valid_nsn(value.strip()):
                # invalid check digits are only ever produced by the generator
                raise ValidationError('nsn must be a 9-digit NSN with a valid check digit')

        student = db.session.get(Student, student_id)
        if not student:
            raise NotFound('Student not found')

        for name, value in fields.items():
            setattr(student, name, value.strip() if isinstance(value, str) else value)

        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict('NSN already in use')
        return student

    @staticmethod
    def delete_all():
        try:
            GroupStudent.query.delete()
            deleted = Student.query.delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return deleted
