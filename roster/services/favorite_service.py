from flask import current_app
from sqlalchemy.exc import IntegrityError

from roster import db
from roster.errors import Conflict, NotFound
from roster.models.school import School
from roster.models.user import UserSchool
from roster.services.school_service import SchoolService


class FavoriteService:
    """A user's personal list of schools ("My Schools")"""

    @staticmethod
    def list_schools(user):
        rows = db.session.query(School, UserSchool)\
                         .join(UserSchool, UserSchool.school_id == School.school_id)\
                         .filter(UserSchool.user_id == user.user_id)\
                         .order_by(UserSchool.added_at.desc(), UserSchool.id.desc())\
                         .all()

        schools = []
        for school, favorite in rows:
            data = school.to_dict()
            data['added_at'] = favorite.added_at.isoformat() if favorite.added_at else None
            data['notes'] = favorite.notes
            schools.append(data)
        return schools

    @staticmethod
    def add(user, school_id, notes=None):
        if not SchoolService.exists(school_id):
            raise NotFound('School not found')

        try:
            db.session.add(UserSchool(user_id=user.user_id, school_id=school_id, notes=notes))
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict('School already in your list')
        current_app.logger.info(f'User {user.user_id} added school {school_id}')

    @staticmethod
    def remove(user, school_id):
        try:
            removed = UserSchool.query.filter_by(user_id=user.user_id, school_id=school_id).delete()
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        if not removed:
            raise NotFound('School not in your list')

    @staticmethod
    def contains(user, school_id):
        return UserSchool.query.filter_by(user_id=user.user_id, school_id=school_id).first() is not None

    @staticmethod
    def school_ids(user):
        rows = db.session.query(UserSchool.school_id).filter_by(user_id=user.user_id).all()
        return [school_id for (school_id,) in rows]
