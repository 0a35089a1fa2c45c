from collections import OrderedDict
import uuid

from flask import current_app
from sqlalchemy.exc import IntegrityError

from roster import db
from roster.errors import AccessDenied, Conflict, NotFound
from roster.models.group import Group, GroupStudent
from roster.models.student import Student
from roster.services.favorite_service import FavoriteService
from roster.utils.validators import validate_group_name

DUPLICATE_NAME = 'A group with this name already exists for this school'


class GroupService:

    @staticmethod
    def get_owned(user, group_id):
        """Return the group if it exists and belongs to ``user``"""
        group = Group.query.filter_by(group_id=group_id).first()
        if not group:
            raise NotFound('Group not found')
        if group.user_id != user.user_id:
            raise AccessDenied()
        return group

    @staticmethod
    def list_for_school(user, school_id):
        return Group.query.filter_by(user_id=user.user_id, school_id=school_id)\
                          .order_by(Group.group_name.asc())\
                          .all()

    @staticmethod
    def list_for_user(user):
        """All of the user's groups keyed by school id"""
        groups = Group.query.filter_by(user_id=user.user_id)\
                            .order_by(Group.school_id, Group.group_name.asc())\
                            .all()
        grouped = OrderedDict()
        for group in groups:
            grouped.setdefault(group.school_id, []).append(group)
        return groups, grouped

    @staticmethod
    def create(user, school_id, group_name):
        name = validate_group_name(group_name)

        if school_id not in FavoriteService.school_ids(user):
            raise AccessDenied('School not found in your list')

        group = Group(group_id=str(uuid.uuid4()), user_id=user.user_id, school_id=school_id, group_name=name)
        try:
            db.session.add(group)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict(DUPLICATE_NAME)

        current_app.logger.info(f'Created group {group.group_id} for school {school_id}')
        return group

    @staticmethod
    def rename(user, group_id, group_name):
        name = validate_group_name(group_name)
        group = GroupService.get_owned(user, group_id)

        group.group_name = name
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise Conflict(DUPLICATE_NAME)
        return group

    @staticmethod
    def delete(user, group_id):
        """
        Delete a group with its memberships. Member students that belong to
        no other group are deleted as well.

        Returns:
            int: number of students purged
        """
        group = GroupService.get_owned(user, group_id)
        member_ids = [member.student_id for member in group.members]

        try:
            db.session.delete(group)
            db.session.flush()

            orphan_ids = []
            if member_ids:
                still_linked = {student_id for (student_id,) in
                                db.session.query(GroupStudent.student_id)
                                          .filter(GroupStudent.student_id.in_(member_ids))
                                          .all()}
                orphan_ids = [student_id for student_id in member_ids if student_id not in still_linked]
                if orphan_ids:
                    Student.query.filter(Student.student_id.in_(orphan_ids)).delete(synchronize_session=False)

            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(f'Deleted group {group_id} and {len(orphan_ids)} orphaned students')
        return len(orphan_ids)

    @staticmethod
    def members(user, group_id):
        group = GroupService.get_owned(user, group_id)
        return group, group.students

    @staticmethod
    def remove_member(user, group_id, student_id):
        """Remove one membership row; the student record is kept"""
        group = GroupService.get_owned(user, group_id)
        membership = GroupStudent.query.filter_by(group_id=group.id, student_id=student_id).first()
        if not membership:
            raise NotFound('Student not found in this group')

        try:
            db.session.delete(membership)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
