from datetime import datetime, timezone

from roster.errors import NotFound
from roster.models.group import Group
from roster.services.group_service import GroupService
from roster.utils.ast_generator import GroupStudents, generate_ast_file


class AstService:

    @staticmethod
    def collect_groups(user, school_id, group_id=None):
        """
        Load the groups to export with their students.

        With ``group_id`` only that group is exported (it must belong to the
        caller and to ``school_id``); otherwise every group the caller owns
        for the school.
        """
        if group_id:
            group = GroupService.get_owned(user, group_id)
            if group.school_id != school_id:
                raise NotFound('Group not found for this school')
            groups = [group]
        else:
            groups = Group.query.filter_by(user_id=user.user_id, school_id=school_id)\
                                .order_by(Group.group_name.asc())\
                                .all()

        if not groups:
            raise NotFound('No groups found for this school')

        collected = [GroupStudents(group.group_id, group.group_name, group.students) for group in groups]
        total = sum(len(group.students) for group in collected)
        if total == 0:
            raise NotFound('No students found in groups')
        return collected, total

    @staticmethod
    def export(user, school_id, group_id=None, now=None):
        """Return ``(csv_text, student_count)``"""
        groups, total = AstService.collect_groups(user, school_id, group_id)
        return generate_ast_file(school_id, groups, now=now or datetime.now(timezone.utc)), total

    @staticmethod
    def download_filename(school_id, now=None):
        now = now or datetime.now(timezone.utc)
        return f'AST_{school_id}_{now.strftime("%Y-%m-%d")}.csv'
