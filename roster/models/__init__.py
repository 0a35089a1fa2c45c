from roster.models.school import School
from roster.models.user import User, UserSchool
from roster.models.student import Student
from roster.models.group import Group, GroupStudent

__all__ = ['School', 'User', 'UserSchool', 'Student', 'Group', 'GroupStudent']
