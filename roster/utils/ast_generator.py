"""AST import file writer.

The file is a sequence of ``SECTION`` blocks (Header, Import_Type, School,
Class, Student, Student_Class, Footer). Students get sequential local ids in
first-seen order across all groups; classes are numbered in input order.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from roster.utils.codes import UNKNOWN_LANGUAGE

AST_FILENAME = 'ast.csv'
AST_VERSION = 1
DEFAULT_YEAR_LEVEL = 3

YEAR_PATTERN = re.compile(r'Year (\d+)', re.IGNORECASE)


@dataclass
class GroupStudents:
    group_id: str
    group_name: str
    students: List = field(default_factory=list)


def escape_csv(value) -> str:
    # Quotes are doubled; commas are passed through as the downstream importer expects
    return str(value if value is not None else '').replace('"', '""')


def map_gender_code(gender) -> str:
    g = (gender or '').lower()
    if g == 'male':
        return 'M'
    if g == 'female':
        return 'F'
    return 'N'


def extract_year_level(level) -> int:
    match = YEAR_PATTERN.search(level or '')
    return int(match.group(1)) if match else DEFAULT_YEAR_LEVEL


def format_timestamp(now: datetime) -> str:
    return now.strftime('%Y-%m-%d %H:%M:%S.') + f'{now.microsecond // 1000:03d}'


def generate_ast_file(school_id: str, groups: Sequence[GroupStudents],
                      filename: str = AST_FILENAME, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    lines = [
        'SECTION,Header',
        f'{filename},{format_timestamp(now)},{AST_VERSION}',
        'SECTION,Import_Type',
        'Class',
        'SECTION,School,ROWS,1',
        str(school_id),
    ]

    # Unique students across all groups, first-seen order
    local_ids = {}
    unique_students = []
    for group in groups:
        for student in group.students:
            if student.student_id not in local_ids:
                local_ids[student.student_id] = len(unique_students) + 1
                unique_students.append(student)

    lines.append(f'SECTION,Class,ROWS,{len(groups)}')
    for class_id, group in enumerate(groups, start=1):
        lines.append(f'{class_id},{escape_csv(group.group_name)},Y')

    lines.append(f'SECTION,Student,ROWS,{len(unique_students)}')
    for student in unique_students:
        language = '' if student.language == UNKNOWN_LANGUAGE else (student.language or '')
        lines.append(','.join([
            str(local_ids[student.student_id]),
            student.nsn,
            escape_csv(student.last_name),
            escape_csv(student.first_name),
            str(extract_year_level(student.level)),
            map_gender_code(student.gender),
            language,
            student.ethnicity,
        ]))

    links = []
    for class_id, group in enumerate(groups, start=1):
        for student in group.students:
            links.append(f'{local_ids[student.student_id]},{student.nsn},{class_id}')

    lines.append(f'SECTION,Student_Class,ROWS,{len(links)}')
    lines.extend(links)

    lines.append('SECTION,Footer')
    lines.append(filename)

    return '\n'.join(lines) + '\n'
