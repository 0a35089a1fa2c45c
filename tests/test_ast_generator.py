from datetime import datetime
from types import SimpleNamespace

from roster.utils.ast_generator import (
    GroupStudents, escape_csv, extract_year_level, generate_ast_file, map_gender_code,
)

NOW = datetime(2026, 3, 4, 5, 6, 7, 891000)


def make_student(student_id, nsn, level='Year 5', gender='Female', language='1', first='Aroha', last='Ngata'):
    return SimpleNamespace(student_id=student_id, nsn=nsn, first_name=first, last_name=last,
                           level=level, gender=gender, language=language, ethnicity='211')


def section_rows(text, name):
    lines = text.split('\n')
    for index, line in enumerate(lines):
        if line.startswith(f'SECTION,{name},ROWS,'):
            count = int(line.rsplit(',', 1)[1])
            return lines[index + 1:index + 1 + count]
    raise AssertionError(f'section {name} missing')


def test_full_layout():
    a = make_student('STU-A', '123456782', gender='Male', language='999')
    b = make_student('STU-B', '000000001', level='Year 10', first='Jo "JJ"')
    output = generate_ast_file('1234', [GroupStudents('g1', 'Room 1', [a, b])], now=NOW)

    assert output == (
        'SECTION,Header\n'
        'ast.csv,2026-03-04 05:06:07.891,1\n'
        'SECTION,Import_Type\n'
        'Class\n'
        'SECTION,School,ROWS,1\n'
        '1234\n'
        'SECTION,Class,ROWS,1\n'
        '1,Room 1,Y\n'
        'SECTION,Student,ROWS,2\n'
        '1,123456782,Ngata,Aroha,5,M,,211\n'
        '2,000000001,Ngata,Jo ""JJ"",10,F,1,211\n'
        'SECTION,Student_Class,ROWS,2\n'
        '1,123456782,1\n'
        '2,000000001,1\n'
        'SECTION,Footer\n'
        'ast.csv\n'
    )


def test_students_deduplicated_across_groups():
    a = make_student('STU-A', '123456782')
    b = make_student('STU-B', '000000001')
    c = make_student('STU-C', '600000000')
    groups = [
        GroupStudents('g1', 'Room 1', [a, b]),
        GroupStudents('g2', 'Room 2', [b, c]),
        GroupStudents('g3', 'Empty', []),
    ]
    output = generate_ast_file('1234', groups, now=NOW)

    assert len(section_rows(output, 'Class')) == 3
    assert [row.split(',')[1] for row in section_rows(output, 'Student')] == ['123456782', '000000001', '600000000']
    assert section_rows(output, 'Student_Class') == [
        '1,123456782,1',
        '2,000000001,1',
        '2,000000001,2',
        '3,600000000,2',
    ]


def test_output_stable_apart_from_timestamp():
    groups = [GroupStudents('g1', 'Room 1', [make_student('STU-A', '123456782')])]
    first = generate_ast_file('1234', groups, now=NOW).split('\n')
    second = generate_ast_file('1234', groups).split('\n')

    assert first[0] == second[0]
    assert first[2:] == second[2:]


def test_field_mappings():
    assert extract_year_level('Year 8') == 8
    assert extract_year_level('year 12') == 12
    assert extract_year_level('Senior') == 3
    assert extract_year_level(None) == 3

    assert map_gender_code('Male') == 'M'
    assert map_gender_code('FEMALE') == 'F'
    assert map_gender_code('Non-binary') == 'N'
    assert map_gender_code('Other') == 'N'

    assert escape_csv('Room "A", west') == 'Room ""A"", west'
