import logging
import random
import string

from faker import Faker

from roster.errors import ValidationError
from roster.utils.codes import LEVELS, GENDERS, ETHNICITY_CODES, LANGUAGE_CODES
from roster.utils.nsn import random_nsn

logger = logging.getLogger(__name__)
fake = Faker()

MAX_ATTEMPTS = 100
STUDENT_ID_PREFIX = 'STU-'
STUDENT_ID_LENGTH = 8


class GenerationOptions:
    """Knobs for a generated batch"""

    def __init__(self, last_name_suffix=None, fixed_level=None, invalid_nsn_count=0):
        self.last_name_suffix = last_name_suffix
        self.fixed_level = fixed_level
        self.invalid_nsn_count = invalid_nsn_count

    @classmethod
    def from_dict(cls, data):
        """Build options from a request body, raising ValidationError on bad values"""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError('options must be an object')

        suffix = data.get('last_name_suffix')
        if suffix is not None:
            if not isinstance(suffix, str):
                raise ValidationError('last_name_suffix must be a string')
            suffix = suffix.strip() or None

        fixed_level = data.get('fixed_level')
        if fixed_level is not None and fixed_level != '':
            if isinstance(fixed_level, int) and not isinstance(fixed_level, bool):
                fixed_level = f'Year {fixed_level}'
            if fixed_level not in LEVELS:
                raise ValidationError(f'fixed_level must be one of: {", ".join(LEVELS)}')
        else:
            fixed_level = None

        invalid_count = data.get('invalid_nsn_count', 0) or 0
        if isinstance(invalid_count, bool) or not isinstance(invalid_count, int) or invalid_count < 0:
            raise ValidationError('invalid_nsn_count must be a non-negative integer')

        return cls(last_name_suffix=suffix, fixed_level=fixed_level, invalid_nsn_count=invalid_count)


def generate_student_id():
    alphabet = string.ascii_uppercase + string.digits
    return STUDENT_ID_PREFIX + ''.join(random.choices(alphabet, k=STUDENT_ID_LENGTH))


def generate_student(options=None, valid_nsn=True):
    """Generate one random student record as a dict"""
    options = options or GenerationOptions()

    last_name = fake.last_name()
    if options.last_name_suffix:
        last_name = f'{last_name} {options.last_name_suffix}'

    return {
        'student_id': generate_student_id(),
        'first_name': fake.first_name(),
        'last_name': last_name,
        'level': options.fixed_level or random.choice(LEVELS),
        'gender': random.choice(GENDERS),
        'ethnicity': random.choice(list(ETHNICITY_CODES)),
        'language': random.choice(list(LANGUAGE_CODES)),
        'nsn': random_nsn(valid=valid_nsn)
    }


def generate_students(count, existing_nsns=(), options=None):
    """
    Generate up to ``count`` students with unique ids and NSNs.

    Args:
        count (int): number of records requested
        existing_nsns (iterable): NSNs already in use that must not be reissued
        options (GenerationOptions, optional): batch knobs

    Returns:
        list: generated records; may be shorter than ``count`` when a record
        could not be made unique within MAX_ATTEMPTS tries
    """
    options = options or GenerationOptions()
    used_nsns = set(existing_nsns)
    used_ids = set()
    students = []
    invalid_remaining = options.invalid_nsn_count

    for _ in range(count):
        valid_nsn = invalid_remaining <= 0
        for _attempt in range(MAX_ATTEMPTS):
            student = generate_student(options, valid_nsn=valid_nsn)
            if student['nsn'] not in used_nsns and student['student_id'] not in used_ids:
                break
        else:
            logger.warning('Skipping student after %d colliding attempts', MAX_ATTEMPTS)
            continue

        used_nsns.add(student['nsn'])
        used_ids.add(student['student_id'])
        students.append(student)
        if not valid_nsn:
            invalid_remaining -= 1

    return students
