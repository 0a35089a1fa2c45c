"""Static reference data for student records."""

LEVELS = [f'Year {year}' for year in range(3, 11)]

GENDERS = ['Male', 'Female', 'Non-binary', 'Other']

# Ministry of Education ethnicity codes (Statistics NZ level 3 classification)
ETHNICITY_CODES = {
    '111': 'NZ European/Pākehā',
    '121': 'British/Irish',
    '122': 'Dutch',
    '123': 'Greek',
    '124': 'Polish',
    '125': 'South Slav',
    '126': 'Italian',
    '127': 'German',
    '128': 'Australian',
    '129': 'Other European',
    '211': 'NZ Māori',
    '311': 'Samoan',
    '321': 'Cook Island Māori',
    '331': 'Tongan',
    '341': 'Niuean',
    '351': 'Tokelauan',
    '361': 'Fijian',
    '371': 'Other Pacific Peoples',
    '411': 'Filipino',
    '412': 'Cambodian',
    '413': 'Vietnamese',
    '414': 'Other Southeast Asian',
    '421': 'Chinese',
    '431': 'Indian',
    '441': 'Sri Lankan',
    '442': 'Japanese',
    '443': 'Korean',
    '444': 'Other Asian',
    '511': 'Middle Eastern',
    '521': 'Latin American',
    '531': 'African',
    '611': 'Other Ethnicity',
}

LANGUAGE_CODES = {
    '1': 'English',
    '2': 'Other',
    '999': 'Unknown',
}

UNKNOWN_LANGUAGE = '999'


def as_options(codes):
    return [{'code': code, 'description': description} for code, description in codes.items()]
