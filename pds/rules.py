"""
Field rule primitives for the Personal Data Sheet (CS Form 212).

Pure predicates and lookup tables shared by the validation engine and the
autofix engine. Nothing in this module performs I/O or keeps mutable state;
every table is frozen at import time and can be read from any thread.

Rule Reference:
===============

1. DATES
   - Numeric MM/DD/YYYY only, zero padded (01/05/1990, not 1/5/1990)
   - Must be a real calendar date (02/29 only on leap years, no 02/30)
   - Blank values are never a valid date

2. EMAIL
   - local@domain.tld, no whitespace, TLD of at least two letters

3. REFERENCE NAMES
   - FIRST NAME(S), M., SURNAME
   - Exactly two commas, middle segment is one letter with optional period

4. INSTITUTION NAMES
   - No abbreviations: office acronyms (CSC, DepEd, DOH, ...), shortened
     words (Inc., Corp., Univ., Elem., ...) or parenthesised acronyms (CSC)

5. SALARY GRADE
   - Two-digit grade, hyphen, single step digit (e.g. 24-2, 09-1)
"""

import re
from datetime import date
from types import MappingProxyType
from typing import Any, Optional


# Regex patterns
DATE_PATTERN = re.compile(r'^(0[1-9]|1[0-2])/(0[1-9]|[12]\d|3[01])/(\d{4})$')
EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
REFERENCE_NAME_PATTERN = re.compile(r'^\s*[^,\s][^,]*,\s*[A-Za-z]\.?\s*,\s*[^,\s][^,]*$')
SALARY_GRADE_PATTERN = re.compile(r'^\d{2}-\d$')
PARENTHESISED_ACRONYM_PATTERN = re.compile(r'\(([A-Z]{2,})\)')

PRESENT = 'Present'
NOT_APPLICABLE = 'N/A'

# Enums - strictly enforced, order is used in suggestion text
CIVIL_STATUSES = ('Single', 'Married', 'Widowed', 'Separated', 'Others')
CIVIL_STATUS_OTHERS = 'Others'
APPOINTMENT_STATUSES = ('Permanent', 'Temporary', 'Casual', 'Contractual')
LEARNING_DEVELOPMENT_TYPES = ('Managerial', 'Supervisory', 'Technical', 'Foundation')

# Abbreviation -> full name. Acronyms are matched case-sensitively as whole
# tokens; shortened words include their trailing period.
ABBREVIATIONS = MappingProxyType({
    # National government offices
    'CSC': 'Civil Service Commission',
    'DepEd': 'Department of Education',
    'DOH': 'Department of Health',
    'DILG': 'Department of the Interior and Local Government',
    'DBM': 'Department of Budget and Management',
    'DOF': 'Department of Finance',
    'DOJ': 'Department of Justice',
    'DOLE': 'Department of Labor and Employment',
    'DPWH': 'Department of Public Works and Highways',
    'DSWD': 'Department of Social Welfare and Development',
    'DENR': 'Department of Environment and Natural Resources',
    'DTI': 'Department of Trade and Industry',
    'DOST': 'Department of Science and Technology',
    'DAR': 'Department of Agrarian Reform',
    'DND': 'Department of National Defense',
    'DFA': 'Department of Foreign Affairs',
    'DICT': 'Department of Information and Communications Technology',
    'BIR': 'Bureau of Internal Revenue',
    'GSIS': 'Government Service Insurance System',
    'SSS': 'Social Security System',
    'PNP': 'Philippine National Police',
    'AFP': 'Armed Forces of the Philippines',
    'COA': 'Commission on Audit',
    'CHED': 'Commission on Higher Education',
    'TESDA': 'Technical Education and Skills Development Authority',
    'NEDA': 'National Economic and Development Authority',
    'LTO': 'Land Transportation Office',
    'LGU': 'Local Government Unit',
    # Schools (no 'UP', which collides with the word in all-caps entries)
    'PUP': 'Polytechnic University of the Philippines',
    # Shortened words
    'Inc.': 'Incorporated',
    'Corp.': 'Corporation',
    'Co.': 'Company',
    'Univ.': 'University',
    'Elem.': 'Elementary',
    'Natl.': 'National',
    "Nat'l": 'National',
    "Int'l": 'International',
    'Dept.': 'Department',
    "Gov't": 'Government',
    'Govt.': 'Government',
    'Assn.': 'Association',
    'Sr.': 'Senior',
    'Asst.': 'Assistant',
    'Mgr.': 'Manager',
})

# Longest first so that overlapping tokens resolve to the longer spelling
ABBREVIATION_PATTERN = re.compile(
    r'(?<!\w)(' + '|'.join(
        re.escape(token) for token in sorted(ABBREVIATIONS, key=len, reverse=True)
    ) + r')(?!\w)'
)

# Lower-cased, whitespace-collapsed input -> canonical civil status.
# Anything missing from this table maps to Others (divorce is not recognised
# by Philippine civil registries).
CIVIL_STATUS_SYNONYMS = MappingProxyType({
    'single': 'Single',
    'unmarried': 'Single',
    'never married': 'Single',
    'married': 'Married',
    'wed': 'Married',
    'wedded': 'Married',
    'widowed': 'Widowed',
    'widow': 'Widowed',
    'widower': 'Widowed',
    'separated': 'Separated',
    'legally separated': 'Separated',
    'others': 'Others',
    'other': 'Others',
})

# Mistyped domain -> intended provider domain
EMAIL_DOMAIN_TYPOS = MappingProxyType({
    'gmail.co': 'gmail.com',
    'gmial.com': 'gmail.com',
    'gmai.com': 'gmail.com',
    'gmal.com': 'gmail.com',
    'gmail.con': 'gmail.com',
    'yahoo.co': 'yahoo.com',
    'yahooo.com': 'yahoo.com',
    'yaho.com': 'yahoo.com',
    'yahoo.con': 'yahoo.com',
    'hotmail.co': 'hotmail.com',
    'hotmial.com': 'hotmail.com',
    'hotmal.com': 'hotmail.com',
    'hotmail.con': 'hotmail.com',
})

# Fields that may be backfilled with N/A when left blank
NOT_APPLICABLE_FIELDS = frozenset([
    'nameExtension',
    'civilStatusDetails',
    'telephoneNumber',
    'mobileNumber',
    'gsisId',
    'pagibigId',
    'philhealthId',
    'sssId',
    'tinId',
    'agencyEmployeeId',
])

# Identity fields that are never filled in automatically
CRITICAL_FIELDS = frozenset(['surname', 'firstName', 'middleName', 'dateOfBirth'])

NAME_SUFFIXES = frozenset(['JR', 'JR.', 'SR', 'SR.', 'II', 'III', 'IV', 'V'])


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after trimming."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ''
    return False


def validate_date_format(value: Any) -> bool:
    """
    Check that a value is a real calendar date written as MM/DD/YYYY.

    Args:
        value: Candidate date string

    Returns:
        True only for zero-padded MM/DD/YYYY strings naming an existing day
    """
    if not isinstance(value, str):
        return False

    match = DATE_PATTERN.match(value)
    if not match:
        return False

    month, day, year = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def parse_form_date(value: Any) -> Optional[date]:
    """Parse an MM/DD/YYYY value into a date, or None if it is not one."""
    if not validate_date_format(value):
        return None
    month, day, year = (int(part) for part in DATE_PATTERN.match(value).groups())
    return date(year, month, day)


def format_form_date(value: date) -> str:
    """Render a date as MM/DD/YYYY."""
    return f'{value.month:02d}/{value.day:02d}/{value.year:04d}'


def validate_email_format(value: Any) -> bool:
    """Check the local@domain.tld shape of an email address."""
    if not isinstance(value, str) or value == '':
        return False
    if len(value) > 254:
        return False
    return EMAIL_PATTERN.match(value) is not None


def email_domain_typo(value: Any) -> Optional[str]:
    """Return the intended domain if the address uses a known mistyped one."""
    if not isinstance(value, str) or '@' not in value:
        return None
    domain = value.strip().rsplit('@', 1)[1].lower()
    return EMAIL_DOMAIN_TYPOS.get(domain)


def validate_reference_name_format(value: Any) -> bool:
    """Check the FIRST NAME, M., SURNAME layout. Case is not enforced here."""
    if not isinstance(value, str):
        return False
    return REFERENCE_NAME_PATTERN.match(value) is not None


def contains_abbreviation(text: Any) -> bool:
    """
    Detect abbreviations in an institution, office or title name.

    Args:
        text: Name to inspect

    Returns:
        True if a dictionary abbreviation or a parenthesised acronym is found
    """
    if not isinstance(text, str) or text.strip() == '':
        return False
    if ABBREVIATION_PATTERN.search(text):
        return True
    return PARENTHESISED_ACRONYM_PATTERN.search(text) is not None


def validate_salary_grade_format(value: Any) -> bool:
    """Check the NN-N salary grade layout (e.g. 24-2)."""
    if not isinstance(value, str):
        return False
    return SALARY_GRADE_PATTERN.match(value) is not None
