"""
Automatic correction of PDS validation errors.

Each error code maps to exactly one repair strategy. A strategy receives the
error's field path, the value currently stored at that path and the error
itself, and returns an AppliedFix or None when no safe correction exists.

Repair Strategies:
==================

INVALID_DATE_FORMAT          reparse known layouts, write MM/DD/YYYY
ABBREVIATION_NOT_ALLOWED     expand dictionary abbreviations in place
INVALID_NAME_FORMAT          references only: 'Juan P. Dela Cruz' -> 'JUAN, P., DELA CRUZ'
INVALID_EMAIL_FORMAT         trim, lower-case, fix known provider domain typos
INVALID_CIVIL_STATUS         map synonyms onto the five form choices
INVALID_SALARY_GRADE_FORMAT  normalise separators, zero-pad the grade
REQUIRED_FIELD               write N/A into non-critical optional fields
EMPTY_FIELD                  write ['N/A'] into empty other-information lists

Every other code is passed through as unfixable. Fixes are computed from the
original document and applied to a deep copy in a single pass, so one fix
never sees the outcome of another.
"""

import copy
import re
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Union

from dateutil import parser as date_parser

from pds.fix_summary import format_fix_summary
from pds.models import (
    AppliedFix, AutoFixResult, ErrorCode, FixType, ValidationError, ValidationResult
)
from pds.rules import (
    ABBREVIATION_PATTERN, ABBREVIATIONS, CIVIL_STATUS_OTHERS, CIVIL_STATUS_SYNONYMS,
    CRITICAL_FIELDS, EMAIL_DOMAIN_TYPOS, NAME_SUFFIXES, NOT_APPLICABLE,
    NOT_APPLICABLE_FIELDS, contains_abbreviation, format_form_date, is_blank, validate_email_format,
    validate_salary_grade_format
)
from pds.utils import get_nested_value, parse_path, path_leaf, set_nested_value


RepairStrategy = Callable[[str, Any, ValidationError], Optional[AppliedFix]]

NUMERIC_DATE_PATTERN = re.compile(r'^(\d{1,4})([/.\-])(\d{1,2})\2(\d{1,4})$')
# Two defaults that differ in every date component; a component that the
# text does not supply shows up as a disagreement between the two parses.
PARSE_DEFAULTS = (datetime(1904, 1, 1), datetime(1905, 2, 2))
SALARY_SEPARATOR_PATTERN = re.compile(r'[\s_]+')
PADDABLE_SALARY_GRADE_PATTERN = re.compile(r'^(\d{1,2})-(\d)$')
REFERENCE_PATH_PATTERN = re.compile(r'^references\[\d+\]\.')
REDUNDANT_ACRONYM_PATTERN = re.compile(r'\s*\(([A-Z]{2,})\)')


def _build_date(year: str, month: str, day: str) -> Optional[date]:
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_flexible_date(value: str) -> Optional[date]:
    """
    Interpret a date written in one of the common alternate layouts.

    Numeric dates with '/', '-' or '.' separators are read year-first when the
    first group has four digits. Otherwise the year is last and the first
    group is read as the month, unless it is greater than 12, in which case it
    is the day. If the preferred reading is not a real date the other one is
    tried.

    Any other text (ISO datetimes, 'Monday, January 15, 2024', '15-Jan-2024',
    'January 15th, 2024') is read by dateutil and must name a day, month and
    year.

    Args:
        value: Date text such as '2024-01-15', '15/01/2024' or 'January 15, 2024'

    Returns:
        The parsed date, or None if no reading gives a real calendar date
    """
    text = ' '.join(value.strip().split())
    if not text:
        return None

    match = NUMERIC_DATE_PATTERN.match(text)
    if match:
        first, _, second, third = match.groups()
        if len(first) == 4:
            return _build_date(first, second, third)
        if len(third) != 4:
            return None
        if int(first) > 12:
            return _build_date(third, second, first)
        return _build_date(third, first, second) or _build_date(third, second, first)

    try:
        readings = {date_parser.parse(text, default=default).date() for default in PARSE_DEFAULTS}
    except (ValueError, OverflowError):
        return None

    # Partial dates such as 'January 2024' are not completed
    if len(readings) != 1:
        return None
    return readings.pop()


def fix_date_format(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """Rewrite a recognisable date as MM/DD/YYYY."""
    if not isinstance(value, str):
        return None

    parsed = parse_flexible_date(value)
    if parsed is None or parsed.year < 1000:
        return None

    corrected = format_form_date(parsed)
    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=corrected,
        fix_type=FixType.DATE_FORMAT_CORRECTION,
        description=f'Converted date "{value}" to MM/DD/YYYY format',
    )


def expand_abbreviations(text: str) -> str:
    """Expand every dictionary abbreviation, leaving other text untouched."""
    def drop_redundant(match):
        expansion = ABBREVIATIONS.get(match.group(1))
        if expansion and expansion.lower() in text.lower():
            return ''
        return match.group(0)

    # '(CSC)' after 'Civil Service Commission' adds nothing once expanded
    reduced = REDUNDANT_ACRONYM_PATTERN.sub(drop_redundant, text)
    return ABBREVIATION_PATTERN.sub(lambda m: ABBREVIATIONS[m.group(1)], reduced)


def fix_abbreviation(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """Expand abbreviations in an institution or title name."""
    if not isinstance(value, str) or not contains_abbreviation(value):
        return None

    corrected = expand_abbreviations(value)
    # A partial expansion would be flagged again, so leave it to the user
    if corrected == value or contains_abbreviation(corrected):
        return None

    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=corrected,
        fix_type=FixType.ABBREVIATION_EXPANSION,
        description='Expanded abbreviations to full names',
    )


def fix_name_format(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """
    Reformat a reference's free-text name as FIRST, M., SURNAME.

    The first token is the first name, the second supplies the middle
    initial and everything after it is the surname (with any suffix such as
    JR. kept at the end). Names with fewer than three tokens, or that
    already contain commas, are left for the user.
    """
    if not REFERENCE_PATH_PATTERN.match(field_path or ''):
        return None
    if not isinstance(value, str) or ',' in value:
        return None

    tokens = value.split()
    suffix = []
    if tokens and tokens[-1].upper() in NAME_SUFFIXES:
        suffix = [tokens.pop()]
    if len(tokens) < 3:
        return None

    first, middle, surname = tokens[0], tokens[1], tokens[2:] + suffix
    initial = middle[0]
    if not initial.isalpha():
        return None

    corrected = f'{first}, {initial}., {" ".join(surname)}'.upper()
    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=corrected,
        fix_type=FixType.NAME_FORMAT_CORRECTION,
        description='Reformatted reference name to FIRST NAME, M.I., SURNAME',
    )


def fix_email_format(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """Correct a known provider domain typo."""
    if not isinstance(value, str):
        return None

    normalized = value.strip().lower()
    local, at, domain = normalized.rpartition('@')
    if not at or not local:
        return None

    intended = EMAIL_DOMAIN_TYPOS.get(domain)
    if intended is None:
        return None

    corrected = f'{local}@{intended}'
    if not validate_email_format(corrected):
        return None

    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=corrected,
        fix_type=FixType.EMAIL_FORMAT_CORRECTION,
        description=f'Corrected email domain "{domain}" to "{intended}"',
    )


def fix_civil_status(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """Map a civil status synonym onto one of the form's five choices."""
    if not isinstance(value, str) or is_blank(value):
        return None

    key = ' '.join(value.lower().split())
    corrected = CIVIL_STATUS_SYNONYMS.get(key, CIVIL_STATUS_OTHERS)

    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=corrected,
        fix_type=FixType.CIVIL_STATUS_CORRECTION,
        description=f'Standardized civil status "{value}" to "{corrected}"',
    )


def fix_salary_grade_format(field_path: str, value: Any,
                            error: ValidationError) -> Optional[AppliedFix]:
    """Normalise a salary grade to the NN-N layout."""
    if not isinstance(value, str):
        return None

    normalized = SALARY_SEPARATOR_PATTERN.sub('-', value.strip())
    match = PADDABLE_SALARY_GRADE_PATTERN.match(normalized)
    if not match:
        return None

    corrected = f'{int(match.group(1)):02d}-{match.group(2)}'
    if not validate_salary_grade_format(corrected):
        return None

    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=corrected,
        fix_type=FixType.SALARY_GRADE_FORMAT_CORRECTION,
        description=f'Formatted salary grade "{value}" as "{corrected}"',
    )


def fix_required_field(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """Write N/A into a blank non-critical field."""
    leaf = path_leaf(field_path)
    if leaf in CRITICAL_FIELDS or leaf not in NOT_APPLICABLE_FIELDS:
        return None
    if not is_blank(value):
        return None

    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=NOT_APPLICABLE,
        fix_type=FixType.REQUIRED_FIELD_NA,
        description='Filled non-applicable field with N/A',
    )


def fix_empty_field(field_path: str, value: Any, error: ValidationError) -> Optional[AppliedFix]:
    """Write ['N/A'] into an empty other-information list."""
    if not (field_path or '').startswith('otherInformation.'):
        return None
    if not isinstance(value, list) or len(value) > 0:
        return None

    return AppliedFix(
        field=field_path,
        original_value=value,
        corrected_value=[NOT_APPLICABLE],
        fix_type=FixType.EMPTY_FIELD_NA,
        description='Filled empty list with N/A',
    )


REPAIR_STRATEGIES: Dict[ErrorCode, RepairStrategy] = {
    ErrorCode.INVALID_DATE_FORMAT: fix_date_format,
    ErrorCode.ABBREVIATION_NOT_ALLOWED: fix_abbreviation,
    ErrorCode.INVALID_NAME_FORMAT: fix_name_format,
    ErrorCode.INVALID_EMAIL_FORMAT: fix_email_format,
    ErrorCode.INVALID_CIVIL_STATUS: fix_civil_status,
    ErrorCode.INVALID_SALARY_GRADE_FORMAT: fix_salary_grade_format,
    ErrorCode.REQUIRED_FIELD: fix_required_field,
    ErrorCode.EMPTY_FIELD: fix_empty_field,
}


def get_repair_strategy(code: Union[ErrorCode, str]) -> Optional[RepairStrategy]:
    """Look up the repair strategy for an error code (None if there is none)."""
    try:
        return REPAIR_STRATEGIES.get(ErrorCode(code))
    except ValueError:
        return None


def _coerce_errors(validation_result: Union[ValidationResult, Dict[str, Any], None]) -> List[ValidationError]:
    if isinstance(validation_result, ValidationResult):
        return list(validation_result.errors)
    if isinstance(validation_result, dict):
        return ValidationResult.from_dict(validation_result).errors
    return []


def _attempt_fix(source: Dict[str, Any], error: ValidationError) -> Optional[AppliedFix]:
    strategy = get_repair_strategy(error.code)
    if strategy is None:
        return None
    try:
        parse_path(error.field)
    except ValueError:
        return None

    # Strategies read the untouched source, never an earlier fix
    current = copy.deepcopy(get_nested_value(source, error.field))
    return strategy(error.field, current, error)


def auto_fix_pds(document: Dict[str, Any],
                 validation_result: Union[ValidationResult, Dict[str, Any]]) -> AutoFixResult:
    """
    Apply every available repair to a copy of the document.

    Args:
        document: The PDS document that was validated (never modified)
        validation_result: Result of validate_pds() for that document, or its
            JSON form

    Returns:
        AutoFixResult with the corrected copy, the fixes in error order, the
        errors that could not be repaired and a one-line summary
    """
    source = document if isinstance(document, dict) else {}
    corrected = copy.deepcopy(source)
    fixes_applied: List[AppliedFix] = []
    unfixable_errors: List[ValidationError] = []

    for error in _coerce_errors(validation_result):
        fix = _attempt_fix(source, error)
        if fix is None:
            unfixable_errors.append(error)
            continue

        set_nested_value(corrected, error.field, copy.deepcopy(fix.corrected_value))
        fixes_applied.append(fix)

    return AutoFixResult(
        corrected_data=corrected,
        fixes_applied=fixes_applied,
        unfixable_errors=unfixable_errors,
        fix_summary=format_fix_summary(fixes_applied),
    )
