"""
Rule validation for Personal Data Sheet (CS Form 212) documents.

Validation Rules Documentation:
===============================

1. PERSONAL INFORMATION
   - Surname, first name: required
   - Date of birth: required, MM/DD/YYYY
   - Civil status: Single, Married, Widowed, Separated or Others
   - Civil status details: required when civil status is Others
   - Email: optional, valid format, no known provider typo

2. FAMILY BACKGROUND
   - Children's dates of birth: MM/DD/YYYY when given

3. EDUCATIONAL BACKGROUND
   - Name of school: full name, no abbreviations

4. CIVIL SERVICE ELIGIBILITY
   - Date of examination/conferment, license validity: MM/DD/YYYY when given

5. WORK EXPERIENCE
   - Inclusive dates: required MM/DD/YYYY, 'to' also accepts 'Present'
   - Position title, department/agency/office/company: no abbreviations
   - Monthly salary: zero or more
   - Salary grade: NN-N when given
   - Status of appointment: Permanent, Temporary, Casual or Contractual

6. VOLUNTARY WORK
   - Organization: no abbreviations
   - Inclusive dates: MM/DD/YYYY when given
   - Number of hours: more than zero when given

7. LEARNING AND DEVELOPMENT
   - Inclusive dates: required MM/DD/YYYY
   - Number of hours: more than zero
   - Type: Managerial, Supervisory, Technical or Foundation
   - Conducted/sponsored by: no abbreviations

8. OTHER INFORMATION
   - Skills, distinctions and memberships lists: write N/A rather than leave empty

9. QUESTIONS 34-40
   - A 'yes' answer requires details

10. REFERENCES
    - Name: FIRST NAME, M., SURNAME
    - Address, telephone number: required

11. CLOSING
    - Date accomplished, ID issuance date, oath date: MM/DD/YYYY when given

Cross-Field Rules:
==================
- Civil status Others requires civil status details
- Question answered 'yes' requires details
- Inclusive 'from' date after 'to' date is reported as a warning

Errors are appended in the order above so the error list is stable.
"""

from typing import Any, Dict, List, Optional

from pds.models import (
    ErrorCode, FieldValidationResult, ValidationError, ValidationResult
)
from pds.rules import (
    APPOINTMENT_STATUSES, CIVIL_STATUSES, CIVIL_STATUS_OTHERS,
    LEARNING_DEVELOPMENT_TYPES, PRESENT,
    contains_abbreviation, email_domain_typo, is_blank, parse_form_date,
    validate_date_format, validate_email_format,
    validate_reference_name_format, validate_salary_grade_format
)
from pds.utils import path_leaf


__all__ = [
    'ValidationError', 'ValidationResult', 'FieldValidationResult',
    'validate_pds', 'validate_field',
]


# Suggestion texts
DATE_SUGGESTION = 'Use MM/DD/YYYY format (e.g., 12/31/1990)'
ABBREVIATION_SUGGESTION = 'Use full names without abbreviations'
NAME_FORMAT_SUGGESTION = 'Use FIRST NAME, M.I., SURNAME format (e.g., JUAN, P., DELA CRUZ)'
SALARY_GRADE_SUGGESTION = 'Use 00-0 format (e.g., 24-2)'
NOT_APPLICABLE_SUGGESTION = 'Write N/A if not applicable'

EDUCATION_LEVELS = ['elementary', 'secondary', 'vocational', 'college', 'graduateStudies']
QUESTION_NUMBERS = range(34, 41)
OTHER_INFORMATION_LISTS = [
    'specialSkillsHobbies',
    'nonAcademicDistinctionsRecognitions',
    'membershipInAssociationOrganization',
]

# Single-field dispatch tables for validate_field()
REQUIRED_NAME_FIELDS = ('surname', 'firstName')
DATE_FIELDS = (
    'dateOfBirth', 'dateAccomplished', 'from', 'to',
    'dateOfExaminationConferment', 'licenseValidityDate',
    'governmentIdIssuanceDate', 'dateOathTaken',
)
ABBREVIATION_CHECKED_FIELDS = (
    'nameOfSchool', 'departmentAgencyOfficeCompany', 'conductedSponsoredBy',
    'positionTitle', 'nameAndAddressOfOrganization',
)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_number(value: Any) -> Optional[float]:
    """Coerce numbers and numeric strings; booleans are not numbers here."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.replace(',', '').strip())
        except ValueError:
            return None
    return None


def validate_required(value: Any, field_name: str, result: ValidationResult,
                      section: str = '', message: str = 'This field is required') -> bool:
    """Validate that a value is present and not blank."""
    if is_blank(value):
        result.add_error(field_name, message, ErrorCode.REQUIRED_FIELD, section)
        return False
    return True


def validate_date(value: Any, field_name: str, result: ValidationResult,
                  required: bool = False, allow_present: bool = False,
                  section: str = '') -> bool:
    """Validate a MM/DD/YYYY date field."""
    if is_blank(value):
        if required:
            result.add_error(field_name, 'Date is required', ErrorCode.REQUIRED_FIELD, section,
                             suggestion=DATE_SUGGESTION)
        return False

    if allow_present and value == PRESENT:
        return True

    if not validate_date_format(value):
        message = 'Date must be in MM/DD/YYYY format'
        if allow_present:
            message = "Date must be in MM/DD/YYYY format or 'Present'"
        result.add_error(field_name, message, ErrorCode.INVALID_DATE_FORMAT, section,
                         suggestion=DATE_SUGGESTION)
        return False

    return True


def validate_no_abbreviation(value: Any, field_name: str, result: ValidationResult,
                             section: str = '') -> bool:
    """Validate that a name is written out in full."""
    if is_blank(value):
        return True

    if contains_abbreviation(value):
        result.add_error(field_name, 'Abbreviations are not allowed; write the full name',
                         ErrorCode.ABBREVIATION_NOT_ALLOWED, section,
                         suggestion=ABBREVIATION_SUGGESTION)
        return False

    return True


def validate_email(value: Any, field_name: str, result: ValidationResult,
                   section: str = '') -> bool:
    """Validate an optional email address."""
    if is_blank(value):
        return True

    if not validate_email_format(value):
        result.add_error(field_name, 'Please enter a valid email address',
                         ErrorCode.INVALID_EMAIL_FORMAT, section,
                         suggestion='Use the format name@domain.com')
        return False

    intended = email_domain_typo(value)
    if intended:
        local = value.strip().rsplit('@', 1)[0].lower()
        result.add_error(field_name, 'Email domain looks mistyped',
                         ErrorCode.INVALID_EMAIL_FORMAT, section,
                         suggestion=f'Did you mean {local}@{intended}?')
        return False

    return True


def validate_civil_status(value: Any, field_name: str, result: ValidationResult,
                          section: str = '') -> bool:
    """Validate civil status against the form's fixed choices."""
    if is_blank(value):
        result.add_error(field_name, 'Civil status is required', ErrorCode.REQUIRED_FIELD, section)
        return False

    if value not in CIVIL_STATUSES:
        result.add_error(field_name, 'Invalid civil status', ErrorCode.INVALID_CIVIL_STATUS, section,
                         suggestion=f'Must be one of: {", ".join(CIVIL_STATUSES)}')
        return False

    return True


def validate_enum(value: Any, field_name: str, allowed, code: ErrorCode,
                  result: ValidationResult, section: str = '') -> bool:
    """Validate a required value against a fixed list of choices."""
    if is_blank(value):
        result.add_error(field_name, 'This field is required', ErrorCode.REQUIRED_FIELD, section)
        return False

    if value not in allowed:
        result.add_error(field_name, f'Must be one of: {", ".join(allowed)}', code, section,
                         suggestion=f'Must be one of: {", ".join(allowed)}')
        return False

    return True


def validate_salary_grade(value: Any, field_name: str, result: ValidationResult,
                          section: str = '') -> bool:
    """Validate an optional salary grade (NN-N)."""
    if is_blank(value):
        return True

    if not validate_salary_grade_format(value):
        result.add_error(field_name, 'Salary grade must be in 00-0 format',
                         ErrorCode.INVALID_SALARY_GRADE_FORMAT, section,
                         suggestion=SALARY_GRADE_SUGGESTION)
        return False

    return True


def validate_monthly_salary(value: Any, field_name: str, result: ValidationResult,
                            section: str = '') -> bool:
    """Validate an optional monthly salary figure (zero or more)."""
    if value is None or value == '':
        return True

    amount = _as_number(value)
    if amount is None:
        result.add_error(field_name, 'Monthly salary must be a number', ErrorCode.INVALID_SALARY, section)
        return False
    if amount < 0:
        result.add_error(field_name, 'Monthly salary cannot be negative', ErrorCode.INVALID_SALARY, section)
        return False

    return True


def validate_hours(value: Any, field_name: str, result: ValidationResult,
                   required: bool = True, section: str = '') -> bool:
    """Validate a number of hours (more than zero)."""
    if value is None or value == '':
        if required:
            result.add_error(field_name, 'Number of hours is required', ErrorCode.INVALID_HOURS, section)
        return False

    hours = _as_number(value)
    if hours is None or hours <= 0:
        result.add_error(field_name, 'Number of hours must be greater than zero',
                         ErrorCode.INVALID_HOURS, section)
        return False

    return True


def validate_reference_name(value: Any, field_name: str, result: ValidationResult,
                            section: str = '') -> bool:
    """Validate the FIRST NAME, M., SURNAME layout of a reference's name."""
    if not validate_reference_name_format(value):
        result.add_error(field_name, 'Name must be in FIRST NAME, M.I., SURNAME format',
                         ErrorCode.INVALID_NAME_FORMAT, section,
                         suggestion=NAME_FORMAT_SUGGESTION)
        return False
    return True


def _validate_inclusive_dates(entry: Dict[str, Any], prefix: str, result: ValidationResult,
                              required: bool, allow_present: bool, section: str):
    dates = _as_dict(entry.get('inclusiveDates'))
    date_from = dates.get('from')
    date_to = dates.get('to')

    from_ok = validate_date(date_from, f'{prefix}.inclusiveDates.from', result,
                            required=required, section=section)
    to_ok = validate_date(date_to, f'{prefix}.inclusiveDates.to', result,
                          required=required, allow_present=allow_present, section=section)

    if from_ok and to_ok and date_to != PRESENT:
        if parse_form_date(date_from) > parse_form_date(date_to):
            result.add_warning(f'{prefix}.inclusiveDates.to',
                               "The 'to' date is earlier than the 'from' date",
                               ErrorCode.INVALID_DATE_RANGE, section)


def validate_pds(document: Dict[str, Any]) -> ValidationResult:
    """
    Main validation entry point. Validates the entire document.

    Args:
        document: The PDS document as a nested dict

    Returns:
        ValidationResult with errors and warnings in traversal order
    """
    result = ValidationResult()
    document = _as_dict(document)

    _validate_personal_information(document, result)
    _validate_family_background(document, result)
    _validate_educational_background(document, result)
    _validate_civil_service_eligibility(document, result)
    _validate_work_experience(document, result)
    _validate_voluntary_work(document, result)
    _validate_learning_and_development(document, result)
    _validate_other_information(document, result)
    _validate_questions(document, result)
    _validate_references(document, result)
    _validate_closing(document, result)

    return result


def _validate_personal_information(document: Dict[str, Any], result: ValidationResult):
    """Validate Section I: Personal information."""
    section = 'personalInformation'
    info = _as_dict(document.get('personalInformation'))

    validate_required(info.get('surname'), 'personalInformation.surname', result, section,
                      message='Surname is required')
    validate_required(info.get('firstName'), 'personalInformation.firstName', result, section,
                      message='First name is required')
    validate_date(info.get('dateOfBirth'), 'personalInformation.dateOfBirth', result,
                  required=True, section=section)

    civil_status = info.get('civilStatus')
    validate_civil_status(civil_status, 'personalInformation.civilStatus', result, section)
    if civil_status == CIVIL_STATUS_OTHERS and is_blank(info.get('civilStatusDetails')):
        result.add_error('personalInformation.civilStatusDetails',
                         "Please specify civil status when 'Others' is selected",
                         ErrorCode.REQUIRED_DETAILS, section)

    validate_email(info.get('emailAddress'), 'personalInformation.emailAddress', result, section)


def _validate_family_background(document: Dict[str, Any], result: ValidationResult):
    """Validate Section II: Family background."""
    section = 'familyBackground'
    family = _as_dict(document.get('familyBackground'))

    for i, child in enumerate(_as_list(family.get('children'))):
        child = _as_dict(child)
        validate_date(child.get('dateOfBirth'), f'familyBackground.children[{i}].dateOfBirth',
                      result, section=section)


def _validate_educational_background(document: Dict[str, Any], result: ValidationResult):
    """Validate Section III: Educational background."""
    section = 'educationalBackground'
    education = _as_dict(document.get('educationalBackground'))

    for level in EDUCATION_LEVELS:
        value = education.get(level)
        if value is None and level == 'graduateStudies':
            level = 'graduate'
            value = education.get(level)

        if isinstance(value, list):
            for i, entry in enumerate(value):
                entry = _as_dict(entry)
                validate_no_abbreviation(entry.get('nameOfSchool'),
                                         f'educationalBackground.{level}[{i}].nameOfSchool',
                                         result, section)
        elif isinstance(value, dict):
            validate_no_abbreviation(value.get('nameOfSchool'),
                                     f'educationalBackground.{level}.nameOfSchool',
                                     result, section)


def _validate_civil_service_eligibility(document: Dict[str, Any], result: ValidationResult):
    """Validate Section IV: Civil service eligibility."""
    section = 'civilServiceEligibility'

    for i, entry in enumerate(_as_list(document.get('civilServiceEligibility'))):
        prefix = f'civilServiceEligibility[{i}]'
        entry = _as_dict(entry)
        validate_date(entry.get('dateOfExaminationConferment'),
                      f'{prefix}.dateOfExaminationConferment', result, section=section)
        validate_date(entry.get('licenseValidityDate'),
                      f'{prefix}.licenseValidityDate', result, section=section)


def _validate_work_experience(document: Dict[str, Any], result: ValidationResult):
    """Validate Section V: Work experience."""
    section = 'workExperience'

    for i, entry in enumerate(_as_list(document.get('workExperience'))):
        prefix = f'workExperience[{i}]'
        entry = _as_dict(entry)

        _validate_inclusive_dates(entry, prefix, result, required=True,
                                  allow_present=True, section=section)
        validate_no_abbreviation(entry.get('positionTitle'), f'{prefix}.positionTitle',
                                 result, section)
        validate_no_abbreviation(entry.get('departmentAgencyOfficeCompany'),
                                 f'{prefix}.departmentAgencyOfficeCompany', result, section)
        validate_monthly_salary(entry.get('monthlySalary'), f'{prefix}.monthlySalary',
                                result, section)
        validate_salary_grade(entry.get('salaryGrade'), f'{prefix}.salaryGrade', result, section)
        validate_enum(entry.get('statusOfAppointment'), f'{prefix}.statusOfAppointment',
                      APPOINTMENT_STATUSES, ErrorCode.INVALID_APPOINTMENT_STATUS,
                      result, section)


def _validate_voluntary_work(document: Dict[str, Any], result: ValidationResult):
    """Validate Section VI: Voluntary work."""
    section = 'voluntaryWork'

    for i, entry in enumerate(_as_list(document.get('voluntaryWork'))):
        prefix = f'voluntaryWork[{i}]'
        entry = _as_dict(entry)

        validate_no_abbreviation(entry.get('nameAndAddressOfOrganization'),
                                 f'{prefix}.nameAndAddressOfOrganization', result, section)
        _validate_inclusive_dates(entry, prefix, result, required=False,
                                  allow_present=False, section=section)
        validate_hours(entry.get('numberOfHours'), f'{prefix}.numberOfHours', result,
                       required=False, section=section)


def _validate_learning_and_development(document: Dict[str, Any], result: ValidationResult):
    """Validate Section VII: Learning and development interventions."""
    section = 'learningAndDevelopment'

    for i, entry in enumerate(_as_list(document.get('learningAndDevelopment'))):
        prefix = f'learningAndDevelopment[{i}]'
        entry = _as_dict(entry)

        _validate_inclusive_dates(entry, prefix, result, required=True,
                                  allow_present=False, section=section)
        validate_hours(entry.get('numberOfHours'), f'{prefix}.numberOfHours', result,
                       section=section)
        validate_enum(entry.get('type'), f'{prefix}.type', LEARNING_DEVELOPMENT_TYPES,
                      ErrorCode.INVALID_LD_TYPE, result, section)
        validate_no_abbreviation(entry.get('conductedSponsoredBy'),
                                 f'{prefix}.conductedSponsoredBy', result, section)


def _validate_other_information(document: Dict[str, Any], result: ValidationResult):
    """Validate Section VIII: Other information."""
    section = 'otherInformation'
    other = _as_dict(document.get('otherInformation'))

    for key in OTHER_INFORMATION_LISTS:
        value = other.get(key)
        if isinstance(value, list) and len(value) == 0:
            result.add_error(f'otherInformation.{key}', 'This list cannot be left empty',
                             ErrorCode.EMPTY_FIELD, section,
                             suggestion=NOT_APPLICABLE_SUGGESTION)


def _validate_questions(document: Dict[str, Any], result: ValidationResult):
    """Validate questions 34 to 40: a 'yes' answer needs details."""
    section = 'questionsAnswers'
    answers = _as_dict(document.get('questionsAnswers'))

    for number in QUESTION_NUMBERS:
        key = f'question{number}'
        question = _as_dict(answers.get(key))
        if question.get('answer') is True and is_blank(question.get('details')):
            result.add_error(f'questionsAnswers.{key}.details',
                             f'Details are required when answering yes to question {number}',
                             ErrorCode.REQUIRED_DETAILS, section)


def _validate_references(document: Dict[str, Any], result: ValidationResult):
    """Validate Section IX: Character references."""
    section = 'references'

    for i, entry in enumerate(_as_list(document.get('references'))):
        prefix = f'references[{i}]'
        entry = _as_dict(entry)

        validate_reference_name(entry.get('name'), f'{prefix}.name', result, section)
        validate_required(entry.get('address'), f'{prefix}.address', result, section,
                          message='Address is required')
        validate_required(entry.get('telephoneNumber'), f'{prefix}.telephoneNumber', result,
                          section, message='Telephone number is required')


def _validate_closing(document: Dict[str, Any], result: ValidationResult):
    """Validate the declaration, government ID and oath fields."""
    section = 'declaration'

    validate_date(document.get('dateAccomplished'), 'dateAccomplished', result, section=section)
    validate_date(document.get('governmentIdIssuanceDate'), 'governmentIdIssuanceDate',
                  result, section=section)

    administering = _as_dict(document.get('personAdministering'))
    validate_date(administering.get('dateOathTaken'), 'personAdministering.dateOathTaken',
                  result, section=section)


def validate_field(field_path: str, value: Any) -> FieldValidationResult:
    """
    Validate a single value as it is entered, keyed by its document path.

    Args:
        field_path: Dotted path such as 'personalInformation.dateOfBirth'
        value: The value entered for that field

    Returns:
        FieldValidationResult with errors and suggestion texts
    """
    result = ValidationResult()
    leaf = path_leaf(field_path)
    path = field_path if isinstance(field_path, str) else ''

    if leaf in REQUIRED_NAME_FIELDS and not path.startswith('familyBackground'):
        validate_required(value, path, result)
    elif leaf in DATE_FIELDS:
        allow_present = leaf == 'to' and path.startswith('workExperience')
        validate_date(value, path, result, required=(leaf == 'dateOfBirth'),
                      allow_present=allow_present)
    elif leaf == 'emailAddress':
        validate_email(value, path, result)
    elif leaf == 'civilStatus':
        validate_civil_status(value, path, result)
    elif leaf in ABBREVIATION_CHECKED_FIELDS:
        validate_no_abbreviation(value, path, result)
    elif leaf == 'salaryGrade':
        validate_salary_grade(value, path, result)
    elif leaf == 'monthlySalary':
        validate_monthly_salary(value, path, result)
    elif leaf == 'statusOfAppointment':
        validate_enum(value, path, APPOINTMENT_STATUSES,
                      ErrorCode.INVALID_APPOINTMENT_STATUS, result)
    elif leaf == 'numberOfHours':
        validate_hours(value, path, result, required=path.startswith('learningAndDevelopment'))
    elif leaf == 'type' and path.startswith('learningAndDevelopment'):
        validate_enum(value, path, LEARNING_DEVELOPMENT_TYPES, ErrorCode.INVALID_LD_TYPE, result)
    elif leaf == 'name' and path.startswith('references'):
        validate_reference_name(value, path, result)
    elif leaf in ('address', 'telephoneNumber') and path.startswith('references'):
        validate_required(value, path, result)

    suggestions = []
    for error in result.errors:
        if error.suggestion and error.suggestion not in suggestions:
            suggestions.append(error.suggestion)

    return FieldValidationResult(
        is_valid=result.is_valid,
        errors=result.errors,
        suggestions=suggestions,
    )
