"""
Result models for the PDS validation and autofix engines.

Findings are plain dataclasses; nothing here is persisted. The to_dict()
helpers produce the camelCase JSON bodies returned by the HTTP layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ErrorCode(str, Enum):
    """Stable identifiers for the rule that produced a finding."""
    REQUIRED_FIELD = 'REQUIRED_FIELD'
    REQUIRED_DETAILS = 'REQUIRED_DETAILS'
    EMPTY_FIELD = 'EMPTY_FIELD'
    INVALID_DATE_FORMAT = 'INVALID_DATE_FORMAT'
    ABBREVIATION_NOT_ALLOWED = 'ABBREVIATION_NOT_ALLOWED'
    INVALID_NAME_FORMAT = 'INVALID_NAME_FORMAT'
    INVALID_EMAIL_FORMAT = 'INVALID_EMAIL_FORMAT'
    INVALID_CIVIL_STATUS = 'INVALID_CIVIL_STATUS'
    INVALID_SALARY_GRADE_FORMAT = 'INVALID_SALARY_GRADE_FORMAT'
    INVALID_SALARY = 'INVALID_SALARY'
    INVALID_APPOINTMENT_STATUS = 'INVALID_APPOINTMENT_STATUS'
    INVALID_HOURS = 'INVALID_HOURS'
    INVALID_LD_TYPE = 'INVALID_LD_TYPE'
    INVALID_DATE_RANGE = 'INVALID_DATE_RANGE'


class FixType(str, Enum):
    """Stable identifiers for the repair strategy behind an applied fix."""
    DATE_FORMAT_CORRECTION = 'DATE_FORMAT_CORRECTION'
    ABBREVIATION_EXPANSION = 'ABBREVIATION_EXPANSION'
    NAME_FORMAT_CORRECTION = 'NAME_FORMAT_CORRECTION'
    EMAIL_FORMAT_CORRECTION = 'EMAIL_FORMAT_CORRECTION'
    CIVIL_STATUS_CORRECTION = 'CIVIL_STATUS_CORRECTION'
    SALARY_GRADE_FORMAT_CORRECTION = 'SALARY_GRADE_FORMAT_CORRECTION'
    REQUIRED_FIELD_NA = 'REQUIRED_FIELD_NA'
    EMPTY_FIELD_NA = 'EMPTY_FIELD_NA'


class Severity(str, Enum):
    ERROR = 'error'
    WARNING = 'warning'


def _enum_value(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class ValidationError:
    """A single finding with the dotted path of the offending value."""
    field: str
    message: str
    code: str
    severity: str = Severity.ERROR.value
    suggestion: Optional[str] = None
    section: str = ''  # For grouping errors by form section

    def __post_init__(self):
        self.code = _enum_value(self.code)
        self.severity = _enum_value(self.severity)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'field': self.field,
            'message': self.message,
            'code': self.code,
            'severity': self.severity,
        }
        if self.suggestion:
            data['suggestion'] = self.suggestion
        if self.section:
            data['section'] = self.section
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidationError':
        return cls(
            field=str(data.get('field', '')),
            message=str(data.get('message', '')),
            code=str(data.get('code', '')),
            severity=str(data.get('severity') or Severity.ERROR.value),
            suggestion=data.get('suggestion'),
            section=str(data.get('section') or ''),
        )


@dataclass
class ValidationResult:
    """Container for validation results."""
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationError] = field(default_factory=list)  # Non-blocking issues
    corrected_data: Optional[Dict[str, Any]] = None

    @property
    def is_valid(self) -> bool:
        """Warnings never affect validity."""
        return len(self.errors) == 0

    def add_error(self, field: str, message: str, code: Union[ErrorCode, str],
                  section: str = '', suggestion: Optional[str] = None):
        """Add a blocking validation error."""
        self.errors.append(ValidationError(
            field, message, code, Severity.ERROR, suggestion, section
        ))

    def add_warning(self, field: str, message: str, code: Union[ErrorCode, str],
                    section: str = '', suggestion: Optional[str] = None):
        """Add a non-blocking warning."""
        self.warnings.append(ValidationError(
            field, message, code, Severity.WARNING, suggestion, section
        ))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        data = {
            'isValid': self.is_valid,
            'errors': [e.to_dict() for e in self.errors],
            'warnings': [w.to_dict() for w in self.warnings],
        }
        if self.corrected_data is not None:
            data['correctedData'] = self.corrected_data
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValidationResult':
        """Rebuild a result posted back by a client."""
        errors = [
            ValidationError.from_dict(e) for e in (data.get('errors') or [])
            if isinstance(e, dict)
        ]
        warnings = [
            ValidationError.from_dict(w) for w in (data.get('warnings') or [])
            if isinstance(w, dict)
        ]
        return cls(errors=errors, warnings=warnings,
                   corrected_data=data.get('correctedData'))

    def get_errors_by_section(self) -> Dict[str, List[ValidationError]]:
        """Group errors by section for UI display."""
        by_section = {}
        for error in self.errors:
            section = error.section or 'general'
            if section not in by_section:
                by_section[section] = []
            by_section[section].append(error)
        return by_section


@dataclass
class FieldValidationResult:
    """Outcome of checking one value, as used by on-blur form checks."""
    is_valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'isValid': self.is_valid,
            'errors': [e.to_dict() for e in self.errors],
            'suggestions': list(self.suggestions),
        }


@dataclass
class AppliedFix:
    """One correction written into the corrected document."""
    field: str
    original_value: Any
    corrected_value: Any
    fix_type: str
    description: str = ''

    def __post_init__(self):
        self.fix_type = _enum_value(self.fix_type)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.field,
            'originalValue': self.original_value,
            'correctedValue': self.corrected_value,
            'fixType': self.fix_type,
            'description': self.description,
        }


@dataclass
class AutoFixResult:
    """Corrected document plus what was and was not repaired."""
    corrected_data: Dict[str, Any] = field(default_factory=dict)
    fixes_applied: List[AppliedFix] = field(default_factory=list)
    unfixable_errors: List[ValidationError] = field(default_factory=list)
    fix_summary: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'correctedData': self.corrected_data,
            'fixesApplied': [f.to_dict() for f in self.fixes_applied],
            'unfixableErrors': [e.to_dict() for e in self.unfixable_errors],
            'fixSummary': self.fix_summary,
        }
