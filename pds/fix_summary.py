"""
Plain-English digest of the fixes applied by the autofix engine.

Summaries are generated deterministically: fix types are listed in the order
they first occur in the fix list.
"""

from typing import Dict, List, Union

from pds.models import AppliedFix, FixType


FIX_TYPE_LABELS: Dict[str, str] = {
    FixType.DATE_FORMAT_CORRECTION.value: 'date format corrected',
    FixType.ABBREVIATION_EXPANSION.value: 'abbreviation expanded',
    FixType.NAME_FORMAT_CORRECTION.value: 'reference name reformatted',
    FixType.EMAIL_FORMAT_CORRECTION.value: 'email address corrected',
    FixType.CIVIL_STATUS_CORRECTION.value: 'civil status value standardized',
    FixType.SALARY_GRADE_FORMAT_CORRECTION.value: 'salary grade formatted',
    FixType.REQUIRED_FIELD_NA.value: 'required field set to N/A',
    FixType.EMPTY_FIELD_NA.value: 'empty list set to N/A',
}


def count_fixes_by_type(fixes: List[AppliedFix]) -> Dict[str, int]:
    """Tally fixes per fix type, keeping first-seen order."""
    counts: Dict[str, int] = {}
    for fix in fixes:
        counts[fix.fix_type] = counts.get(fix.fix_type, 0) + 1
    return counts


def get_fix_type_label(fix_type: Union[FixType, str]) -> str:
    """Human label for a fix type; unknown types fall back to their identifier."""
    key = fix_type.value if isinstance(fix_type, FixType) else str(fix_type)
    return FIX_TYPE_LABELS.get(key, key.replace('_', ' ').lower())


def format_fix_summary(fixes: List[AppliedFix]) -> str:
    """
    Render applied fixes as a single sentence.

    Example:
        'Applied 2 automatic fixes: 1 date format corrected,
        1 civil status value standardized'
    """
    if not fixes:
        return 'No automatic fixes applied'

    clauses = [
        f'{count} {get_fix_type_label(fix_type)}'
        for fix_type, count in count_fixes_by_type(fixes).items()
    ]
    return f'Applied {len(fixes)} automatic fixes: {", ".join(clauses)}'
