"""
Unit tests for the field rule primitives.
"""

from datetime import date

import pytest

from pds.rules import (
    ABBREVIATIONS, CIVIL_STATUS_SYNONYMS, EMAIL_DOMAIN_TYPOS,
    contains_abbreviation, email_domain_typo, format_form_date, is_blank,
    parse_form_date, validate_date_format, validate_email_format,
    validate_reference_name_format, validate_salary_grade_format
)


class TestDateFormat:
    @pytest.mark.parametrize('value', ['01/15/1990', '12/31/2023', '02/29/2024', '02/29/2020', '02/29/2000'])
    def test_valid_dates(self, value):
        assert validate_date_format(value) is True

    @pytest.mark.parametrize('value', [
        '1990-01-15',    # ISO layout
        '15/01/1990',    # day first
        '1/5/1990',      # not zero padded
        '13/01/2023',    # month out of range
        '02/30/2024',    # no such day
        '02/29/2023',    # not a leap year
        '02/29/2021',
        '02/29/1900',    # century, not a leap year
        '01/15/90',      # two-digit year
        ' 01/15/1990',   # surrounding whitespace
        'Present',
        '',
    ])
    def test_invalid_dates(self, value):
        assert validate_date_format(value) is False

    def test_non_string_is_invalid(self):
        assert validate_date_format(None) is False
        assert validate_date_format(19900115) is False

    def test_parse_and_format(self):
        assert parse_form_date('03/10/2015') == date(2015, 3, 10)
        assert parse_form_date('2015-03-10') is None
        assert format_form_date(date(2024, 1, 5)) == '01/05/2024'


class TestEmailFormat:
    def test_valid_email(self):
        assert validate_email_format('juan@example.com') is True
        assert validate_email_format('juan.dela-cruz+pds@agency.gov.ph') is True

    def test_invalid_email(self):
        assert validate_email_format('not-an-email') is False
        assert validate_email_format('juan@example') is False
        assert validate_email_format('juan @example.com') is False
        assert validate_email_format('') is False
        assert validate_email_format(None) is False

    def test_too_long_email(self):
        assert validate_email_format('a' * 250 + '@example.com') is False

    def test_domain_typo_lookup(self):
        assert email_domain_typo('user@gmail.co') == 'gmail.com'
        assert email_domain_typo('USER@GMIAL.COM') == 'gmail.com'
        assert email_domain_typo('user@gmail.com') is None
        assert email_domain_typo('no-at-sign') is None


class TestReferenceNameFormat:
    @pytest.mark.parametrize('value', [
        'JUAN, P., DELA CRUZ',
        'MARIA, S., REYES',
        'Jose, P, Rizal',
        'MARIA, A, SANTOS',
        'ANA MARIE, C., GARCIA',
    ])
    def test_valid_names(self, value):
        assert validate_reference_name_format(value) is True

    @pytest.mark.parametrize('value', [
        'Juan Dela Cruz',
        'DELA CRUZ, JUAN',
        'JUAN, PA., DELA CRUZ',
        'JUAN, P., DELA CRUZ, JR',
        ', P., DELA CRUZ',
        '',
    ])
    def test_invalid_names(self, value):
        assert validate_reference_name_format(value) is False

    def test_non_string_is_invalid(self):
        assert validate_reference_name_format(None) is False


class TestAbbreviationDetection:
    @pytest.mark.parametrize('value', [
        'DepEd',
        'CSC Regional Office',
        'Univ. of Santo Tomas',
        'ABC Corp.',
        'Manila Elem. School',
        'Civil Service Commission (CSC)',
        'Dept. of Health',
    ])
    def test_detects_abbreviations(self, value):
        assert contains_abbreviation(value) is True

    @pytest.mark.parametrize('value', [
        'Department of Education',
        "Saint Mary's Academy",
        'Government Service Insurance System',
        'University of the Philippines',
        'Information Technology Officer I',
        'Corporate Planning Office',
        'SET UP TRAINING CENTER',
        'UP AND COMING YOUTH ASSOCIATION',
        'Civil Service Commission-Department of Health Joint Training',
        '',
    ])
    def test_ignores_full_names(self, value):
        assert contains_abbreviation(value) is False

    def test_acronyms_match_whole_tokens_only(self):
        assert contains_abbreviation('DSCSC Training') is False
        assert contains_abbreviation('Cosmos Inc') is False

    def test_non_string(self):
        assert contains_abbreviation(None) is False


class TestSalaryGradeFormat:
    def test_valid(self):
        assert validate_salary_grade_format('24-2') is True
        assert validate_salary_grade_format('01-1') is True

    @pytest.mark.parametrize('value', ['24', '24 2', '2-1', '24-12', '24_2', '', None])
    def test_invalid(self, value):
        assert validate_salary_grade_format(value) is False


class TestHelpers:
    def test_is_blank(self):
        assert is_blank(None) is True
        assert is_blank('') is True
        assert is_blank('   ') is True
        assert is_blank('x') is False
        assert is_blank(0) is False
        assert is_blank([]) is False

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ABBREVIATIONS['XYZ'] = 'Something'
        with pytest.raises(TypeError):
            CIVIL_STATUS_SYNONYMS['hitched'] = 'Married'
        with pytest.raises(TypeError):
            EMAIL_DOMAIN_TYPOS['gmil.com'] = 'gmail.com'
