"""
Shared pytest fixtures.
"""

import pytest

from pds import create_app


def build_valid_pds():
    """A complete document that passes every rule."""
    address = {
        'houseBlockLotNumber': '123',
        'street': 'Main Street',
        'subdivisionVillage': 'San Lorenzo Village',
        'barangay': 'Barangay 1',
        'cityMunicipality': 'Manila',
        'province': 'Metro Manila',
        'zipCode': '1000',
    }
    return {
        'personalInformation': {
            'surname': 'DELA CRUZ',
            'firstName': 'JUAN',
            'middleName': 'SANTOS',
            'nameExtension': '',
            'dateOfBirth': '01/15/1990',
            'placeOfBirth': 'Manila',
            'civilStatus': 'Single',
            'civilStatusDetails': '',
            'height': '1.75',
            'weight': '70',
            'bloodType': 'O+',
            'gsisId': '1234567890',
            'pagibigId': '1234567890',
            'philhealthId': '12-345678901-2',
            'sssId': '12-3456789-0',
            'tinId': '123-456-789',
            'agencyEmployeeId': 'EMP001',
            'citizenship': 'Filipino',
            'residentialAddress': dict(address),
            'permanentAddress': dict(address),
            'telephoneNumber': '02-1234567',
            'mobileNumber': '09171234567',
            'emailAddress': 'juan@example.com',
        },
        'familyBackground': {
            'spouse': {
                'surname': '',
                'firstName': '',
                'middleName': '',
                'occupation': '',
                'employerBusinessName': '',
                'businessAddress': '',
            },
            'father': {'surname': 'DELA CRUZ', 'firstName': 'PEDRO', 'middleName': 'GARCIA'},
            'mother': {
                'maidenName': 'SANTOS',
                'surname': 'SANTOS',
                'firstName': 'MARIA',
                'middleName': 'REYES',
            },
            'children': [
                {'fullName': 'ANA DELA CRUZ', 'dateOfBirth': '03/10/2015'},
            ],
        },
        'educationalBackground': {
            'elementary': {
                'nameOfSchool': 'Manila Elementary School',
                'basicEducationDegreeCourse': 'ELEMENTARY',
                'periodOfAttendance': {'from': '1996', 'to': '2002'},
                'yearGraduated': '2002',
            },
            'secondary': {
                'nameOfSchool': 'Manila Science High School',
                'basicEducationDegreeCourse': 'HIGH SCHOOL',
                'periodOfAttendance': {'from': '2002', 'to': '2006'},
                'yearGraduated': '2006',
            },
            'vocational': {
                'nameOfSchool': '',
                'basicEducationDegreeCourse': '',
                'periodOfAttendance': {'from': '', 'to': ''},
            },
            'college': {
                'nameOfSchool': 'University of the Philippines',
                'basicEducationDegreeCourse': 'Bachelor of Science in Computer Science',
                'periodOfAttendance': {'from': '2006', 'to': '2010'},
                'yearGraduated': '2010',
                'scholarshipAcademicHonorsReceived': 'Cum Laude',
            },
            'graduateStudies': [],
        },
        'civilServiceEligibility': [
            {
                'careerService': 'Career Service Professional',
                'rating': '85.50',
                'dateOfExaminationConferment': '08/07/2011',
                'placeOfExaminationConferment': 'Manila',
                'licenseNumber': '',
                'licenseValidityDate': '',
            },
        ],
        'workExperience': [
            {
                'inclusiveDates': {'from': '06/01/2015', 'to': 'Present'},
                'positionTitle': 'Information Technology Officer I',
                'departmentAgencyOfficeCompany': 'Civil Service Commission',
                'monthlySalary': 38413,
                'salaryGrade': '19-1',
                'statusOfAppointment': 'Permanent',
                'governmentService': True,
            },
            {
                'inclusiveDates': {'from': '07/01/2010', 'to': '05/31/2015'},
                'positionTitle': 'Software Engineer',
                'departmentAgencyOfficeCompany': 'Acme Software Corporation',
                'monthlySalary': 30000,
                'salaryGrade': '',
                'statusOfAppointment': 'Contractual',
                'governmentService': False,
            },
        ],
        'voluntaryWork': [
            {
                'nameAndAddressOfOrganization': 'Philippine Red Cross, Manila',
                'inclusiveDates': {'from': '01/10/2012', 'to': '01/12/2012'},
                'numberOfHours': 24,
                'positionNatureOfWork': 'Volunteer',
            },
        ],
        'learningAndDevelopment': [
            {
                'title': 'Leadership Training',
                'inclusiveDates': {'from': '01/01/2023', 'to': '01/05/2023'},
                'numberOfHours': 40,
                'type': 'Managerial',
                'conductedSponsoredBy': 'Civil Service Commission',
            },
        ],
        'otherInformation': {
            'specialSkillsHobbies': ['Programming', 'Reading'],
            'nonAcademicDistinctionsRecognitions': ['N/A'],
            'membershipInAssociationOrganization': ['N/A'],
        },
        'questionsAnswers': {
            f'question{number}': {'answer': False, 'details': ''}
            for number in range(34, 41)
        },
        'references': [
            {'name': 'JOSE, M., RIZAL', 'address': '123 Main St, Manila',
             'telephoneNumber': '02-1234567'},
            {'name': 'ANDRES, B., BONIFACIO', 'address': '456 Second St, Quezon City',
             'telephoneNumber': '02-7654321'},
            {'name': 'APOLINARIO, M., MABINI', 'address': '789 Third St, Makati',
             'telephoneNumber': '02-9876543'},
        ],
        'signature': 'signature.png',
        'rightThumbMark': 'thumbmark.png',
        'governmentIdType': "Driver's License",
        'governmentIdNumber': 'N01-23-456789',
        'governmentIdIssuanceDate': '01/01/2023',
        'dateAccomplished': '01/01/2024',
        'personAdministering': {'name': '', 'position': '', 'dateOathTaken': ''},
        'passportSizePhoto': 'photo.jpg',
    }


@pytest.fixture
def valid_pds():
    return build_valid_pds()


@pytest.fixture
def app():
    return create_app({'TESTING': True, 'PDS_BATCH_LIMIT': 3})


@pytest.fixture
def client(app):
    return app.test_client()
