"""
Student registration module
Student record types; the CLI session lives in registration.enroll
"""

from .models import StudentRecord, PersonalData, GuardianData, AdmissionInfo

__all__ = ['StudentRecord', 'PersonalData', 'GuardianData', 'AdmissionInfo']
