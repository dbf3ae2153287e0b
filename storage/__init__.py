"""
Storage module
Flat-file credentials, in-memory profiles and assessment reports
"""

from .credentials import CredentialStore
from .profiles import ProfileDirectory
from .assessments import (
    AssessmentLocator,
    DirectoryAssessmentLocator,
    locate_assessment,
    save_assessment,
)

__all__ = ['CredentialStore', 'ProfileDirectory', 'AssessmentLocator',
           'DirectoryAssessmentLocator', 'locate_assessment', 'save_assessment']
