"""
Curriculum module
Static program tables and the subject lookup service
"""

from .catalog import (
    Subject,
    Program,
    Specialization,
    ProgramChoice,
    lookup_subjects,
    is_midyear_eligible,
    midyear_mismatches,
    semester_label,
)

__all__ = [
    'Subject', 'Program', 'Specialization', 'ProgramChoice',
    'lookup_subjects', 'is_midyear_eligible', 'midyear_mismatches',
    'semester_label',
]
