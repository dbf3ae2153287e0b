"""
Enrollment data model
Student record types; payment types come from the pricing engine
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional, Tuple

from curriculum.catalog import ProgramChoice, Subject, semester_label
from pricing import engine
from pricing.engine import PaymentOutcome


@dataclass
class PersonalData:
    last_name: str
    first_name: str
    middle_name: str = ''
    extension_name: str = ''
    permanent_address: str = ''
    birthday: str = ''
    gender: str = ''
    phone_number: str = ''
    religion: str = ''


@dataclass
class GuardianData:
    father_name: str = ''
    father_occupation: str = ''
    father_contact: str = ''
    mother_name: str = ''
    mother_occupation: str = ''
    mother_contact: str = ''
    guardian_name: str = ''
    guardian_contact: str = ''


@dataclass
class SchoolAttended:
    school_name: str = ''
    school_address: str = ''
    inclusive_dates: str = ''
    degree_units: str = ''
    honors: str = ''


@dataclass
class EducationHistory:
    elementary: SchoolAttended = field(default_factory=SchoolAttended)
    junior_high: SchoolAttended = field(default_factory=SchoolAttended)
    senior_high: SchoolAttended = field(default_factory=SchoolAttended)


@dataclass
class AdmissionInfo:
    lrn: str = ''
    level: str = ''
    gwa_grade11_sem1: Decimal = Decimal('0')
    gwa_grade11_sem2: Decimal = Decimal('0')
    gwa_grade12_sem1: Decimal = Decimal('0')
    gwa_average: float = 0.0
    shs_track: str = ''
    campus: str = ''


@dataclass
class StudentRecord:
    """
    One finalized registration

    Units and tuition derive from the subject list. The payment outcome is
    applied exactly once.
    """
    personal: PersonalData
    guardian: GuardianData
    education: EducationHistory
    admission: AdmissionInfo
    program: ProgramChoice
    year_level: int
    semester: int
    subjects: Tuple[Subject, ...] = ()
    payment: Optional[PaymentOutcome] = None

    @property
    def total_units(self) -> int:
        return engine.total_units(self.subjects)

    @property
    def tuition(self) -> Decimal:
        return engine.compute_tuition(self.total_units)

    @property
    def is_enrolled(self) -> bool:
        return self.payment is not None and self.payment.is_enrolled

    @property
    def full_name(self) -> str:
        """Last, First Middle"""
        name = f"{self.personal.last_name}, {self.personal.first_name}"
        if self.personal.middle_name:
            name += f" {self.personal.middle_name}"
        return name

    @property
    def term_label(self) -> str:
        return f"Year {self.year_level} - {semester_label(self.semester)}"

    def apply_payment(self, outcome: PaymentOutcome):
        if self.payment is not None:
            raise RuntimeError("Payment has already been recorded for this student")
        self.payment = outcome
