"""
Student Registration/Enrollment Module
CLI-based registration session for new students
Collects applicant data, resolves subjects and payment, creates the account
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

import config
from curriculum.catalog import (
    CAMPUSES,
    MIDYEAR,
    SHS_TRACKS,
    SPECIALIZATIONS,
    Program,
    ProgramChoice,
    is_midyear_eligible,
    semester_label,
    subjects_for,
)
from errors import StorageError
from pricing import engine
from pricing.engine import PaymentMethod, PaymentOutcome
from registration.models import (
    AdmissionInfo,
    EducationHistory,
    GuardianData,
    PersonalData,
    SchoolAttended,
    StudentRecord,
)
from storage.assessments import assessment_filename, save_assessment
from utils.error_log import get_logger
from validation.prompts import Prompter
from validation.validators import format_money


class Stage(Enum):
    PERSONAL_DATA = 1
    GUARDIAN_DATA = 2
    EDUCATION_HISTORY = 3
    ADMISSION_INFO = 4
    PROGRAM_SELECTION = 5
    TERM_SELECTION = 6
    SUBJECT_RESOLUTION = 7
    TUITION_COMPUTATION = 8
    PAYMENT_SELECTION = 9
    PAYMENT_COMPUTATION = 10
    CREDENTIAL_CREATION = 11
    PERSISTENCE = 12
    COMPLETED = 13
    COMPLETED_WITH_WARNING = 14


TERMINAL_STAGES = (Stage.COMPLETED, Stage.COMPLETED_WITH_WARNING)


@dataclass
class RegistrationResult:
    status: Stage
    email: str
    record: StudentRecord
    assessment_path: Optional[Path] = None
    warnings: List[str] = field(default_factory=list)


def print_header(writer, title: str):
    writer("")
    writer("=" * 51)
    writer(f"   {title}")
    writer("=" * 51)


def print_subject_table(writer, subjects, width: int = 80):
    writer(f"{'Code':<8} {'Subject':<60} Units")
    writer("-" * width)
    for subject in subjects:
        writer(f"{subject.code:<8} {subject.name:<60} {subject.units:>2}")
    writer("-" * width)


class EnrollmentSession:
    """
    One registration, run as strictly ordered stages

    Nothing is persisted before the PERSISTENCE stage, so abandoning the
    session earlier leaves no trace. Once credentials are accepted the
    session always completes; storage failures downgrade it to
    COMPLETED_WITH_WARNING with the record kept in memory.
    """

    def __init__(self, prompter: Prompter, credentials, profiles,
                 assessment_dir: Path = config.DATA_DIR):
        self.prompter = prompter
        self.credentials = credentials
        self.profiles = profiles
        self.assessment_dir = Path(assessment_dir)
        self.logger = get_logger('EnrollmentSession')

        self.stage = Stage.PERSONAL_DATA

        # Stage outputs
        self.personal: Optional[PersonalData] = None
        self.guardian: Optional[GuardianData] = None
        self.education: Optional[EducationHistory] = None
        self.admission: Optional[AdmissionInfo] = None
        self.program: Optional[ProgramChoice] = None
        self.year_level: Optional[int] = None
        self.semester: Optional[int] = None
        self.record: Optional[StudentRecord] = None
        self.payment_method: Optional[PaymentMethod] = None
        self.email: Optional[str] = None
        self.password: Optional[str] = None

    @property
    def say(self):
        return self.prompter.writer

    def _advance(self, stage: Stage):
        if stage.value <= self.stage.value:
            raise RuntimeError(f"Cannot move from {self.stage.name} back to {stage.name}")
        self.stage = stage

    def run(self) -> RegistrationResult:
        """Run every stage in order and return the finished registration"""
        if self.stage != Stage.PERSONAL_DATA:
            raise RuntimeError("Enrollment session has already been run")

        print_header(self.say, "START REGISTRATION")

        steps = [
            (Stage.GUARDIAN_DATA, self.collect_personal_data),
            (Stage.EDUCATION_HISTORY, self.collect_guardian_data),
            (Stage.ADMISSION_INFO, self.collect_education_history),
            (Stage.PROGRAM_SELECTION, self.collect_admission_info),
            (Stage.TERM_SELECTION, self.select_program),
            (Stage.SUBJECT_RESOLUTION, self.select_term),
            (Stage.TUITION_COMPUTATION, self.resolve_subjects),
            (Stage.PAYMENT_SELECTION, self.show_tuition),
            (Stage.PAYMENT_COMPUTATION, self.select_payment_method),
            (Stage.CREDENTIAL_CREATION, self.compute_payment),
            (Stage.PERSISTENCE, self.create_credentials),
        ]
        for next_stage, step in steps:
            step()
            self._advance(next_stage)

        return self.persist()

    # ===========================
    # DATA COLLECTION STAGES
    # ===========================

    def collect_personal_data(self):
        p = self.prompter
        self.say("[PERSONAL DATA]")
        self.personal = PersonalData(
            last_name=p.alpha("Last name: "),
            first_name=p.alpha("First name: "),
            middle_name=p.alpha_optional("Middle name (optional): "),
            extension_name=p.alpha_optional("Extension (Jr./III) (optional): "),
            permanent_address=p.required_text("Permanent address: "),
            birthday=p.required_text("Birthday (YYYY-MM-DD): "),
            gender=p.alpha("Gender (e.g., Male/Female/Other): "),
            phone_number=p.phone_optional("Phone number (optional): "),
            religion=p.alpha_optional("Religion (optional): "),
        )

    def collect_guardian_data(self):
        p = self.prompter
        self.say("\n[PARENTS / GUARDIAN]")
        self.guardian = GuardianData(
            father_name=p.alpha("Father's full name: "),
            father_occupation=p.optional_text("Father's occupation (optional): "),
            father_contact=p.phone_optional("Father's contact (optional): "),
            mother_name=p.alpha("Mother's full name: "),
            mother_occupation=p.optional_text("Mother's occupation (optional): "),
            mother_contact=p.phone_optional("Mother's contact (optional): "),
            guardian_name=p.alpha_optional("Guardian (if any): "),
            guardian_contact=p.phone_optional("Guardian contact (if any): "),
        )

    def _collect_school(self, level: str) -> SchoolAttended:
        p = self.prompter
        self.say(f"\n[EDUCATIONAL BACKGROUND - {level}]")
        return SchoolAttended(
            school_name=p.required_text("School name: "),
            school_address=p.required_text("School address: "),
            inclusive_dates=p.optional_text("Inclusive Dates of Attendance: "),
            degree_units=p.optional_text("Degree/Units: "),
            honors=p.optional_text("Honors Received: "),
        )

    def collect_education_history(self):
        self.education = EducationHistory(
            elementary=self._collect_school("ELEMENTARY"),
            junior_high=self._collect_school("JUNIOR HIGH"),
            senior_high=self._collect_school("SENIOR HIGH"),
        )

    def collect_admission_info(self):
        p = self.prompter
        self.say("\n[ADMISSION INFORMATION]")
        lrn = p.digits_optional("Learner Reference Number (LRN) (optional) - digits only: ")
        level = p.optional_text("Admission level (e.g., Undergraduate): ")

        gwa = [
            p.decimal_in_range("GWA Grade 11 1st sem (0 if N/A): ", config.GWA_MIN, config.GWA_MAX),
            p.decimal_in_range("GWA Grade 11 2nd sem (0 if N/A): ", config.GWA_MIN, config.GWA_MAX),
            p.decimal_in_range("GWA Grade 12 1st sem (0 if N/A): ", config.GWA_MIN, config.GWA_MAX),
        ]
        average = engine.gwa_average(gwa)
        self.say(f"Computed GWA average: {average:.2f}")

        track = SHS_TRACKS[p.choose("Choose SHS Track", SHS_TRACKS)]
        campus = CAMPUSES[p.choose("Choose ISU Campus", CAMPUSES)]

        self.admission = AdmissionInfo(
            lrn=lrn,
            level=level,
            gwa_grade11_sem1=gwa[0],
            gwa_grade11_sem2=gwa[1],
            gwa_grade12_sem1=gwa[2],
            gwa_average=average,
            shs_track=track,
            campus=campus,
        )

    # ===========================
    # PROGRAM & TERM STAGES
    # ===========================

    def select_program(self):
        p = self.prompter
        self.say("\n[PROGRAM SELECTION]")
        programs = list(Program)
        program = programs[p.choose("Choose program", [prog.display_name for prog in programs])]

        specialization = None
        options = SPECIALIZATIONS.get(program)
        if options:
            self.say(f"{program.name} Specializations:")
            specialization = options[p.choose("Choose specialization",
                                              [opt.display_name for opt in options])]
            self.say(f"Selected specialization: {specialization.display_name}")

        self.program = ProgramChoice(program, specialization)

    def select_term(self):
        p = self.prompter
        self.say("\n[ENROLLMENT - Year & Term]")
        self.year_level = p.int_in_range(
            f"Choose year level ({config.MIN_YEAR_LEVEL}-{config.MAX_YEAR_LEVEL}): ",
            config.MIN_YEAR_LEVEL, config.MAX_YEAR_LEVEL
        )

        midyear = is_midyear_eligible(self.program.program, self.program.specialization)
        max_semester = MIDYEAR if midyear else 2

        self.say("Semester options:")
        for semester in range(1, max_semester + 1):
            self.say(f"{semester}) {semester_label(semester)}")
        self.semester = p.int_in_range(f"Choose semester (1-{max_semester}): ", 1, max_semester)

    def resolve_subjects(self):
        subjects = subjects_for(self.program, self.year_level, self.semester)
        if not subjects:
            self.logger.warning("No subjects defined for %s, %s",
                                self.program.display_name,
                                f"Year {self.year_level} - {semester_label(self.semester)}")

        self.record = StudentRecord(
            personal=self.personal,
            guardian=self.guardian,
            education=self.education,
            admission=self.admission,
            program=self.program,
            year_level=self.year_level,
            semester=self.semester,
            subjects=subjects,
        )

    def show_tuition(self):
        record = self.record
        self.say("\n--- SUBJECTS & UNITS SUMMARY ---")
        print_subject_table(self.say, record.subjects)
        self.say(f"Total Units: {record.total_units}")
        self.say(f"Tuition ({config.CURRENCY} {config.UNIT_RATE:.2f} per unit): "
                 f"{config.CURRENCY} {format_money(record.tuition)}")

    # ===========================
    # PAYMENT STAGES
    # ===========================

    def select_payment_method(self):
        self.say("\n[PAYMENT]")
        options = [
            PaymentMethod.CASH.value,
            f"{PaymentMethod.INSTALLMENT.value} (adds {config.CURRENCY} "
            f"{int(config.INSTALLMENT_FEE)} fee)",
        ]
        methods = [PaymentMethod.CASH, PaymentMethod.INSTALLMENT]
        self.payment_method = methods[self.prompter.choose("Choose payment method", options)]

    def compute_payment(self):
        p = self.prompter
        tuition = self.record.tuition

        if self.payment_method == PaymentMethod.CASH:
            amount = p.decimal_min(f"Enter payment amount ({config.CURRENCY}): ", engine.ZERO)
            months = 0
        else:
            total_due = tuition + config.INSTALLMENT_FEE
            minimum = engine.minimum_down_payment(total_due)
            self.say(f"Total due (tuition + fee): {config.CURRENCY} {format_money(total_due)}")
            self.say(f"Minimum down ({config.MIN_DOWN_PERCENT * 100:.0f}%): "
                     f"{config.CURRENCY} {format_money(minimum)}")
            amount = p.decimal_min(f"Enter downpayment amount ({config.CURRENCY}): ", engine.ZERO)
            months = p.int_in_range(
                f"Number of installments ({config.MIN_INSTALL_MONTHS}-{config.MAX_INSTALL_MONTHS}): ",
                config.MIN_INSTALL_MONTHS, config.MAX_INSTALL_MONTHS
            )

        outcome = engine.resolve_payment(self.payment_method, tuition, amount, months)
        self.record.apply_payment(outcome)
        self._report_payment(outcome)

    def _report_payment(self, outcome: PaymentOutcome):
        if outcome.is_enrolled and outcome.method == PaymentMethod.INSTALLMENT:
            self.say("Full payment covered - YOU ARE NOW ENROLLED. Congratulations!")
        elif outcome.is_enrolled:
            self.say("Payment sufficient - YOU ARE NOW ENROLLED. Congratulations!")
        elif outcome.method == PaymentMethod.CASH:
            self.say(f"Payment insufficient - NOT ENROLLED yet. "
                     f"Remaining: {config.CURRENCY} {format_money(outcome.balance)}")
        elif outcome.monthly_due > 0:
            self.say(f"Installment accepted. Remaining: {config.CURRENCY} "
                     f"{format_money(outcome.balance)}. Monthly: {config.CURRENCY} "
                     f"{format_money(outcome.monthly_due)} for "
                     f"{outcome.installment_months} months.")
        else:
            self.say("Downpayment less than minimum - NOT ENROLLED.")

    # ===========================
    # ACCOUNT & PERSISTENCE STAGES
    # ===========================

    def create_credentials(self):
        self.say("\n[CREATE ACCOUNT] (Email will be your username)")
        self.email = self.prompter.email("Email: ", is_taken=self.credentials.__contains__)
        self.password = self.prompter.password_with_confirmation(
            f"Create password (min {config.PASSWORD_MIN_LENGTH} chars): ",
            "Confirm password: ",
            config.PASSWORD_MIN_LENGTH,
        )

    def persist(self) -> RegistrationResult:
        """Save credentials, keep the record in memory, write the assessment"""
        warnings = []

        try:
            self.credentials.save(self.email, self.password)
            self.say("Credentials saved.")
        except StorageError as e:
            warnings.append(str(e))
            self.prompter.show_error(str(e))

        self.profiles.put_if_absent(self.email, self.record)

        assessment_path = None
        try:
            assessment_path = save_assessment(self.assessment_dir, self.record, self.email,
                                              datetime.now())
            self.say(f"Assessment saved to file: {assessment_path.name}")
        except StorageError as e:
            warnings.append(str(e))
            self.prompter.show_error(str(e))
            self.say(f"[WARNING] {assessment_filename(self.record, self.email)} was not "
                     f"written; the assessment is kept for this session only.")

        self._advance(Stage.COMPLETED_WITH_WARNING if warnings else Stage.COMPLETED)
        self.logger.info("Registration %s for %s", self.stage.name, self.email)

        self.say("\nRegistration completed. You can now Login from the main menu "
                 "using your email & password.")

        return RegistrationResult(
            status=self.stage,
            email=self.email,
            record=self.record,
            assessment_path=assessment_path,
            warnings=warnings,
        )


def run_registration_cli(prompter: Prompter, credentials, profiles,
                         assessment_dir: Path = config.DATA_DIR) -> RegistrationResult:
    """Run one registration and wait for the user before returning"""
    session = EnrollmentSession(prompter, credentials, profiles, assessment_dir)
    result = session.run()
    prompter.pause()
    return result
