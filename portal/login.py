"""
Login Module
Authenticates an account and shows its assessment
"""

from pathlib import Path
from typing import Optional

import config
from errors import StorageError, UnknownAccountError, WrongPasswordError
from pricing.engine import PaymentMethod
from registration.enroll import print_header, print_subject_table
from registration.models import StudentRecord
from storage.assessments import AssessmentLocator, locate_assessment, read_assessment
from validation.prompts import Prompter
from validation.validators import format_money


def print_assessment(writer, record: StudentRecord):
    """Console view of an in-memory student record"""
    print_header(writer, "SACARIAS ASSESSMENT")
    writer(f"Student Name : {record.full_name}")
    if record.admission.lrn:
        writer(f"LRN          : {record.admission.lrn}")
    writer(f"Program      : {record.program.display_name}")
    writer(f"Year/Term    : {record.term_label}")
    writer("-" * 55)
    print_subject_table(writer, record.subjects, width=55)
    writer(f"Total Units  : {record.total_units}")
    writer(f"Tuition      : {config.CURRENCY} {format_money(record.tuition)}")

    payment = record.payment
    if payment is not None:
        if payment.method == PaymentMethod.INSTALLMENT:
            writer(f"Install Fee  : {config.CURRENCY} {format_money(payment.surcharge)}")
            writer(f"Total Due    : {config.CURRENCY} {format_money(payment.total_due)}")
        writer(f"Amount Paid  : {config.CURRENCY} {format_money(payment.amount_paid)}")
        writer(f"Balance      : {config.CURRENCY} {format_money(payment.balance)}")
        if payment.method == PaymentMethod.INSTALLMENT and payment.installment_months > 0:
            writer(f"Monthly Due  : {config.CURRENCY} {format_money(payment.monthly_due)} "
                   f"({payment.installment_months} months)")

    writer(f"ENROLLED: {'YES' if record.is_enrolled else 'NO'}")
    writer("=" * 55 + "\n")


def show_saved_assessment(prompter: Prompter, record: Optional[StudentRecord],
                          locator: AssessmentLocator, email: str, heading: str) -> bool:
    """
    Show the in-memory record, else the saved assessment file

    Returns:
        True if something was shown
    """
    if record is not None:
        print_assessment(prompter.writer, record)
        return True

    path = locate_assessment(locator, email)
    if path is None:
        return False

    prompter.writer(heading.format(name=Path(path).name))
    try:
        prompter.writer(read_assessment(path))
    except StorageError as e:
        prompter.show_error(str(e))
    return True


class LoginService:
    """Credential check and assessment lookup for one account"""

    def __init__(self, credentials, profiles, locator: AssessmentLocator):
        self.credentials = credentials
        self.profiles = profiles
        self.locator = locator

    def authenticate(self, email: str, password: str) -> str:
        """
        Check an email/password pair

        Returns:
            The normalized (lowercase) email

        Raises:
            UnknownAccountError: no credential for the email
            WrongPasswordError: password does not match
        """
        email = email.strip().lower()
        stored = self.credentials.get(email)
        if stored is None:
            raise UnknownAccountError(email)
        if stored != password:
            raise WrongPasswordError(email)
        return email

    def find_record(self, email: str) -> Optional[StudentRecord]:
        return self.profiles.get(email)


def run_login_cli(prompter: Prompter, service: LoginService) -> Optional[str]:
    """
    Interactive login

    Returns:
        The logged-in email, or None when authentication failed
    """
    print_header(prompter.writer, "LOGIN")
    email = prompter.required_text("Email: ").lower()
    password = prompter.password("Password: ")

    try:
        email = service.authenticate(email, password)
    except (UnknownAccountError, WrongPasswordError) as e:
        prompter.show_error(str(e))
        return None

    prompter.writer("Login successful. Welcome!")

    shown = show_saved_assessment(
        prompter, service.find_record(email), service.locator, email,
        "\nFound assessment file: {name} - showing contents:\n"
    )
    if not shown:
        prompter.writer("No assessment file found for this account "
                        "(maybe you registered in a previous run).")
    return email
