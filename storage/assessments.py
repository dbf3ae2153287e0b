"""
Assessment Files Module
Renders, writes and locates per-student assessment reports
"""

import re
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import config
from errors import StorageError
from pricing.engine import PaymentMethod
from registration.models import StudentRecord
from utils.error_log import log_error
from validation.validators import format_money


UNSAFE_FILENAME_CHARS = re.compile(r'[^a-zA-Z0-9_\-]')
EMAIL_LABEL = "Email        : "


def safe_file_name(text: Optional[str]) -> str:
    """Replace every character outside [A-Za-z0-9_-] with an underscore"""
    if text is None:
        return 'unknown'
    return UNSAFE_FILENAME_CHARS.sub('_', text)


def assessment_filename(record: Optional[StudentRecord], email: Optional[str]) -> str:
    """
    Deterministic report file name

    First_Last when both names are present, else the sanitized email,
    else a timestamped placeholder.
    """
    first = record.personal.first_name.strip() if record else ''
    last = record.personal.last_name.strip() if record else ''

    if first and last:
        safe = safe_file_name(f"{record.personal.first_name}_{record.personal.last_name}")
    elif email and email.strip():
        safe = safe_file_name(email)
    else:
        safe = f"unknown_{int(time.time() * 1000)}"

    return f"{config.ASSESSMENT_PREFIX}{safe}{config.ASSESSMENT_SUFFIX}"


def money(value) -> str:
    return f"{config.CURRENCY} {format_money(value)}"


def render_assessment(record: StudentRecord, email: str,
                      generated_at: Optional[datetime] = None) -> str:
    """
    Fixed-layout assessment report

    Args:
        record: Finalized student record
        email: Account email embedded in the report
        generated_at: Report timestamp (defaults to now)

    Returns:
        Report text, newline terminated
    """
    generated_at = generated_at or datetime.now()
    lines = [
        config.ASSESSMENT_TITLE,
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        "",
        f"Student Name : {record.full_name}",
    ]
    if record.admission.lrn:
        lines.append(f"LRN          : {record.admission.lrn}")
    lines += [
        f"{EMAIL_LABEL}{email}",
        f"Program      : {record.program.display_name}",
        f"Year/Term    : {record.term_label}",
        "",
        "Subjects:",
    ]
    for subject in record.subjects:
        lines.append(f"  {subject.code} - {subject.name} ({subject.units} units)")

    lines += [
        "",
        f"Total Units: {record.total_units}",
        f"Tuition: {money(record.tuition)}",
    ]

    payment = record.payment
    if payment is not None and payment.method == PaymentMethod.INSTALLMENT:
        lines += [
            f"Install Fee: {money(payment.surcharge)}",
            f"Total Due: {money(payment.total_due)}",
            f"Amount Paid: {money(payment.amount_paid)}",
            f"Balance: {money(payment.balance)}",
            f"Monthly due ({payment.installment_months} months): {money(payment.monthly_due)}",
        ]
    elif payment is not None:
        lines += [
            f"Amount Paid: {money(payment.amount_paid)}",
            f"Balance: {money(payment.balance)}",
        ]

    lines += [
        "",
        f"ENROLLED: {'YES' if record.is_enrolled else 'NO'}",
    ]
    return "\n".join(lines) + "\n"


def save_assessment(directory: Path, record: StudentRecord, email: str,
                    generated_at: Optional[datetime] = None) -> Path:
    """
    Write (or overwrite) the student's assessment file

    Raises:
        StorageError: the file could not be written
    """
    path = Path(directory) / assessment_filename(record, email)
    try:
        path.write_text(render_assessment(record, email, generated_at), encoding='utf-8')
    except OSError as e:
        log_error(f"Failed to write assessment file {path.name}: {e}", e,
                  component='Assessments')
        raise StorageError(f"Failed to save assessment file: {e}", path) from e
    return path


class AssessmentLocator:
    """Finds a saved assessment file for an account email"""

    def find_by_name(self, email: str) -> Optional[Path]:
        raise NotImplementedError

    def find_by_content(self, email: str) -> Optional[Path]:
        raise NotImplementedError


class DirectoryAssessmentLocator(AssessmentLocator):
    """
    Assessment lookup over one directory

    By name: files starting with Assessment_<sanitized email>.
    By content: any Assessment_*.txt with an "Email        : <email>" line
    for exactly that email, case-insensitively.
    """

    def __init__(self, directory: Path = config.DATA_DIR):
        self.directory = Path(directory)

    def _assessment_files(self) -> List[Path]:
        try:
            entries = sorted(self.directory.iterdir())
        except OSError as e:
            log_error(f"Failed to list {self.directory}: {e}", e, component='Assessments')
            return []
        return [p for p in entries if p.is_file()]

    def find_by_name(self, email: str) -> Optional[Path]:
        if not email:
            return None
        prefix = config.ASSESSMENT_PREFIX + safe_file_name(email)
        for path in self._assessment_files():
            if path.name.startswith(prefix) and path.name.endswith(config.ASSESSMENT_SUFFIX):
                return path
        return None

    def find_by_content(self, email: str) -> Optional[Path]:
        if not email:
            return None
        needle = f"{EMAIL_LABEL}{email.strip()}".lower()
        prefix = config.ASSESSMENT_PREFIX.lower()
        suffix = config.ASSESSMENT_SUFFIX.lower()

        for path in self._assessment_files():
            name = path.name.lower()
            if not (name.startswith(prefix) and name.endswith(suffix)):
                continue
            try:
                with open(path, 'r', encoding='utf-8', errors='replace') as f:
                    for line in f:
                        if line.strip().lower() == needle:
                            return path
            except OSError as e:
                log_error(f"Scanning file failed: {path.name} - {e}", e,
                          component='Assessments')
        return None


def locate_assessment(locator: AssessmentLocator, email: str) -> Optional[Path]:
    """Name lookup first, then the content scan"""
    if not email:
        return None
    return locator.find_by_name(email) or locator.find_by_content(email)


def read_assessment(path: Path) -> str:
    """
    Raises:
        StorageError: the file could not be read
    """
    try:
        return Path(path).read_text(encoding='utf-8', errors='replace')
    except OSError as e:
        log_error(f"Failed to read file {Path(path).name}: {e}", e, component='Assessments')
        raise StorageError(f"Failed to read file: {e}", path) from e
