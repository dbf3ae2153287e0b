from decimal import Decimal

import pytest

from curriculum.catalog import Program, Specialization
from pricing.engine import PaymentMethod
from registration.enroll import EnrollmentSession, Stage, run_registration_cli
from tests.helpers import make_prompter, registration_lines


def run_session(lines, credentials, profiles, assessment_dir):
    prompter, reader, out = make_prompter(lines)
    session = EnrollmentSession(prompter, credentials, profiles, assessment_dir)
    result = session.run()
    return session, result, reader, out


def test_cash_registration_completes(tmp_path, credentials, profiles):
    session, result, reader, out = run_session(
        registration_lines(), credentials, profiles, tmp_path)

    record = result.record
    assert result.status == Stage.COMPLETED
    assert session.stage == Stage.COMPLETED
    assert result.warnings == []
    assert result.email == 'juan@example.com'

    assert record.program.program == Program.BSIT
    assert record.program.specialization == Specialization.WEB_MOBILE
    assert len(record.subjects) == 9
    assert record.total_units == 25
    assert record.tuition == Decimal('8750')
    assert record.payment.method == PaymentMethod.CASH
    assert record.is_enrolled
    assert record.payment.balance == 0
    assert record.admission.gwa_average == pytest.approx(91.1666, abs=1e-3)
    assert record.admission.shs_track == 'STEM'
    assert record.admission.campus == 'Echague'

    assert credentials.get('juan@example.com') == 'secret1'
    assert profiles.get('juan@example.com') is record
    assert result.assessment_path == tmp_path / 'Assessment_Juan_Dela_Cruz.txt'
    assert 'ENROLLED: YES' in result.assessment_path.read_text()
    assert 'Choose semester (1-3): ' in reader.prompts
    assert 'Total Units: 25' in out.lines
    assert 'Payment sufficient - YOU ARE NOW ENROLLED. Congratulations!' in out.lines


def test_installment_below_minimum_down(tmp_path, credentials, profiles):
    lines = registration_lines(method='2', payment=('2000', '4'))
    _, result, reader, out = run_session(lines, credentials, profiles, tmp_path)

    payment = result.record.payment
    assert payment.total_due == Decimal('10750')
    assert payment.balance == Decimal('8750')
    assert payment.monthly_due == 0
    assert not payment.is_enrolled
    assert 'Number of installments (2-6): ' in reader.prompts
    assert 'Downpayment less than minimum - NOT ENROLLED.' in out.lines


def test_installment_months_collected_even_for_full_payment(tmp_path, credentials, profiles):
    lines = registration_lines(method='2', payment=('10750', '9', '3'))
    _, result, reader, out = run_session(lines, credentials, profiles, tmp_path)

    payment = result.record.payment
    assert payment.is_enrolled
    assert payment.installment_months == 3
    assert payment.monthly_due == 0
    assert '[ERROR] Enter a number between 2 and 6.' in out.lines
    assert 'Full payment covered - YOU ARE NOW ENROLLED. Congratulations!' in out.lines


def test_program_without_midyear_offers_two_semesters(tmp_path, credentials, profiles):
    # BSCS, year 2: midyear '3' is rejected, the next answer '2' picks the
    # 2nd semester, then cash with nothing paid
    lines = registration_lines(program='3', year='2', semester='3', method='2',
                               payment=('1', '0'))
    _, result, reader, out = run_session(lines, credentials, profiles, tmp_path)

    record = result.record
    assert record.program.program == Program.BSCS
    assert record.program.specialization is None
    assert record.semester == 2
    assert 'Choose semester (1-2): ' in reader.prompts
    assert record.subjects[0].code == 'CS211'
    assert not record.is_enrolled


def test_duplicate_email_rejected_before_password(tmp_path, credentials, profiles):
    credentials.put_if_absent('taken@example.com', 'oldpass')
    lines = registration_lines(emails=('Taken@example.com', 'fresh@example.com'))
    _, result, reader, out = run_session(lines, credentials, profiles, tmp_path)

    email_prompts = [i for i, p in enumerate(reader.prompts) if p == 'Email: ']
    password_prompt = reader.prompts.index('Create password (min 6 chars): ')

    assert len(email_prompts) == 2
    assert email_prompts[-1] < password_prompt
    assert any('Email already registered' in line for line in out.lines)
    assert result.email == 'fresh@example.com'
    assert credentials.get('taken@example.com') == 'oldpass'


def test_assessment_write_failure_completes_with_warning(tmp_path, credentials, profiles):
    _, result, _, out = run_session(
        registration_lines(), credentials, profiles, tmp_path / 'missing')

    assert result.status == Stage.COMPLETED_WITH_WARNING
    assert result.assessment_path is None
    assert len(result.warnings) == 1
    assert profiles.get('juan@example.com') is result.record
    assert credentials.get('juan@example.com') == 'secret1'
    assert any(line.startswith('[ERROR] Failed to save assessment file') for line in out.lines)


def test_abandoned_session_persists_nothing(tmp_path, credentials, profiles):
    lines = registration_lines()[:-3]
    prompter, _, _ = make_prompter(lines)
    session = EnrollmentSession(prompter, credentials, profiles, tmp_path)

    with pytest.raises(EOFError):
        session.run()

    assert session.stage == Stage.CREDENTIAL_CREATION
    assert len(credentials) == 0
    assert len(profiles) == 0
    assert not list(tmp_path.glob('Assessment_*.txt'))


def test_session_cannot_run_twice(tmp_path, credentials, profiles):
    session, _, _, _ = run_session(registration_lines(), credentials, profiles, tmp_path)
    with pytest.raises(RuntimeError):
        session.run()


def test_payment_applied_once(tmp_path, credentials, profiles):
    _, result, _, _ = run_session(registration_lines(), credentials, profiles, tmp_path)
    with pytest.raises(RuntimeError):
        result.record.apply_payment(result.record.payment)


def test_registration_cli_pauses_after_completion(tmp_path, credentials, profiles):
    prompter, reader, _ = make_prompter(registration_lines() + [''])
    result = run_registration_cli(prompter, credentials, profiles, tmp_path)

    assert result.status == Stage.COMPLETED
    assert reader.lines == []
