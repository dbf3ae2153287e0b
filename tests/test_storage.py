from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest

from curriculum.catalog import Program, ProgramChoice, Specialization, lookup_subjects
from errors import StorageError
from pricing import engine
from registration.models import (
    AdmissionInfo, EducationHistory, GuardianData, PersonalData, StudentRecord,
)
from storage.assessments import (
    AssessmentLocator,
    DirectoryAssessmentLocator,
    assessment_filename,
    locate_assessment,
    render_assessment,
    safe_file_name,
    save_assessment,
)
from storage.credentials import CredentialStore
from utils.error_log import log_error


def make_record(first='Juan', last='Dela Cruz', lrn='123456789012', payment=None):
    record = StudentRecord(
        personal=PersonalData(last_name=last, first_name=first, middle_name='Santos'),
        guardian=GuardianData(),
        education=EducationHistory(),
        admission=AdmissionInfo(lrn=lrn),
        program=ProgramChoice(Program.BSIT, Specialization.WEB_MOBILE),
        year_level=1,
        semester=1,
        subjects=lookup_subjects(Program.BSIT, 1, 1, Specialization.WEB_MOBILE),
    )
    if payment is not None:
        record.apply_payment(payment)
    return record


# ===========================
# CREDENTIALS
# ===========================

def test_load_skips_malformed_and_keeps_first(tmp_path, error_log):
    path = tmp_path / 'users.txt'
    path.write_text(
        "Ana@Example.com|first|pipe\n"
        "\n"
        "no-separator-line\n"
        "not-an-email|pw\n"
        "ana@example.com|second\n"
        "ben@example.com|secret\n",
        encoding='utf-8',
    )
    store = CredentialStore(path, writer=lambda text: None)

    assert store.load() == 2
    assert store.get('ANA@example.com') == 'first|pipe'
    assert store.list() == ['ana@example.com', 'ben@example.com']
    assert 'Malformed users.txt line 3' in error_log.read_text()
    assert 'Invalid email in users.txt line 4' in error_log.read_text()


def test_load_missing_file_is_empty(tmp_path):
    store = CredentialStore(tmp_path / 'absent.txt')
    assert store.load() == 0
    assert len(store) == 0


def test_load_read_failure_warns_and_continues(tmp_path):
    directory = tmp_path / 'users.txt'
    directory.mkdir()
    messages = []
    store = CredentialStore(directory, writer=messages.append)

    assert store.load() == 0
    assert messages and messages[0].startswith('[WARNING]')
    assert 'continuing with 0 credential(s) loaded' in messages[0]


def test_undecodable_file_reports_what_was_kept(tmp_path):
    path = tmp_path / 'users.txt'
    path.write_bytes(b'ana@example.com|secret1\n\xff\xfe|bad\n')
    messages = []
    store = CredentialStore(path, writer=messages.append)

    loaded = store.load()

    assert loaded == len(store)
    assert f'continuing with {loaded} credential(s) loaded' in messages[0]


def test_save_appends_and_registers(credentials):
    credentials.save('New@Example.com', 'secret1')
    credentials.save('other@example.com', 'secret2')

    assert credentials.get('new@example.com') == 'secret1'
    assert credentials.path.read_text().splitlines() == [
        'new@example.com|secret1',
        'other@example.com|secret2',
    ]


def test_saved_credentials_reload_verbatim(credentials):
    credentials.save('ana@example.com', ' pass|word ')

    reloaded = CredentialStore(credentials.path)
    assert reloaded.load() == 1
    assert reloaded.get('ana@example.com') == ' pass|word '


def test_save_failure_keeps_memory_entry(tmp_path):
    store = CredentialStore(tmp_path / 'missing' / 'users.txt')
    with pytest.raises(StorageError):
        store.save('ana@example.com', 'secret1')
    assert 'ana@example.com' in store


def test_put_if_absent_does_not_overwrite(credentials):
    assert credentials.put_if_absent('ana@example.com', 'one')
    assert not credentials.put_if_absent('ANA@example.com', 'two')
    assert credentials.get('ana@example.com') == 'one'


# ===========================
# ASSESSMENTS
# ===========================

def test_safe_file_name():
    assert safe_file_name('María José_O-B') == 'Mar_a_Jos__O-B'
    assert safe_file_name('juan@example.com') == 'juan_example_com'
    assert safe_file_name(None) == 'unknown'


def test_assessment_filename_prefers_names():
    assert assessment_filename(make_record(), 'juan@example.com') == \
        'Assessment_Juan_Dela_Cruz.txt'
    assert assessment_filename(make_record(first='', last=''), 'juan@example.com') == \
        'Assessment_juan_example_com.txt'
    assert assessment_filename(None, '').startswith('Assessment_unknown_')


def test_render_cash_assessment():
    outcome = engine.cash_outcome(Decimal('8750'), Decimal('8750'))
    text = render_assessment(make_record(payment=outcome), 'juan@example.com',
                             datetime(2026, 6, 1, 9, 30, 0))
    lines = text.splitlines()

    assert lines[0] == 'SACARIAS - ASSESSMENT'
    assert lines[1] == 'Generated: 2026-06-01 09:30:00'
    assert 'Student Name : Dela Cruz, Juan Santos' in lines
    assert 'LRN          : 123456789012' in lines
    assert 'Email        : juan@example.com' in lines
    assert 'Year/Term    : Year 1 - 1st Semester' in lines
    assert '  GEC4 - Purposive Communication (3 units)' in lines
    assert 'Total Units: 25' in lines
    assert 'Tuition: PHP 8,750.00' in lines
    assert 'Balance: PHP 0.00' in lines
    assert 'Install Fee' not in text
    assert lines[-1] == 'ENROLLED: YES'


def test_render_installment_assessment():
    outcome = engine.installment_outcome(Decimal('8750'), Decimal('2750'), 4)
    text = render_assessment(make_record(lrn='', payment=outcome), 'juan@example.com')

    assert 'LRN' not in text
    assert 'Install Fee: PHP 2,000.00' in text
    assert 'Total Due: PHP 10,750.00' in text
    assert 'Monthly due (4 months): PHP 2,000.00' in text
    assert text.rstrip().endswith('ENROLLED: NO')


def test_save_overwrites(tmp_path):
    record = make_record(payment=engine.cash_outcome(Decimal('8750'), Decimal('0')))
    first = save_assessment(tmp_path, record, 'juan@example.com')
    second = save_assessment(tmp_path, record, 'juan@example.com')

    assert first == second == tmp_path / 'Assessment_Juan_Dela_Cruz.txt'
    assert 'ENROLLED: NO' in first.read_text()


def test_save_failure_raises_storage_error(tmp_path):
    with pytest.raises(StorageError):
        save_assessment(tmp_path / 'missing', make_record(), 'juan@example.com')


def test_content_scan_finds_file_the_name_lookup_misses(tmp_path):
    record = make_record(payment=engine.cash_outcome(Decimal('8750'), Decimal('8750')))
    path = save_assessment(tmp_path, record, 'juan@example.com')
    (tmp_path / 'Assessment_Other_Person.txt').write_text('Email        : other@example.com\n')
    (tmp_path / 'notes.txt').write_text('juan@example.com\n')

    locator = DirectoryAssessmentLocator(tmp_path)

    assert locator.find_by_name('juan@example.com') is None
    assert locator.find_by_content('JUAN@example.com') == path
    assert locate_assessment(locator, 'juan@example.com') == path
    assert locate_assessment(locator, 'nobody@example.com') is None


def test_content_scan_ignores_partial_email_match(tmp_path):
    record = make_record(payment=engine.cash_outcome(Decimal('8750'), Decimal('8750')))
    save_assessment(tmp_path, record, 'juan@example.com')

    locator = DirectoryAssessmentLocator(tmp_path)
    assert locator.find_by_content('an@example.com') is None
    assert locate_assessment(locator, 'an@example.com') is None


def test_name_lookup_wins(tmp_path):
    by_name = tmp_path / 'Assessment_juan_example_com.txt'
    by_name.write_text('SACARIAS - ASSESSMENT\n')
    assert locate_assessment(DirectoryAssessmentLocator(tmp_path), 'juan@example.com') == by_name


def test_locator_interface_can_be_faked():
    class FakeLocator(AssessmentLocator):
        def __init__(self):
            self.calls = []

        def find_by_name(self, email):
            self.calls.append('name')
            return None

        def find_by_content(self, email):
            self.calls.append('content')
            return Path('Assessment_x.txt')

    fake = FakeLocator()
    assert locate_assessment(fake, 'a@b.co') == Path('Assessment_x.txt')
    assert fake.calls == ['name', 'content']


# ===========================
# ERROR LOG
# ===========================

def test_error_log_entry_has_timestamp_and_exception(error_log):
    try:
        raise OSError('disk full')
    except OSError as e:
        log_error('Failed to write assessment', e)

    text = error_log.read_text()
    assert 'ERROR - Failed to write assessment' in text
    assert 'OSError: disk full' in text
    assert text[:4].isdigit()
