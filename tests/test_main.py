import pytest

from main import EnrollmentSystem
from tests.helpers import make_prompter, registration_lines


def make_system(tmp_path, lines):
    prompter, reader, out = make_prompter(lines)
    system = EnrollmentSystem(prompter=prompter, data_dir=tmp_path, admin_password='admin123')
    return system, reader, out


def test_initialize_loads_credentials_and_shows_banner(tmp_path):
    (tmp_path / 'users.txt').write_text('ana@example.com|secret1\n')
    system, _, out = make_system(tmp_path, [])

    system.initialize()

    assert len(system.credentials) == 1
    assert any('Registered accounts: 1' in line for line in out.lines)
    assert out.lines[0] == '=' * 80


def test_menu_register_then_login_then_exit(tmp_path):
    lines = ['1'] + registration_lines() + [''] + ['2', 'juan@example.com', 'secret1', '4']
    system, reader, out = make_system(tmp_path, lines)

    system.show_menu()

    assert reader.lines == []
    assert (tmp_path / 'users.txt').read_text() == 'juan@example.com|secret1\n'
    assert (tmp_path / 'Assessment_Juan_Dela_Cruz.txt').exists()
    assert 'Login successful. Welcome!' in out.lines
    assert out.lines[-1] == 'Goodbye - thank you!'


def test_menu_reports_invalid_option(tmp_path):
    system, _, out = make_system(tmp_path, ['7', '4'])
    system.show_menu()
    assert '[ERROR] Invalid option. Enter 1, 2, 3 or 4.' in out.lines


def test_menu_survives_unexpected_errors(tmp_path, monkeypatch, error_log):
    def broken():
        raise KeyError('boom')

    system, _, out = make_system(tmp_path, ['3', '4'])
    monkeypatch.setattr(system, 'admin_panel', broken)

    system.show_menu()

    assert '[ERROR] An unexpected error occurred. Returning to main menu.' in out.lines
    assert out.lines[-1] == 'Goodbye - thank you!'
    assert 'Unexpected error in main menu' in error_log.read_text()


def test_closed_input_leaves_menu(tmp_path):
    system, _, _ = make_system(tmp_path, ['2'])
    with pytest.raises(EOFError):
        system.show_menu()
