import pytest

from storage.credentials import CredentialStore
from storage.profiles import ProfileDirectory
from utils.error_log import setup_error_logging


@pytest.fixture(autouse=True)
def error_log(tmp_path):
    """Route the error log into the test's temporary directory"""
    log_path = tmp_path / 'error.log'
    setup_error_logging(log_path)
    return log_path


@pytest.fixture
def credentials(tmp_path):
    return CredentialStore(tmp_path / 'users.txt', writer=lambda text: None)


@pytest.fixture
def profiles():
    return ProfileDirectory()
