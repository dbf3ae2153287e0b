"""
Credential Store Module
Email -> password repository backed by an append-only text file
Each line of the file is `email|password`
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional

import config
from errors import StorageError
from utils.error_log import log_error
from validation.validators import is_valid_email


class CredentialStore:
    """
    Registered account credentials

    Constructed once at startup and passed to the components that need it.
    Emails are lowercase keys; passwords are stored verbatim.
    """

    def __init__(self, path: Path = config.CREDENTIALS_FILE,
                 writer: Callable[[str], None] = print):
        self.path = Path(path)
        self.writer = writer
        self._credentials: Dict[str, str] = {}

    def __contains__(self, email: str) -> bool:
        return email.lower() in self._credentials

    def __len__(self) -> int:
        return len(self._credentials)

    def get(self, email: str) -> Optional[str]:
        return self._credentials.get(email.lower())

    def put_if_absent(self, email: str, password: str) -> bool:
        """
        Add an in-memory entry unless the email is already present

        Returns:
            True if the entry was added
        """
        email = email.lower()
        if email in self._credentials:
            return False
        self._credentials[email] = password
        return True

    def list(self) -> List[str]:
        """All registered emails, sorted"""
        return sorted(self._credentials)

    def load(self) -> int:
        """
        Load credentials from the file

        Blank lines are skipped; malformed lines and invalid emails are
        logged and skipped; the first occurrence of an email wins. A read
        failure leaves the store with whatever was loaded so far.

        Returns:
            Number of entries loaded
        """
        if not self.path.exists():
            return 0

        loaded = 0
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                for line_number, line in enumerate(f, 1):
                    line = line.rstrip("\r\n")
                    if not line.strip():
                        continue

                    if '|' not in line:
                        log_error(f"Malformed {self.path.name} line {line_number}: {line}",
                                  component='CredentialStore')
                        continue

                    email, password = line.split('|', 1)
                    email = email.strip().lower()
                    if not is_valid_email(email):
                        log_error(f"Invalid email in {self.path.name} line {line_number}: {email}",
                                  component='CredentialStore')
                        continue

                    if self.put_if_absent(email, password):
                        loaded += 1

        except (OSError, UnicodeDecodeError) as e:
            log_error(f"Failed to read users file: {e}", e, component='CredentialStore')
            self.writer(f"[WARNING] Could not read users file; "
                        f"continuing with {loaded} credential(s) loaded.")

        return loaded

    def save(self, email: str, password: str):
        """
        Append a credential line and register it in memory

        The in-memory entry is kept even when the file write fails so the
        account stays usable for the rest of the run.

        Raises:
            StorageError: the file could not be written
        """
        if not email or password is None:
            raise StorageError("email or password is missing", self.path)

        email = email.lower()
        self.put_if_absent(email, password)

        try:
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(f"{email}|{password}\n")
        except OSError as e:
            log_error(f"Failed to save credential for {email}: {e}", e,
                      component='CredentialStore')
            raise StorageError(f"Failed to save credentials: {e}", self.path) from e
