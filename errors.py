"""
Error taxonomy for the enrollment system

Validation errors are recovered by re-prompting, storage errors by warning
the user and continuing, auth failures by returning to the main menu.
Anything else is caught by the main loop.
"""


class EnrollmentError(Exception):
    """Base class for all expected enrollment failures"""


class ValidationError(EnrollmentError, ValueError):
    """Raw input violated a field rule; message is shown to the user"""


class StorageError(EnrollmentError):
    """Credential, assessment or log file could not be read or written"""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class AuthFailure(EnrollmentError):
    """Login or admin access was refused"""


class UnknownAccountError(AuthFailure):
    def __init__(self, email: str):
        super().__init__("No account found for that email.")
        self.email = email


class WrongPasswordError(AuthFailure):
    def __init__(self, email: str):
        super().__init__("Incorrect password.")
        self.email = email


class AdminAccessDenied(AuthFailure):
    def __init__(self):
        super().__init__("Incorrect admin password.")
