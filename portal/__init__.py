"""
Account portal module
Login and admin panel flows
"""

from .login import LoginService, run_login_cli
from .admin import AdminPanel

__all__ = ['LoginService', 'run_login_cli', 'AdminPanel']
