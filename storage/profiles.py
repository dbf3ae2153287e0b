"""
Profile Directory Module
In-memory student records for the current run, keyed by email
"""

from typing import Dict, List, Optional

from registration.models import StudentRecord


class ProfileDirectory:
    """Student records registered during this process lifetime"""

    def __init__(self):
        self._profiles: Dict[str, StudentRecord] = {}

    def __contains__(self, email: str) -> bool:
        return email.lower() in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def get(self, email: str) -> Optional[StudentRecord]:
        return self._profiles.get(email.lower())

    def put_if_absent(self, email: str, record: StudentRecord) -> bool:
        email = email.lower()
        if email in self._profiles:
            return False
        self._profiles[email] = record
        return True

    def list(self) -> List[str]:
        return sorted(self._profiles)
