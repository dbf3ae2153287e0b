"""
Admin Panel Module
Password-gated listing of registered accounts
"""

import re
from dataclasses import dataclass
from typing import List

import config
from errors import AdminAccessDenied
from portal.login import show_saved_assessment
from registration.enroll import print_header
from storage.assessments import AssessmentLocator
from validation.prompts import Prompter


@dataclass
class AccountRow:
    index: int
    email: str
    name: str
    program: str
    enrolled: str


def truncate(text: str, length: int) -> str:
    if text is None:
        return ''
    if len(text) <= length:
        return text
    return text[:length - 3] + '...'


class AdminPanel:
    """
    Admin view over registered accounts

    Accounts come from the credential store; name, program and enrollment
    columns are filled in when a record exists for this run.
    """

    def __init__(self, prompter: Prompter, credentials, profiles,
                 locator: AssessmentLocator, admin_password: str = config.ADMIN_PASSWORD):
        self.prompter = prompter
        self.credentials = credentials
        self.profiles = profiles
        self.locator = locator
        self.admin_password = admin_password
        self.emails: List[str] = []

    def authorize(self, password: str):
        """
        Raises:
            AdminAccessDenied: password does not match
        """
        if password != self.admin_password:
            raise AdminAccessDenied()

    def refresh(self):
        self.emails = self.credentials.list()

    def rows(self) -> List[AccountRow]:
        rows = []
        for i, email in enumerate(self.emails, 1):
            record = self.profiles.get(email)
            if record is None:
                rows.append(AccountRow(i, email, 'N/A', 'N/A', 'N/A'))
                continue
            rows.append(AccountRow(
                index=i,
                email=email,
                name=f"{record.personal.last_name}, {record.personal.first_name}",
                program=record.program.program.display_name,
                enrolled='YES' if record.is_enrolled else 'NO',
            ))
        return rows

    def print_accounts(self):
        say = self.prompter.writer
        say(f"\nRegistered Students ({len(self.emails)}):")
        say(f"{'Idx':<4} {'Email':<32} {'Student Name':<30} {'Program':<32} Enrolled")
        say("-" * 111)
        for row in self.rows():
            say(f"{row.index:<4} {truncate(row.email, 32):<32} {truncate(row.name, 30):<30} "
                f"{truncate(row.program, 32):<32} {row.enrolled:<8}")

    def show_details(self, index: int) -> bool:
        """
        Show one account by its 1-based list index

        Returns:
            False if the index is out of range
        """
        if index < 1 or index > len(self.emails):
            return False

        email = self.emails[index - 1]
        self.prompter.writer(f"\n--- DETAILS FOR: {email} ---")
        shown = show_saved_assessment(
            self.prompter, self.profiles.get(email), self.locator, email,
            "Assessment file: {name}\n"
        )
        if not shown:
            self.prompter.writer("No in-memory profile or assessment file found for this user.")
        return True

    def run(self):
        """Interactive admin loop: number, r(efresh) or q(uit)"""
        print_header(self.prompter.writer, "ADMIN PANEL")
        password = self.prompter.optional_text("Enter admin password (blank to cancel): ")
        if not password:
            self.prompter.writer("Cancelled admin access.")
            return

        try:
            self.authorize(password)
        except AdminAccessDenied as e:
            self.prompter.show_error(str(e))
            return

        self.prompter.writer("Admin access granted.")
        self.refresh()

        while True:
            self.print_accounts()
            self.prompter.writer("\nOptions: [number] View details  |  r Refresh  |  "
                                 "q Quit to main menu")
            command = self.prompter.required_text("Choice: ").lower()

            if command == 'q':
                return
            if command == 'r':
                self.refresh()
                continue
            if re.fullmatch(r'[0-9]+', command):
                if not self.show_details(int(command)):
                    self.prompter.show_error("Invalid index.")
                    continue
                self.prompter.pause("\nPress Enter to return to admin list...")
                continue

            self.prompter.show_error("Unknown command.")
