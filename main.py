"""
Student Enrollment System - Main Entry Point
Console-based registration, login and admin panel
"""

import sys
import signal
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import config
from curriculum.catalog import midyear_mismatches
from portal.admin import AdminPanel
from portal.login import LoginService, run_login_cli
from registration.enroll import print_header, run_registration_cli
from storage.assessments import DirectoryAssessmentLocator
from storage.credentials import CredentialStore
from storage.profiles import ProfileDirectory
from utils.error_log import get_logger, log_error, setup_error_logging
from validation.prompts import Prompter


class EnrollmentSystem:
    """
    Main enrollment system controller
    Owns the shared stores and the CLI menu
    """

    def __init__(self, prompter: Prompter = None, data_dir: Path = config.DATA_DIR,
                 admin_password: str = config.ADMIN_PASSWORD):
        self.prompter = prompter or Prompter()
        self.data_dir = Path(data_dir)
        self.admin_password = admin_password

        self.credentials = CredentialStore(self.data_dir / config.CREDENTIALS_FILE.name,
                                           writer=self.prompter.writer)
        self.profiles = ProfileDirectory()
        self.locator = DirectoryAssessmentLocator(self.data_dir)
        self.logger = get_logger('System')

    def install_signal_handlers(self):
        signal.signal(signal.SIGINT, self._signal_handler)
        signal.signal(signal.SIGTERM, self._signal_handler)

    def _signal_handler(self, signum, frame):
        """Handle interrupt signals"""
        print("\n\n[System] Interrupt received, shutting down...")
        sys.exit(0)

    @property
    def say(self):
        return self.prompter.writer

    def initialize(self):
        """Load stored credentials and show the landing banner"""
        loaded = self.credentials.load()
        self.logger.debug("Loaded %d credentials", loaded)

        for mismatch in midyear_mismatches():
            self.logger.warning("Midyear gate mismatch - %s", mismatch)

        self.show_landing()

    def _centered(self, text: str, width: int = config.BANNER_WIDTH):
        if len(text) >= width:
            self.say(text)
            return
        self.say(" " * ((width - len(text)) // 2) + text)

    def show_landing(self):
        width = config.BANNER_WIDTH
        border = "=" * width
        rule = "-" * 40

        self.say(border)
        self._centered("")
        self._centered(config.UNIVERSITY_NAME)
        self._centered(config.SYSTEM_TITLE)
        self._centered(config.SYSTEM_SUBTITLE)
        self._centered("")
        self._centered(rule)
        self._centered(f"Date: {date.today().strftime('%Y-%m-%d')}   |   "
                       f"Registered accounts: {len(self.credentials)}")
        self._centered(rule)
        self._centered("")
        self._centered("Welcome! ")
        self._centered("")
        self.say(border)

    def show_menu(self):
        """Main menu loop; only Exit leaves it"""
        while True:
            try:
                print_header(self.say, config.MENU_TITLE)
                self.say("1) Register (New Student)")
                self.say("2) Login")
                self.say("3) Admin Panel")
                self.say("4) Exit")

                choice = self.prompter.required_text("Choose an option (1-4): ")

                if choice == '1':
                    self.register_student()
                elif choice == '2':
                    self.login()
                elif choice == '3':
                    self.admin_panel()
                elif choice == '4':
                    self.say("Goodbye - thank you!")
                    break
                else:
                    self.prompter.show_error("Invalid option. Enter 1, 2, 3 or 4.")

            except EOFError:
                raise
            except Exception as e:
                log_error(f"Unexpected error in main menu: {e}", e, component='System')
                self.say("[ERROR] An unexpected error occurred. Returning to main menu.")

    def register_student(self):
        return run_registration_cli(self.prompter, self.credentials, self.profiles,
                                    self.data_dir)

    def login(self):
        service = LoginService(self.credentials, self.profiles, self.locator)
        return run_login_cli(self.prompter, service)

    def admin_panel(self):
        panel = AdminPanel(self.prompter, self.credentials, self.profiles,
                           self.locator, self.admin_password)
        panel.run()


def main():
    """Main entry point"""
    setup_error_logging()
    system = EnrollmentSystem()
    system.install_signal_handlers()

    try:
        system.initialize()
        system.show_menu()

    except EOFError:
        print("\n[System] Input closed, exiting.")

    finally:
        print("\n[System] Goodbye!")


if __name__ == "__main__":
    main()
