"""
Scripted console input and captured output for driving prompt flows
"""

from typing import List, Sequence

from validation.prompts import Prompter


class ScriptedInput:
    """input() stand-in fed from a list; EOFError once exhausted"""

    def __init__(self, lines: Sequence[str]):
        self.lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = '') -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("no more scripted input")
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


class CapturedOutput:
    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, text: str = ''):
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def make_prompter(lines):
    reader = ScriptedInput(lines)
    writer = CapturedOutput()
    return Prompter(reader=reader, writer=writer), reader, writer


def registration_lines(last='Dela Cruz', first='Juan', program='1', specialization='1',
                       year='1', semester='1', method='1', payment=('8750',),
                       emails=('juan@example.com',), password='secret1', lrn='123456789012'):
    """Answers for a full registration session, in prompt order"""
    lines = [
        # personal
        last, first, 'Santos', '', 'Purok 1, Echague, Isabela', '2006-05-14',
        'Male', '+63 912-345-6789', 'Catholic',
        # parents / guardian
        'Pedro Dela Cruz', 'Farmer', '', 'Maria Dela Cruz', 'Teacher', '', '', '',
    ]
    # elementary, junior high, senior high
    for level in ('Elementary', 'Junior High', 'Senior High'):
        lines += [f'Echague {level} School', 'Echague, Isabela', '2012-2018', '', '']
    # admission: lrn, level, 3 GWA, SHS track, campus
    lines += [lrn, 'Undergraduate', '90', '91.5', '92', '1', '1']
    lines.append(program)
    if program == '1':
        lines.append(specialization)
    lines += [year, semester, method]
    lines += list(payment)
    lines += list(emails)
    lines += [password, password]
    return lines

