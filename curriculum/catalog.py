"""
Curriculum Catalog Module
Static subject tables per program track, year level and semester
Lookup is pure and total: undefined cells return an empty tuple
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

import config


@dataclass(frozen=True)
class Subject:
    code: str
    name: str
    units: int

    def __post_init__(self):
        if self.units <= 0:
            raise ValueError(f"Subject {self.code} must carry a positive unit count")


class Program(Enum):
    BSIT = "BSIT - Bachelor of Science in Information Technology"
    BSMIT = "BSMIT - Bachelor of Science in Multimedia & IT"
    BSCS = "BSCS - Bachelor of Science in Computer Science"
    BSIS = "BSIS - Bachelor of Science in Information Systems"
    BSDSA = "BSDSA - BS in Data Science & Analytics"
    BSBLIS = "BSBLIS - Bachelor of Library & Information Science"
    MIT = "MIT - Master in Information Technology"

    @property
    def display_name(self) -> str:
        return self.value


class Specialization(Enum):
    WEB_MOBILE = "Web & Mobile App Development"
    NETWORK_SYSTEMS = "Network Systems"

    @property
    def display_name(self) -> str:
        return self.value


# Programs that carry a specialization, and the ones they may carry
SPECIALIZATIONS = {
    Program.BSIT: (Specialization.WEB_MOBILE, Specialization.NETWORK_SYSTEMS),
}


@dataclass(frozen=True)
class ProgramChoice:
    """
    A selected program, tagged with its specialization

    Only programs listed in SPECIALIZATIONS carry one (and must);
    every other program carries None.
    """
    program: Program
    specialization: Optional[Specialization] = None

    def __post_init__(self):
        allowed = SPECIALIZATIONS.get(self.program)
        if allowed is None and self.specialization is not None:
            raise ValueError(f"{self.program.name} has no specializations")
        if allowed is not None and self.specialization not in allowed:
            raise ValueError(f"{self.program.name} requires a specialization")

    @property
    def display_name(self) -> str:
        if self.specialization is None:
            return self.program.display_name
        return f"{self.program.display_name} ({self.specialization.display_name})"


SEMESTER_LABELS = {1: "1st Semester", 2: "2nd Semester", 3: "Midyear"}
MIDYEAR = 3

SHS_TRACKS = ["STEM", "HUMSS", "ABM", "GAS", "TVL", "Arts & Design", "Sports"]

CAMPUSES = ["Echague", "Cauayan", "Roxas", "Ilagan", "Jones",
            "Angadanan", "Cabagan", "San Mateo", "Santiago"]


def semester_label(semester: int) -> str:
    return SEMESTER_LABELS.get(semester, "Unknown")


def _table(rows: Dict[Tuple[int, int], List[tuple]]) -> Dict[Tuple[int, int], Tuple[Subject, ...]]:
    return {
        term: tuple(Subject(code, name, units) for code, name, units in subjects)
        for term, subjects in rows.items()
    }


# ===========================
# CURRICULUM TABLES
# Keyed by (year level, semester); semester 3 is midyear
# ===========================

BSIT_WEB_MOBILE = _table({
    (1, 1): [
        ("GEC4", "Purposive Communication", 3),
        ("GEC5", "Art Appreciation", 3),
        ("ITINST1", "Climate Change & DRRM", 2),
        ("ITGEE1", "Health & Wellness Science", 3),
        ("ITGEE2", "Foreign Language 1", 3),
        ("IT111", "Introduction to Computing", 3),
        ("IT112", "Computer Programming 1", 3),
        ("PE1", "Physical Activity I", 2),
        ("NSTP1", "NSTP 1", 3),
    ],
    (1, 2): [
        ("GEC1", "Understanding the Self", 3),
        ("GEC2", "Readings in Philippine History", 3),
        ("GEC3", "Mathematics in the Modern World", 3),
        ("GEC7", "Ethics", 3),
        ("IT121", "Computer Programming 2", 3),
        ("IT122", "Human Computer Interaction 1", 3),
        ("IT123", "Discrete Mathematics", 3),
        ("PE2", "Physical Activity II", 2),
        ("NSTP2", "NSTP 2", 3),
    ],
    (2, 1): [
        ("GEC6", "Science, Technology & Society", 3),
        ("GEC8", "The Contemporary World", 3),
        ("ITINST2", "Creative & Critical Thinking", 2),
        ("ITGEE3", "Foreign Language 2", 3),
        ("IT211", "Data Structures & Algorithms", 3),
        ("ITelec1", "Platform Technologies", 3),
        ("ITelec2", "Object Oriented Programming", 3),
        ("ITBPO1", "Business Communication", 3),
        ("PE3", "Physical Activity III", 2),
    ],
    (2, 2): [
        ("ITGEE4", "The Entrepreneurial Mind", 3),
        ("GEC9", "Life & Works of Rizal", 3),
        ("IT221", "Information Management", 3),
        ("IT222", "Networking 1", 3),
        ("IT223", "Quantitative Methods", 3),
        ("IT224", "Integrative Programming & Tech", 3),
        ("IT225", "Accounting for IT", 3),
        ("ITAPPDEV1", "Fundamentals of Mobile Tech", 3),
        ("PE4", "Physical Activity IV", 2),
    ],
    (2, 3): [
        ("IT226", "Applications Dev & Emerging Tech", 3),
        ("ITelec3", "Web Systems & Technologies", 3),
    ],
    (3, 1): [
        ("ITINST3", "Data Science Analytics", 2),
        ("IT311", "Advanced Database Systems", 3),
        ("IT312", "Networking 2", 3),
        ("IT313", "System Integration & Architecture", 3),
        ("IT314", "Info Assurance & Security 1", 3),
        ("ITAPPDEV2", "Web Applications", 3),
        ("ITAPPDEV3", "Mobile Applications", 3),
    ],
    (3, 2): [
        ("ITGEE5", "Multicultural Education", 3),
        ("IT321", "Info Assurance & Security 2", 3),
        ("IT322", "Social & Professional Issues", 3),
        ("IT323", "Capstone Project & Research 1", 3),
        ("ITAPPDEV4", "Game Development", 3),
        ("ITAPPDEV5", "Cloud Computing", 3),
    ],
    (4, 1): [
        ("ITGEE6", "Leadership & Management", 3),
        ("IT411", "System Administration & Maintenance", 3),
        ("ITelec4", "HCI 2", 3),
        ("IT412", "Capstone Project & Research 2", 3),
    ],
    (4, 2): [
        ("IT421", "Internship / OJT (486 hrs)", 9),
    ],
})

BSIT_NETWORK_SYSTEMS = _table({
    (1, 1): [
        ("IT101", "Introduction to Computing", 3),
        ("IT102", "Programming Fundamentals I", 3),
        ("GEC01", "Understanding the Self", 3),
        ("MATH01", "College Algebra", 3),
        ("PE01", "Physical Activity I", 2),
    ],
    (1, 2): [
        ("IT111", "Programming Fundamentals II", 3),
        ("IT112", "Computer Systems & Hardware", 3),
        ("GEC02", "Purposive Communication", 3),
        ("MATH02", "Discrete Mathematics", 3),
        ("PE02", "Physical Activity II", 2),
    ],
    (1, 3): [
        ("IT120", "Hardware Lab (Midyear)", 2),
    ],
    (2, 1): [
        ("IT201", "Networking Fundamentals I", 3),
        ("IT202", "Operating Systems I", 3),
        ("IT203", "Scripting for Admins", 3),
        ("GEC06", "Science & Tech Society", 3),
    ],
    (2, 2): [
        ("IT211", "Routing & Switching", 3),
        ("IT212", "Network Security Basics", 3),
        ("IT213", "Server Administration", 3),
    ],
    (2, 3): [
        ("IT220", "Network Lab (Midyear)", 2),
    ],
    (3, 1): [
        ("IT301", "Advanced Networking", 3),
        ("IT302", "Network Design & Architecture", 3),
        ("IT303", "Cloud Infrastructure", 3),
    ],
    (3, 2): [
        ("IT311", "Network Automation", 3),
        ("IT312", "Security Operations", 3),
        ("IT313", "Systems Integration", 3),
    ],
    (3, 3): [
        ("IT320", "Network Practicum / Immersion", 2),
    ],
    (4, 1): [
        ("IT401", "Capstone Project I (Network)", 3),
        ("IT402", "Enterprise Networking", 3),
        ("IT403", "Incident Response & Forensics", 3),
    ],
    (4, 2): [
        ("IT411", "Capstone Project II (Network)", 3),
        ("IT412", "Professional Practice & Ethics", 3),
    ],
    (4, 3): [
        ("IT420", "Practicum / OJT", 2),
    ],
})

BSCS = _table({
    (1, 1): [
        ("CS101", "Introduction to Computing", 3),
        ("CS102", "Fundamentals of Programming", 3),
        ("GEC01", "Understanding the Self", 3),
        ("GEC03", "Math in the Modern World", 3),
        ("PE01", "Physical Fitness I", 2),
    ],
    (1, 2): [
        ("CS111", "Intro to Computing Lab", 1),
        ("CS112", "Fundamentals of Programming II", 3),
        ("GEC04", "Purposive Communication", 3),
        ("GEC05", "Art Appreciation", 3),
        ("PE02", "Physical Fitness II", 2),
    ],
    (1, 3): [
        ("CS120", "Intro Web Development (Midyear)", 2),
    ],
    (2, 1): [
        ("CS201", "Discrete Structures 1", 3),
        ("CS202", "Data Structures & Algorithms", 3),
        ("CS203", "OOP 1", 3),
        ("GEC06", "Science & Tech Society", 3),
        ("PE03", "Physical Fitness III", 2),
    ],
    (2, 2): [
        ("CS211", "Discrete Structures 2", 3),
        ("CS212", "Intermediate Programming / OOP", 3),
        ("CS213", "Information Management", 3),
        ("GEC07", "Ethics", 3),
        ("PE04", "Physical Fitness IV", 2),
    ],
    (2, 3): [
        ("CS220", "Data Structures Lab (Midyear)", 2),
    ],
    (3, 1): [
        ("CS301", "Algorithms & Complexity", 3),
        ("CS302", "Computer Organization & Architecture", 3),
        ("CS303", "Software Engineering I", 3),
        ("CS304", "Database Systems", 3),
        ("CS305", "Information Assurance Basics", 3),
    ],
    (3, 2): [
        ("CS311", "Automata Theory", 3),
        ("CS312", "Software Engineering II", 3),
        ("CS313", "Artificial Intelligence", 3),
        ("CS314", "Programming Languages", 3),
        ("CS315", "Research Methods", 3),
    ],
    (3, 3): [
        ("CS330", "Domain Internship / Project (Midyear)", 2),
    ],
    (4, 1): [
        ("CS401", "Capstone I", 3),
        ("CS402", "Human-Computer Interaction", 3),
        ("CS403", "Information Assurance & Security", 3),
        ("CS404", "Emerging Technologies", 3),
    ],
    (4, 2): [
        ("CS411", "Capstone II", 3),
        ("CS412", "Professional Practice & Ethics", 3),
        ("CS413", "Advanced Topics in CS", 3),
    ],
    (4, 3): [
        ("CS420", "Practicum / OJT (Midyear)", 2),
    ],
})

BSDSA = _table({
    (1, 1): [
        ("DSA101", "Fundamentals of Programming", 3),
        ("DSA102", "Discrete Structures", 3),
        ("GEC01", "Understanding the Self", 3),
        ("GEC03", "Mathematics in the Modern World", 3),
    ],
    (1, 2): [
        ("DSA111", "Calculus for Data Science", 3),
        ("DSA112", "Intro to Statistics", 3),
        ("DSA113", "Intro to Data Science", 3),
    ],
    (2, 1): [
        ("DSA201", "Data Structures & Algorithms", 3),
        ("DSA202", "Linear Algebra for Data Science", 3),
        ("DSA203", "Statistical Inference", 3),
    ],
    (2, 2): [
        ("DSA211", "Programming for Data Science", 3),
        ("DSA212", "Data Management & Warehousing", 3),
        ("DSA213", "Data Visualization", 3),
    ],
    (3, 1): [
        ("DSA301", "Machine Learning I", 3),
        ("DSA302", "Exploratory Data Analysis", 3),
        ("DSA303", "Business Intelligence", 3),
    ],
    (3, 2): [
        ("DSA311", "Big Data Technologies", 3),
        ("DSA312", "Applied Machine Learning", 3),
        ("DSA313", "Research Methods", 3),
    ],
    (4, 1): [
        ("DSA401", "Capstone I", 3),
        ("DSA402", "Data Privacy & Ethics", 3),
        ("DSA403", "Advanced Analytics", 3),
    ],
    (4, 2): [
        ("DSA411", "Capstone II", 3),
        ("DSA412", "Deployment & MLOps", 3),
    ],
})

BSIS = _table({
    (1, 1): [
        ("IS101", "Introduction to Information Systems", 3),
        ("IS102", "Computer Programming I", 3),
        ("GEC01", "Understanding the Self", 3),
    ],
    (1, 2): [
        ("IS111", "Computer Programming II", 3),
        ("IS112", "Fundamentals of IS", 3),
        ("IS113", "Health & Wellness / GE Elective", 3),
    ],
    (2, 1): [
        ("IS201", "Data Structures & Algorithms for IS", 3),
        ("IS202", "IT Infrastructure & Networks", 3),
        ("IS203", "Organization & Management Concepts", 3),
    ],
    (2, 2): [
        ("IS211", "Systems Analysis & Design", 3),
        ("IS212", "Financial Management for IS", 3),
        ("IS213", "Service Management for BPO", 3),
    ],
    (3, 1): [
        ("IS301", "Information Management", 3),
        ("IS302", "Enterprise Architecture", 3),
        ("IS303", "Business Process Management", 3),
    ],
    (3, 2): [
        ("IS311", "Project Management for IS", 3),
        ("IS312", "Evaluation of Business Performance", 3),
        ("IS313", "Capstone Project I", 3),
    ],
    (4, 1): [
        ("IS401", "IS Strategy, Management & Acquisition", 3),
        ("IS402", "Applications Development & Emerging Tech", 3),
        ("IS403", "Capstone Project II", 3),
    ],
    (4, 2): [
        ("IS411", "Practicum / Internship (486 hrs)", 3),
    ],
})

BSMIT = _table({
    (1, 1): [
        ("MIT101", "Introduction to Multimedia Systems", 3),
        ("MIT102", "Basic Graphic Design", 3),
        ("GEC01", "Understanding the Self", 3),
    ],
    (1, 2): [
        ("MIT111", "Fundamentals of Animation", 3),
        ("MIT112", "Computer Programming for Multimedia", 3),
    ],
    (2, 1): [
        ("MIT201", "Digital Storytelling & Scripting", 3),
        ("MIT202", "Web Design & Development", 3),
    ],
    (2, 2): [
        ("MIT211", "Motion Graphics", 3),
        ("MIT212", "Interactive Media", 3),
    ],
    (3, 1): [
        ("MIT301", "Advanced Web Technologies", 3),
        ("MIT302", "3D Modeling and Rendering", 3),
    ],
    (3, 2): [
        ("MIT311", "Advanced Animation Techniques", 3),
        ("MIT312", "Mobile App Design", 3),
    ],
    (4, 1): [
        ("MIT401", "Capstone Project I", 3),
    ],
    (4, 2): [
        ("MIT411", "Capstone Project II", 3),
    ],
})

BSBLIS = _table({
    (1, 1): [
        ("LIS101", "Intro to Library Science", 3),
        ("LIS102", "Information Sources & Services", 3),
        ("GEC01", "Understanding the Self", 3),
    ],
    (1, 2): [
        ("LIS111", "Cataloging & Classification I", 3),
        ("LIS112", "Library Organization", 3),
    ],
    (1, 3): [
        ("LIS120", "Library Skills Lab (Midyear)", 2),
    ],
    (2, 1): [
        ("LIS201", "Research Methods for LIS", 3),
        ("LIS202", "Collection Development", 3),
    ],
    (2, 2): [
        ("LIS211", "ICT for Libraries", 3),
        ("LIS212", "Preservation & Conservation", 3),
    ],
    (2, 3): [
        ("LIS220", "Cataloging Lab (Midyear)", 2),
    ],
    (3, 1): [
        ("LIS301", "Management of Libraries", 3),
        ("LIS302", "Digital Libraries", 3),
    ],
    (3, 2): [
        ("LIS311", "Information Literacy Programs", 3),
        ("LIS312", "Archives & Records Management", 3),
    ],
    (3, 3): [
        ("LIS320", "Industry Immersion", 2),
    ],
    (4, 1): [
        ("LIS401", "Capstone I", 3),
    ],
    (4, 2): [
        ("LIS411", "Capstone II", 3),
    ],
    (4, 3): [
        ("LIS420", "Special Topics / Midyear", 2),
    ],
})

MASTER_IT = _table({
    (1, 1): [
        ("MIT201", "Advanced Data Structure & Algorithm Analysis", 3),
        ("MIT202", "Data Warehousing & Data Mining", 3),
        ("MIT203", "Advanced Database Systems", 3),
        ("MIT204", "Advanced Systems Design & Implementation", 3),
    ],
    (1, 2): [
        ("MIT211", "IT Project Management", 3),
        ("MIT212", "Web-based App Dev & Management", 3),
        ("MIT213", "Distributed Database System", 3),
        ("MIT214", "Security Management in IS", 3),
    ],
    (1, 3): [
        ("MIT215", "Cloud Computing", 3),
        ("MIT216", "Applied Machine Learning", 3),
    ],
    (2, 1): [
        ("MITINST1", "Climate Change & DRRM", 3),
        ("MIT301", "Capstone in IT 1", 3),
    ],
    (2, 2): [
        ("MIT302", "Capstone in IT 2", 3),
    ],
})

# Track key: (program, specialization or None)
CURRICULA = {
    (Program.BSIT, Specialization.WEB_MOBILE): BSIT_WEB_MOBILE,
    (Program.BSIT, Specialization.NETWORK_SYSTEMS): BSIT_NETWORK_SYSTEMS,
    (Program.BSCS, None): BSCS,
    (Program.BSDSA, None): BSDSA,
    (Program.BSIS, None): BSIS,
    (Program.BSMIT, None): BSMIT,
    (Program.BSBLIS, None): BSBLIS,
    (Program.MIT, None): MASTER_IT,
}


# ===========================
# LOOKUP OPERATIONS
# ===========================

def lookup_subjects(program: Optional[Program], year: int, semester: int,
                    specialization: Optional[Specialization] = None) -> Tuple[Subject, ...]:
    """
    Get the ordered subject list for one curriculum cell

    Args:
        program: Selected program
        year: Year level (1-4)
        semester: 1, 2 or 3 (midyear)
        specialization: Required to pick a BSIT track, ignored otherwise

    Returns:
        Tuple of subjects; empty for combinations the tables do not define
    """
    if program is None:
        return ()
    if program not in SPECIALIZATIONS:
        specialization = None
    table = CURRICULA.get((program, specialization))
    if table is None:
        return ()
    return table.get((year, semester), ())


def subjects_for(choice: ProgramChoice, year: int, semester: int) -> Tuple[Subject, ...]:
    return lookup_subjects(choice.program, year, semester, choice.specialization)


def is_midyear_eligible(program: Program,
                        specialization: Optional[Specialization] = None) -> bool:
    """Whether a midyear term is offered for this program track"""
    key = (program.name, specialization.name if specialization else None)
    return key in config.MIDYEAR_ELIGIBLE


def has_midyear_rows(program: Program,
                     specialization: Optional[Specialization] = None) -> bool:
    table = CURRICULA.get((program, specialization), {})
    return any(semester == MIDYEAR for _, semester in table)


def midyear_mismatches() -> List[str]:
    """
    Compare the midyear gate against the curriculum tables

    Returns:
        One message per track where the gate and the tables disagree
    """
    mismatches = []
    for program, specialization in CURRICULA:
        track = ProgramChoice(program, specialization).display_name
        eligible = is_midyear_eligible(program, specialization)
        has_rows = has_midyear_rows(program, specialization)
        if has_rows and not eligible:
            mismatches.append(f"{track}: midyear subjects defined but midyear not offered")
        elif eligible and not has_rows:
            mismatches.append(f"{track}: midyear offered but no midyear subjects defined")
    return mismatches
