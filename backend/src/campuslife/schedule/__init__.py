from .difficulty import CourseDifficulty, StudyLoad, analyze_course_difficulty, calculate_total_study_load
from .ics_import import CalendarImportError, ParsedCourse, parse_icalendar

__all__ = [
    "CalendarImportError",
    "CourseDifficulty",
    "ParsedCourse",
    "StudyLoad",
    "analyze_course_difficulty",
    "calculate_total_study_load",
    "parse_icalendar",
]
