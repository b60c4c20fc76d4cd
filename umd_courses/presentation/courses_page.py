"""
Render the courses page.

The client hands over course records exactly as the API sent them; turning
list fields into display strings happens here and nowhere else.
"""
import copy
import html
from typing import Any, Dict, Iterable, List, Optional

PAGE_TITLE = "UMD Courses"
PAGE_HEADING = "University of Maryland Courses"
STYLESHEET_URL = "/static/css/umd-courses.css"

# Fields shown as comma separated text on the course cards.
FLATTENED_FIELDS = ("grading_method", "gen_ed", "core", "sections")


def _scalar_to_string(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def array_to_string(value: Any) -> str:
    """Join a (possibly nested) list into "a, b, c"; empty and "0" items are dropped."""
    if isinstance(value, dict):
        value = list(value.values())
    if not isinstance(value, list):
        return _scalar_to_string(value)

    strings: List[str] = []
    for item in value:
        if isinstance(item, (list, dict)):
            strings.append(array_to_string(item))
        elif item is None or isinstance(item, (str, int, float, bool)):
            strings.append(_scalar_to_string(item))
        else:
            strings.append("Complex Value")

    return ", ".join(s for s in strings if s and s != "0")


def process_courses(courses: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    processed = []
    for course in courses:
        processed_course = copy.copy(course)
        for field in FLATTENED_FIELDS:
            if isinstance(course.get(field), list):
                processed_course[field] = array_to_string(course[field])
        processed.append(processed_course)
    return processed


def _e(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def _render_course(course: Dict[str, Any]) -> str:
    rows = []
    for label, key in (
        ("Department", "department"),
        ("Credits", "credits"),
        ("Grading", "grading_method"),
        ("Gen Ed", "gen_ed"),
        ("Core", "core"),
        ("Sections", "sections"),
    ):
        value = course.get(key)
        if value in (None, "", []):
            continue
        rows.append(f'<dt>{label}</dt><dd class="course-{key.replace("_", "-")}">{_e(value)}</dd>')

    description = course.get("description")
    return (
        '<li class="course-item">'
        '<div class="course-header">'
        f'<h3 class="course-title">{_e(course.get("name"))}</h3>'
        f'<span class="course-id-badge">{_e(course.get("course_id"))}</span>'
        '</div>'
        '<hr class="course-divider">'
        f'<dl class="course-details">{"".join(rows)}</dl>'
        + (f'<p class="course-description">{_e(description)}</p>' if description else "")
        + '</li>'
    )


def render_courses_page(
    courses: List[Dict[str, Any]],
    mock_mode: bool = False,
    notices: Optional[List[str]] = None,
) -> str:
    """Build the full HTML document for /courses from already processed courses."""
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1">',
        f"<title>{PAGE_TITLE}</title>",
        f'<link rel="stylesheet" href="{STYLESHEET_URL}">',
        "</head>",
        "<body>",
        '<div class="umd-courses-page">',
        '<header class="courses-header"><div class="header-content">',
        f"<h2>{PAGE_HEADING}</h2>",
        "</div></header>",
    ]

    for notice in notices or []:
        parts.append(f'<div class="messages messages--error">{_e(notice)}</div>')
    if mock_mode:
        parts.append('<div class="messages messages--warning mock-mode-banner">Showing mock course data.</div>')

    if courses:
        parts.append('<ul class="courses-list">')
        parts.extend(_render_course(course) for course in courses)
        parts.append("</ul>")
    else:
        parts.append('<p class="no-courses">No courses available at this time.</p>')

    parts.extend(["</div>", "</body>", "</html>"])
    return "\n".join(parts)
