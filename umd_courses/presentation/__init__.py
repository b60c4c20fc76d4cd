from .courses_page import array_to_string, process_courses, render_courses_page

__all__ = ["array_to_string", "process_courses", "render_courses_page"]
