"""
Report Generator for the Course Registry
Text overviews for the menu and CSV roster exports
"""
import csv
import os
from datetime import datetime

from course_registry.models.entities import NOT_ASSIGNED
from course_registry.registry import CourseManagementSystem

SEPARATOR = "---"


class ReportGenerator:
    def __init__(self, system: CourseManagementSystem, output_dir="reports"):
        self.system = system
        self.output_dir = output_dir
        os.makedirs(self.output_dir, exist_ok=True)

    def courses_overview(self):
        courses = self.system.get_all_courses()
        if not courses:
            return "No courses found."

        lines = []
        for course in courses:
            teacher = self.system.resolve_teacher(course)
            lines += [
                f"ID: {course.id}",
                f"Name: {course.name}",
                f"Teacher: {teacher.name if teacher else NOT_ASSIGNED}",
                f"Students: {len(self.system.resolve_students(course))}",
                SEPARATOR,
            ]
        return "\n".join(lines)

    def teachers_overview(self):
        teachers = self.system.get_all_teachers()
        if not teachers:
            return "No teachers found."

        lines = []
        for teacher in teachers:
            lines += [
                f"ID: {teacher.id}",
                f"Name: {teacher.name}",
                f"Department: {teacher.department}",
                f"Courses: {len(self.system.get_courses_by_teacher(teacher.id))}",
                SEPARATOR,
            ]
        return "\n".join(lines)

    def students_overview(self):
        students = self.system.get_all_students()
        if not students:
            return "No students found."

        lines = []
        for student in students:
            lines += [
                f"ID: {student.id}",
                f"Name: {student.name}",
                f"Email: {student.email}",
                SEPARATOR,
            ]
        return "\n".join(lines)

    def course_details(self, course_id):
        """Course summary followed by its student list"""
        info = self.system.get_course_info(course_id)
        if info is None:
            return "Course not found!"
        return f"{info}\n\n{self.system.get_course_students_info(course_id)}"

    def export_course_roster(self, course_id):
        """Writes the course roster to a CSV file"""
        course = self.system.get_course(course_id)
        if course is None:
            return None, f"Course {course_id} not found."

        today = datetime.now().strftime("%Y-%m-%d")
        filename = f"roster_course_{course_id}_{today}.csv"
        filepath = os.path.join(self.output_dir, filename)

        try:
            with open(filepath, "w", newline="") as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(["ID", "Name", "Email"])
                writer.writerows(
                    [s.id, s.name, s.email]
                    for s in self.system.resolve_students(course)
                )
            return filepath, f"Report saved: {filepath}"
        except OSError as e:
            return None, str(e)
