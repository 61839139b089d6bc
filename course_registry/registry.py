"""
Registry for the Course Registry
Owns courses, teachers and students and every operation that links them
"""
from typing import List, Optional

from course_registry.models.entities import Course, Student, Teacher
from course_registry.utils.logger import Logger


class CourseManagementSystem:
    """
    In-memory registry of courses, teachers and students.

    Collections keep insertion order. Ids are not checked for uniqueness on
    add; every lookup returns the first match. Operations whose lookups miss
    leave the state unchanged and never raise.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or Logger(to_file=False, console=False)
        self._courses: List[Course] = []
        self._teachers: List[Teacher] = []
        self._students: List[Student] = []

    def clear(self):
        self._courses.clear()
        self._teachers.clear()
        self._students.clear()
        self.logger.log_info("Registry cleared")

    # --- COURSE MANAGEMENT ---
    def add_course(self, course: Course):
        self._courses.append(course)
        self.logger.log_info(f"Added {course.kind} course {course}")

    def remove_course(self, course_id: int):
        for i, course in enumerate(self._courses):
            if course.id == course_id:
                del self._courses[i]
                self.logger.log_info(f"Removed course {course}")
                return
        self.logger.log_warning(f"Cannot remove course {course_id}: not found")

    def get_course(self, course_id: int) -> Optional[Course]:
        return next((c for c in self._courses if c.id == course_id), None)

    def get_all_courses(self) -> List[Course]:
        return list(self._courses)

    # --- TEACHER MANAGEMENT ---
    def add_teacher(self, teacher: Teacher):
        self._teachers.append(teacher)
        self.logger.log_info(f"Added teacher {teacher.id}: {teacher}")

    def get_teacher(self, teacher_id: int) -> Optional[Teacher]:
        return next((t for t in self._teachers if t.id == teacher_id), None)

    def get_all_teachers(self) -> List[Teacher]:
        return list(self._teachers)

    # --- STUDENT MANAGEMENT ---
    def add_student(self, student: Student):
        self._students.append(student)
        self.logger.log_info(f"Added student {student.id}: {student}")

    def get_student(self, student_id: int) -> Optional[Student]:
        return next((s for s in self._students if s.id == student_id), None)

    def get_all_students(self) -> List[Student]:
        return list(self._students)

    # --- ASSIGNMENTS ---
    def assign_teacher_to_course(self, teacher_id: int, course_id: int):
        teacher = self.get_teacher(teacher_id)
        course = self.get_course(course_id)

        if teacher is None or course is None:
            self.logger.log_warning(
                f"Cannot assign teacher {teacher_id} to course {course_id}: "
                f"{self._missing(teacher, course, 'teacher')} not found"
            )
            return

        course.teacher_id = teacher.id
        self.logger.log_info(f"Assigned {teacher.name} to course {course}")

    def get_courses_by_teacher(self, teacher_id: int) -> List[Course]:
        return [c for c in self._courses if c.teacher_id == teacher_id]

    def get_course_teacher(self, course_id: int) -> Optional[Teacher]:
        """Resolves the teacher assigned to a course, or None"""
        course = self.get_course(course_id)
        if course is None:
            return None
        return self.resolve_teacher(course)

    def resolve_teacher(self, course: Course) -> Optional[Teacher]:
        """Teacher referenced by this course object, or None when unassigned or unknown"""
        if course.teacher_id is None:
            return None
        return self.get_teacher(course.teacher_id)

    # --- ENROLLMENT ---
    def enroll_student_in_course(self, student_id: int, course_id: int):
        student = self.get_student(student_id)
        course = self.get_course(course_id)

        if student is None or course is None:
            self.logger.log_warning(
                f"Cannot enroll student {student_id} in course {course_id}: "
                f"{self._missing(student, course, 'student')} not found"
            )
            return

        course.add_student(student)
        self.logger.log_info(f"Enrolled {student.name} in course {course}")

    def remove_student_from_course(self, student_id: int, course_id: int):
        student = self.get_student(student_id)
        course = self.get_course(course_id)

        if student is None or course is None:
            self.logger.log_warning(
                f"Cannot remove student {student_id} from course {course_id}: "
                f"{self._missing(student, course, 'student')} not found"
            )
            return

        course.remove_student(student)
        self.logger.log_info(f"Removed {student.name} from course {course}")

    def get_students_on_course(self, course_id: int) -> List[Student]:
        course = self.get_course(course_id)
        if course is None:
            return []
        return self.resolve_students(course)

    def resolve_students(self, course: Course) -> List[Student]:
        """Roster of this course object as Student records; ids that no longer resolve are skipped"""
        students = []
        for student_id in course.student_ids:
            student = self.get_student(student_id)
            if student is not None:
                students.append(student)
        return students

    # --- REPORTING ---
    def get_course_info(self, course_id: int) -> Optional[str]:
        course = self.get_course(course_id)
        if course is None:
            return None
        return course.render_info(
            self.resolve_teacher(course), student_count=len(self.resolve_students(course))
        )

    def get_course_students_info(self, course_id: int) -> str:
        course = self.get_course(course_id)
        if course is None:
            return "Course not found!"

        info = f"Students on course '{course.name}':\n"
        students = self.resolve_students(course)
        if not students:
            info += "No students enrolled\n"
        else:
            for student in students:
                info += f"- {student.name} (ID: {student.id}, Email: {student.email})\n"
        return info

    @staticmethod
    def _missing(entity, course, label: str) -> str:
        if entity is None and course is None:
            return f"{label} and course"
        return label if entity is None else "course"
