"""
Demo data for the Course Registry
"""
from course_registry.models.entities import Course, Student, Teacher
from course_registry.registry import CourseManagementSystem

# (id, name, department)
DEMO_TEACHERS = [
    (1, "Ivan Petrov", "Computer Science"),
    (2, "Maria Sidorova", "Mathematics"),
    (3, "Alexey Kozlov", "Physics"),
]

# (id, name, email)
DEMO_STUDENTS = [
    (1, "Alexey Ivanov", "alex@email.com"),
    (2, "Elena Kozlova", "elena@email.com"),
    (3, "Petr Sidorov", "petr@email.com"),
    (4, "Olga Novikova", "olga@email.com"),
    (5, "Dmitry Volkov", "dmitry@email.com"),
]

# (teacher_id, course_id)
DEMO_ASSIGNMENTS = [(1, 1), (2, 2), (3, 3), (1, 4)]

# (student_id, course_id)
DEMO_ENROLLMENTS = [(1, 1), (2, 1), (3, 2), (4, 2), (5, 3), (1, 4), (5, 4)]


def load_demo_data(system: CourseManagementSystem):
    """Populates the registry with sample teachers, students and courses."""
    for teacher_id, name, department in DEMO_TEACHERS:
        system.add_teacher(Teacher(teacher_id, name, department))
    for student_id, name, email in DEMO_STUDENTS:
        system.add_student(Student(student_id, name, email))

    system.add_course(Course.online(1, "Programming in C#", "Microsoft Teams", "teams.com/csharp"))
    system.add_course(Course.offline(2, "Higher Mathematics", "Room 301", "Mon/Wed 10:00-11:30"))
    system.add_course(Course.online(3, "Physics for Beginners", "Zoom", "zoom.com/physics"))
    system.add_course(Course.offline(4, "Algorithms and Data Structures", "Room 205", "Tue/Thu 14:00-15:30"))

    for teacher_id, course_id in DEMO_ASSIGNMENTS:
        system.assign_teacher_to_course(teacher_id, course_id)
    for student_id, course_id in DEMO_ENROLLMENTS:
        system.enroll_student_in_course(student_id, course_id)
