"""
Text menu for the Course Registry
"""
from course_registry.models.entities import Course
from course_registry.registry import CourseManagementSystem
from course_registry.utils.report_generator import ReportGenerator


class CourseRegistryApp:
    def __init__(
        self,
        system: CourseManagementSystem,
        reports: ReportGenerator = None,
        input_func=input,
        output=print,
        pause_after_action=True,
        title="Course Management System",
    ):
        self.system = system
        self.reports = reports or ReportGenerator(system)
        self.input = input_func
        self.output = output
        self.pause_after_action = pause_after_action
        self.title = title

        self.actions = {
            "1": self.show_all_courses,
            "2": self.add_new_course,
            "3": self.remove_course,
            "4": self.show_all_teachers,
            "5": self.assign_teacher_to_course,
            "6": self.show_all_students,
            "7": self.show_students_on_course,
            "8": self.enroll_student_in_course,
            "9": self.remove_student_from_course,
            "10": self.show_course_details,
            "11": self.export_course_roster,
        }

    # ==========================================
    # MAIN LOOP
    # ==========================================
    def run(self):
        running = True
        while running:
            self.show_menu()
            try:
                choice = self.input("Choose an action: ").strip()
            except (EOFError, KeyboardInterrupt):
                choice = "0"

            if choice == "0":
                running = False
                self.output("Exiting...")
                continue

            action = self.actions.get(choice)
            if action is None:
                self.output("Invalid choice! Please try again.")
            else:
                try:
                    action()
                except (EOFError, KeyboardInterrupt):
                    running = False
                    self.output("Exiting...")
                    continue

            if self.pause_after_action:
                try:
                    self.input("\nPress Enter to continue...")
                except (EOFError, KeyboardInterrupt):
                    running = False

    def show_menu(self):
        self.output(f"=== {self.title.upper()} ===")
        self.output("1. Show all courses")
        self.output("2. Add new course")
        self.output("3. Remove course")
        self.output("4. Show all teachers")
        self.output("5. Assign teacher to course")
        self.output("6. Show all students")
        self.output("7. Show students on a course")
        self.output("8. Enroll student in course")
        self.output("9. Remove student from course")
        self.output("10. Course details")
        self.output("11. Export course roster")
        self.output("0. Exit")

    def _ask_id(self, prompt):
        """Returns the entered id, or None after reporting a non-numeric value"""
        try:
            return int(self.input(prompt))
        except ValueError:
            self.output("Error: ID must be a number!")
            return None

    # ==========================================
    # COURSES
    # ==========================================
    def show_all_courses(self):
        self.output("\n=== ALL COURSES ===")
        self.output(self.reports.courses_overview())

    def add_new_course(self):
        self.output("\n=== ADD NEW COURSE ===")
        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return

        if self.system.get_course(course_id) is not None:
            self.output("Error: a course with this ID already exists!")
            return

        name = self.input("Enter course name: ")

        self.output("Choose course type:")
        self.output("1. Online course")
        self.output("2. Offline course")
        type_choice = self.input("Your choice: ").strip()

        if type_choice == "1":
            platform = self.input("Enter platform: ")
            meeting_link = self.input("Enter meeting link: ")
            course = Course.online(course_id, name, platform, meeting_link)
        elif type_choice == "2":
            room = self.input("Enter classroom: ")
            schedule = self.input("Enter schedule: ")
            course = Course.offline(course_id, name, room, schedule)
        else:
            self.output("Invalid course type!")
            return

        self.system.add_course(course)
        self.output(f"Course '{name}' added successfully!")

    def remove_course(self):
        self.output("\n=== REMOVE COURSE ===")
        self.show_all_courses()

        course_id = self._ask_id("Enter ID of the course to remove: ")
        if course_id is None:
            return

        course = self.system.get_course(course_id)
        if course is None:
            self.output("Course with this ID not found!")
            return

        self.system.remove_course(course_id)
        self.output(f"Course '{course.name}' removed successfully!")

    def show_course_details(self):
        self.output("\n=== COURSE DETAILS ===")
        self.show_all_courses()

        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return
        self.output("\n" + self.reports.course_details(course_id))

    def export_course_roster(self):
        self.output("\n=== EXPORT COURSE ROSTER ===")
        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return
        _, message = self.reports.export_course_roster(course_id)
        self.output(message)

    # ==========================================
    # TEACHERS
    # ==========================================
    def show_all_teachers(self):
        self.output("\n=== ALL TEACHERS ===")
        self.output(self.reports.teachers_overview())

    def assign_teacher_to_course(self):
        self.output("\n=== ASSIGN TEACHER TO COURSE ===")
        self.show_all_teachers()
        teacher_id = self._ask_id("Enter teacher ID: ")
        if teacher_id is None:
            return

        self.show_all_courses()
        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return

        self.system.assign_teacher_to_course(teacher_id, course_id)
        self.output("Teacher assigned to course!")

    # ==========================================
    # STUDENTS
    # ==========================================
    def show_all_students(self):
        self.output("\n=== ALL STUDENTS ===")
        self.output(self.reports.students_overview())

    def show_students_on_course(self):
        self.output("\n=== STUDENTS ON COURSE ===")
        self.show_all_courses()

        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return
        self.output(self.system.get_course_students_info(course_id))

    def enroll_student_in_course(self):
        self.output("\n=== ENROLL STUDENT IN COURSE ===")
        self.show_all_students()
        student_id = self._ask_id("Enter student ID: ")
        if student_id is None:
            return

        self.show_all_courses()
        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return

        self.system.enroll_student_in_course(student_id, course_id)
        self.output("Student enrolled in course!")

    def remove_student_from_course(self):
        self.output("\n=== REMOVE STUDENT FROM COURSE ===")
        self.show_all_courses()
        course_id = self._ask_id("Enter course ID: ")
        if course_id is None:
            return

        self.output(self.system.get_course_students_info(course_id))
        student_id = self._ask_id("Enter ID of the student to remove: ")
        if student_id is None:
            return

        self.system.remove_student_from_course(student_id, course_id)
        self.output("Student removed from course!")
