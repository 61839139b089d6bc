from course_registry.app import CourseRegistryApp
from course_registry.registry import CourseManagementSystem
from course_registry.seed import load_demo_data
from course_registry.utils.config_manager import ConfigurationManager
from course_registry.utils.logger import Logger, LogLevel
from course_registry.utils.report_generator import ReportGenerator

if __name__ == "__main__":
    config = ConfigurationManager()
    logger = Logger(
        log_level=LogLevel.from_name(config.get_setting("logging.level", "INFO")),
        to_file=config.get_setting("logging.to_file", True),
        console=False,
        log_dir=config.get_setting("logging.dir", "logs"),
    )
    system = CourseManagementSystem(logger)
    if config.get_setting("app.load_demo_data", True):
        load_demo_data(system)

    app = CourseRegistryApp(
        system,
        reports=ReportGenerator(system, config.get_setting("reports.output_dir", "reports")),
        pause_after_action=config.get_setting("app.pause_after_action", True),
        title=config.get_setting("app.title", "Course Management System"),
    )
    try:
        app.run()
    finally:
        # Release the registry on exit
        system.clear()
