import logging

from habit_logger.errors import EARLY_EXIT
from habit_logger.schemas import ReportType
from habit_logger.service import HabitLogger

logger = logging.getLogger(__name__)

QUIT = "Quit"
RETURN_TO_MAIN = "Return to main menu"
CREATE_REPORT = "Create Habit Report"

REPORT_CHOICES = {
    "From a specific date to Today": ReportType.DATE_TO_TODAY,
    "From a specific date to another specific date": ReportType.DATE_TO_DATE,
    "View total of a given month": ReportType.TOTAL_FOR_MONTH,
    "Year to date": ReportType.YEAR_TO_DATE,
    "View total for a specific year": ReportType.TOTAL_FOR_YEAR,
    "View all records": ReportType.TOTAL,
}


def _main_actions(service: HabitLogger) -> dict:
    return {
        "Add Habit": service.add_habit,
        "Delete Habit": service.delete_habit,
        "Update Habit": service.update_habit,
        CREATE_REPORT: lambda: reports_menu(service),
        "Add Record": service.add_record,
        "Delete Record": service.delete_record,
        "View Records": service.view_records,
        "Update Record": service.update_record,
    }


def reports_menu(service: HabitLogger):
    habit_id = service.ask_habit_id()
    if habit_id is EARLY_EXIT or habit_id is None:
        return None

    choice = service.prompter.choose("Choose from the following options:", [*REPORT_CHOICES, RETURN_TO_MAIN])
    if choice is EARLY_EXIT or choice == RETURN_TO_MAIN:
        return None
    return service.generate_report(REPORT_CHOICES[choice], habit_id)


def main_menu(service: HabitLogger) -> None:
    actions = _main_actions(service)
    options = [*actions, QUIT]

    while True:
        choice = service.prompter.choose("What would you like to do?", options)
        if choice is EARLY_EXIT or choice == QUIT:
            logger.info("Leaving main menu")
            service.renderer.message("Goodbye!")
            return
        logger.debug("Main menu choice: %s", choice)
        actions[choice]()
        service.renderer.message("")
