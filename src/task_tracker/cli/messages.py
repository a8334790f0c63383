"""Menu text catalog.

Every user-visible string of the menu lives here, keyed by message id.
Templates use str.format placeholders.
"""

from typing import Any

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "menu_title": "Task menu:",
        "menu_add": "Add task",
        "menu_list": "List tasks",
        "menu_edit": "Edit task",
        "menu_delete": "Delete task",
        "menu_complete": "Mark task as complete",
        "menu_exit": "Exit",
        "choose_option": "Choose an option: ",
        "invalid_choice": "Invalid choice. Please try again.",
        "prompt_title": "Enter task title: ",
        "prompt_description": "Enter task description: ",
        "prompt_new_title": "Enter new task title: ",
        "prompt_new_description": "Enter new task description: ",
        "prompt_edit_id": "Enter ID of the task to edit: ",
        "prompt_delete_id": "Enter ID of the task to delete: ",
        "prompt_complete_id": "Enter ID of the task to mark as complete: ",
        "invalid_id": "Invalid ID: '{raw}' is not a number.",
        "task_added": "Task '{title}' added successfully!",
        "task_list_header": "Task list:",
        "no_tasks": "No tasks to display.",
        "task_updated": "Task #{id} updated successfully!",
        "task_deleted": "Task #{id} deleted successfully!",
        "task_completed": "Task #{id} marked as complete!",
        "task_not_found": "Task with ID #{id} not found.",
        "save_failed": "Could not save tasks: {error}",
        "goodbye": "Goodbye!",
    },
    "uk": {
        "menu_title": "Меню завдань:",
        "menu_add": "Додати задачу",
        "menu_list": "Переглянути завдання",
        "menu_edit": "Редагувати завдання",
        "menu_delete": "Видалити завдання",
        "menu_complete": "Відзначити завдання як виконане",
        "menu_exit": "Вийти",
        "choose_option": "Виберіть опцію: ",
        "invalid_choice": "Неправильний вибір. Спробуйте знову.",
        "prompt_title": "Введіть назву задачі: ",
        "prompt_description": "Введіть опис задачі: ",
        "prompt_new_title": "Введіть нову назву задачі: ",
        "prompt_new_description": "Введіть новий опис завдання: ",
        "prompt_edit_id": "Введіть ID задачі для редагування: ",
        "prompt_delete_id": "Введіть ID завдання для видалення: ",
        "prompt_complete_id": "Введіть ID завдання для позначки як виконаного: ",
        "invalid_id": "Неправильний ID: '{raw}' не є числом.",
        "task_added": "Задача '{title}' успішно додана!",
        "task_list_header": "Список завдань:",
        "no_tasks": "Немає завдань для відображення.",
        "task_updated": "Задача #{id} успішно оновлена!",
        "task_deleted": "Задача #{id} успішно видалена!",
        "task_completed": "Задача #{id} відзначена як виконана!",
        "task_not_found": "Задача з ID #{id} не знайдена.",
        "save_failed": "Не вдалося зберегти завдання: {error}",
        "goodbye": "До побачення!",
    },
}


class Messages:
    """Looks up and formats menu text for one language."""

    def __init__(self, language: str = "en") -> None:
        if language not in MESSAGES:
            raise ValueError(
                f"Unsupported language '{language}'. "
                f"Available: {', '.join(sorted(MESSAGES))}"
            )
        self.language = language
        self._catalog = MESSAGES[language]

    def get(self, key: str, **kwargs: Any) -> str:
        return self._catalog[key].format(**kwargs)
