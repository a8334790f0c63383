"""Tests for the interactive menu application."""

import json
from unittest.mock import MagicMock, patch

import pytest

from task_tracker.cli import app as app_module
from task_tracker.cli.app import TaskTrackerApp, main
from task_tracker.cli.messages import MESSAGES, Messages
from task_tracker.config import TrackerSettings, reload_settings, set_settings
from task_tracker.tasks import PersistenceError, Task, TaskStore


@pytest.fixture
def settings(tmp_path):
    return TrackerSettings(tasks_file=tmp_path / "tasks.json", language="en")


@pytest.fixture
def make_app(store, settings, console, scripted_prompt):
    """Build an app over the temp store with scripted answers."""

    def _make(answers, store_override=None, app_settings=None):
        return TaskTrackerApp(
            store_override if store_override is not None else store,
            app_settings or settings,
            console=console,
            prompt=scripted_prompt(answers),
        )

    return _make


def _output(app: TaskTrackerApp) -> str:
    return app.console.file.getvalue()


class TestMenuDispatch:
    """Each menu choice calls the matching store operation."""

    @pytest.fixture
    def mock_store(self):
        store = MagicMock(spec=TaskStore)
        store.add.return_value = Task(id=1, title="Buy milk", description="2 liters")
        store.list_tasks.return_value = []
        store.update.return_value = True
        store.delete.return_value = True
        store.mark_complete.return_value = True
        return store

    def test_add(self, make_app, mock_store):
        app = make_app(["Buy milk", " 2 liters "], store_override=mock_store)
        app.handle_choice("1")
        mock_store.add.assert_called_once_with("Buy milk", "2 liters")
        assert "Task 'Buy milk' added successfully!" in _output(app)

    def test_list(self, make_app, mock_store):
        mock_store.list_tasks.return_value = [
            Task(id=1, title="Buy milk", description="2 liters", completed=True),
            Task(id=2, title="Call Alice", description="re: contract"),
        ]
        app = make_app([], store_override=mock_store)
        app.handle_choice("2")

        mock_store.list_tasks.assert_called_once_with()
        output = _output(app)
        assert "[X] 1: Buy milk - 2 liters" in output
        assert "[ ] 2: Call Alice - re: contract" in output
        assert output.index("[X] 1") < output.index("[ ] 2")

    def test_list_empty(self, make_app, mock_store):
        app = make_app([], store_override=mock_store)
        app.handle_choice("2")
        assert "No tasks to display." in _output(app)

    def test_edit(self, make_app, mock_store):
        app = make_app(["3", "New title", "New description"], store_override=mock_store)
        app.handle_choice("3")
        mock_store.update.assert_called_once_with(3, "New title", "New description")
        assert "Task #3 updated successfully!" in _output(app)

    def test_delete(self, make_app, mock_store):
        app = make_app(["4"], store_override=mock_store)
        app.handle_choice("4")
        mock_store.delete.assert_called_once_with(4)
        assert "Task #4 deleted successfully!" in _output(app)

    def test_mark_complete(self, make_app, mock_store):
        app = make_app(["5"], store_override=mock_store)
        app.handle_choice("5")
        mock_store.mark_complete.assert_called_once_with(5)
        assert "Task #5 marked as complete!" in _output(app)

    def test_exit(self, make_app, mock_store):
        app = make_app([], store_override=mock_store)
        app._running = True
        app.handle_choice("6")
        assert not app.is_running
        assert "Goodbye!" in _output(app)

    @pytest.mark.parametrize(
        "choice,method",
        [("3", "update"), ("4", "delete"), ("5", "mark_complete")],
    )
    def test_not_found_reported(self, make_app, mock_store, choice, method):
        getattr(mock_store, method).return_value = False
        app = make_app(["99", "x", "y"], store_override=mock_store)
        app.handle_choice(choice)
        assert "Task with ID #99 not found." in _output(app)

    @pytest.mark.parametrize("choice", ["3", "4", "5"])
    def test_non_numeric_id_skips_store(self, make_app, mock_store, choice):
        app = make_app(["abc"], store_override=mock_store)
        app.handle_choice(choice)

        mock_store.update.assert_not_called()
        mock_store.delete.assert_not_called()
        mock_store.mark_complete.assert_not_called()
        assert "Invalid ID: 'abc' is not a number." in _output(app)

    @pytest.mark.parametrize("choice", ["0", "7", "hello", ""])
    def test_unknown_choice(self, make_app, mock_store, choice):
        app = make_app([], store_override=mock_store)
        app.handle_choice(choice)
        assert "Invalid choice. Please try again." in _output(app)
        assert mock_store.method_calls == []

    def test_write_failure_reported(self, make_app, mock_store, tmp_path):
        mock_store.add.side_effect = PersistenceError(
            tmp_path / "tasks.json", PermissionError("Permission denied")
        )
        app = make_app(["a", "b"], store_override=mock_store)
        app.handle_choice("1")
        assert "Could not save tasks: Permission denied" in _output(app)


class TestRunLoop:
    """Tests driving run() end to end with a real store."""

    def test_session(self, make_app, store, tasks_path):
        app = make_app(
            [
                "1", "Buy milk", "2 liters",
                "1", "Call Alice", "re: contract",
                "5", "1",
                "2",
                "6",
            ]
        )
        app.run()

        output = _output(app)
        assert "[X] 1: Buy milk - 2 liters" in output
        assert "[ ] 2: Call Alice - re: contract" in output
        assert output.rstrip().endswith("Goodbye!")
        assert [r["id"] for r in json.loads(tasks_path.read_text())] == [1, 2]
        assert not app.is_running

    def test_menu_lists_six_choices(self, make_app):
        app = make_app(["6"])
        app.run()
        output = _output(app)
        assert "Task menu:" in output
        for line in ("1.", "Add task", "6.", "Exit", "Mark task as complete"):
            assert line in output

    def test_recovers_from_bad_input(self, make_app, store):
        app = make_app(["x", "4", "nope", "1", "a", "b", "6"])
        app.run()
        output = _output(app)
        assert "Invalid choice. Please try again." in output
        assert "Invalid ID: 'nope' is not a number." in output
        assert len(store) == 1

    def test_end_of_input_exits(self, make_app):
        app = make_app(["1", "only a title"])
        app.run()
        assert "Goodbye!" in _output(app)
        assert not app.is_running

    def test_ctrl_c_exits(self, store, settings, console):
        prompt = MagicMock(side_effect=KeyboardInterrupt)
        app = TaskTrackerApp(store, settings, console=console, prompt=prompt)
        app.run()
        assert "Goodbye!" in _output(app)

    def test_write_failure_keeps_loop_running(self, make_app, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        broken = TaskStore(blocker / "tasks.json")
        app = make_app(["1", "a", "b", "2", "6"], store_override=broken)
        app.run()
        output = _output(app)
        assert "Could not save tasks:" in output
        assert "Goodbye!" in output

    def test_ukrainian_menu(self, make_app, tmp_path):
        uk = TrackerSettings(tasks_file=tmp_path / "tasks.json", language="uk")
        app = make_app(["2", "6"], app_settings=uk)
        app.run()
        output = _output(app)
        assert "Меню завдань:" in output
        assert "Немає завдань для відображення." in output
        assert "До побачення!" in output

    def test_prompts_use_catalog_text(self, make_app, scripted_prompt, store, settings, console):
        prompt = scripted_prompt(["1", "t", "d", "6"])
        app = TaskTrackerApp(store, settings, console=console, prompt=prompt)
        app.run()
        assert prompt.prompts[:3] == [
            "Choose an option: ",
            "Enter task title: ",
            "Enter task description: ",
        ]


class TestMessages:
    def test_catalogs_have_same_keys(self):
        assert set(MESSAGES["en"]) == set(MESSAGES["uk"])

    def test_format(self):
        assert Messages("uk").get("task_deleted", id=3) == "Задача #3 успішно видалена!"

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            Messages("fr")


class TestMain:
    def test_main_runs_app_on_configured_file(self, mock_context):
        with patch.object(app_module, "configure_logging") as configure, patch.object(
            app_module.TaskTrackerApp, "run", autospec=True
        ) as run:
            main()

        configure.assert_called_once_with(mock_context.settings)

        app = run.call_args.args[0]
        assert app.store.path == mock_context.tasks_path
        assert app.settings is mock_context.settings

    def test_main_rejects_directory_tasks_file(self, tmp_path):
        set_settings(TrackerSettings(tasks_file=tmp_path))
        try:
            with patch.object(app_module, "configure_logging"), pytest.raises(SystemExit) as exc_info:
                main()
        finally:
            reload_settings()
        assert exc_info.value.code == 1
