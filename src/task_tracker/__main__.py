"""Allow ``python -m task_tracker``."""

from task_tracker.cli.app import main

if __name__ == "__main__":
    main()
