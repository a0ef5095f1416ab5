"""Allow ``python -m accel_hook <command>``."""

from accel_hook.cli import main

if __name__ == "__main__":
    main()
