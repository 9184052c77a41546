"""Allow ``python -m force``."""

from force.cli import main

if __name__ == "__main__":
    main()
