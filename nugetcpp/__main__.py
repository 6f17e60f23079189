"""Allow running nugetcpp with ``python -m nugetcpp``."""

from nugetcpp.cli import main

if __name__ == "__main__":
    main()
