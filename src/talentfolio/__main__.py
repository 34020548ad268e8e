"""Entry point for 'python -m talentfolio'."""

from talentfolio.cli import main

if __name__ == "__main__":
    main()
