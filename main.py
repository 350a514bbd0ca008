"""Main entry point for the Sector Models command-line interface."""

from sector_models.cli import main


if __name__ == "__main__":
    main()
