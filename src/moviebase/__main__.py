"""Entry point for 'python -m moviebase' command."""

from moviebase.cli import main

if __name__ == "__main__":
    main()
