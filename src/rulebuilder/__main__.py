"""Entry point for 'python -m rulebuilder' command."""

from rulebuilder.cli import main

if __name__ == "__main__":
    main()
