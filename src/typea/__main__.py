"""Run the typea CLI.

Usage:
    python -m typea validate expression.yaml data.json
    python -m typea types
"""

from typea.cli.main import cli


def main():
    cli(prog_name="typea")


if __name__ == "__main__":
    main()
