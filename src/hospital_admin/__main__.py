"""Entry point for running hospital_admin as a module.

This allows the package to be executed as:
    python -m hospital_admin
"""

from hospital_admin.cli.main import cli

if __name__ == "__main__":
    cli()
