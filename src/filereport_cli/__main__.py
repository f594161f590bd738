"""Entry point for running the report generator as a module: python -m filereport_cli"""

from filereport_cli.main import run

run()
