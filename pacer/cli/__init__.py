# pacer/cli/__init__.py
# Typer CLI package; app object lives in pacer.cli.app
