# pacer/config/__init__.py
# Settings layer for the pacer CLI
