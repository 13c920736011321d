# pacer/cli/commands/__init__.py
# Command modules register themselves on the root app at import time
