# pacer/core/__init__.py
# Pure core layer (no I/O): timer, segment model, workout & playlist logic
