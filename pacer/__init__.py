# pacer/__init__.py
# Workout playback timer: segment scheduling, pause accounting & playlist tooling

__version__ = "0.1.0"
