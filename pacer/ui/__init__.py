# pacer/ui/__init__.py
# Rich rendering helpers for playlists, workouts & timer status
