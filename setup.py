from setuptools import setup, find_packages

setup(
    name="pacer",
    version="0.1.0",
    description="Workout playback timer with pause-aware segment scheduling and BPM-matched playlists",
    packages=find_packages(include=["pacer", "pacer.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "pacer=pacer.cli.app:main",
        ],
    },
    python_requires=">=3.10",
)
