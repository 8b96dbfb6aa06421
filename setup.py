"""setuptools setup for TimerDeck.

Install for development:
    pip install -e ".[test]"
"""

from setuptools import setup, find_packages

setup(
    name="TimerDeck",
    version="0.1.0",
    packages=find_packages(include=["timerdeck", "timerdeck.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["timerdeck=timerdeck.__main__:main"],
    },
)
