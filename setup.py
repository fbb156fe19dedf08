"""Setup script for the log statistics application."""

from setuptools import setup, find_packages

setup(
    name="logstats",
    version="0.1.0",
    description="Concurrent statistics over structured application log files",
    packages=find_packages(include=["logstats", "logstats.*"]),
    install_requires=[
        "pydantic>=2.5.2",
        "pydantic-settings>=2.1.0",
        "rich>=13.0.0",
        "structlog>=23.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.4",
            "pytest-cov>=4.1.0",
            "black>=24.1.1",
            "isort>=5.13.2",
            "mypy>=1.8.0",
            "pylint>=3.0.3",
        ],
    },
    entry_points={
        "console_scripts": [
            "logstats=logstats.cli:main",
        ],
    },
    python_requires=">=3.9",
)
