"""Setup script for the drainwatch package."""

from setuptools import find_packages, setup

setup(
    name="drainwatch",
    version="0.1.0",
    description="Battery drain triage for handheld devices across school sites",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pymysql",
        "pyyaml",
        "python-dotenv",
        "aiohttp",
        "rich",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-asyncio",
            "black",
            "isort",
            "mypy",
        ],
    },
    entry_points={
        "console_scripts": [
            "drainwatch-report=drainwatch.display:main",
            "drainwatch-export=drainwatch.export:main",
        ],
    },
)
