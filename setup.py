"""Package setup for pathment_scanner."""

from setuptools import setup, find_packages

setup(
    name="pathment-scanner",
    version="1.0.0",
    description="Detect and classify URLs, e-mail addresses, file paths and "
                "host names in free-form text",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pathment-scan=pathment_scanner.cli:run",
        ],
    },
)
