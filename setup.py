# setup.py
from setuptools import setup, find_packages

setup(
    name="dead-link-hunter",
    version="0.1.0",
    description="Concurrent crawler that reports dead links grouped by referring page",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"dead_link_hunter.report": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "Jinja2>=3.1",
        "playwright>=1.40",
        "rich>=13.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "dead-link-hunter=dead_link_hunter.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
