#!/usr/bin/env python3
"""Setup script for HN Comments."""
from setuptools import find_packages, setup

# Read version from package
with open("src/hn_comments/__init__.py", "r") as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="hn-comments",
    version=version,
    description="Republish the Hacker News RSS feed with links to the comment pages",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="HN Comments Team",
    author_email="example@example.com",
    url="https://github.com/example/hn-comments",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.28.0",
        "feedparser>=6.0.0",
        "python-dateutil>=2.8.2",
        "python-dotenv>=1.0.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hn-comments=hn_comments.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: News/Diary",
    ],
)
