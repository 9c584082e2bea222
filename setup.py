#!/usr/bin/env python3
"""
Setup script for euljitype.

Installs the scoring core and its PyQt6 adapters from the src/ layout.
"""

from __future__ import annotations

from setuptools import setup, find_packages
from pathlib import Path

# Read project metadata
project_root = Path(__file__).parent
src_dir = project_root / "src"

# Read README
readme_file = project_root / "README.md"
long_description = ""
if readme_file.exists():
    with open(readme_file, "r", encoding="utf-8") as f:
        long_description = f.read()

# Read version from the package
version = "1.0.0"
init_file = src_dir / "euljitype" / "__init__.py"
if init_file.exists():
    with open(init_file, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip().startswith("__version__ = "):
                version = line.split("=")[1].strip().strip('"\'')
                break

setup(
    name="euljitype",
    version=version,
    description="Korean and English typing practice with stroke-based speed statistics",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="User",
    author_email="user@example.com",
    url="https://github.com/user/euljitype",
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: Korean",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="typing practice korean hangul wpm cpm",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "PyQt6",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-qt>=4.0",
        ],
    },
    zip_safe=False,
)
