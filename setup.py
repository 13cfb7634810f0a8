"""
Setup script for drafttree.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="drafttree",
    version="1.0.0",
    description="Convert Draft.js raw content into ProseMirror/Tiptap document trees",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="drafttree Contributors",
    author_email="",
    packages=find_packages(include=["drafttree", "drafttree.*"]),
    install_requires=[
        "click>=8.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "api": [
            "fastapi>=0.110.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "fastapi>=0.110.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "drafttree=drafttree.cli:cli",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Markup",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="draftjs draft-js prosemirror tiptap rich-text converter tree",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
