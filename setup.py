#!/usr/bin/env python3
"""Setup script for pdfpress CLI"""

from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="pdfpress",
    version="1.0.0",
    author="",
    description="A CLI tool that compresses PDF files with Ghostscript quality presets",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=["pdfpress", "gs_compressor"],
    install_requires=[],
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "pdfpress=pdfpress:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
