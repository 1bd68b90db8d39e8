#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "Python wrapper for the TrID file identifier"

setup(
    name="tridinspect",
    version="1.0.0",
    description="Python wrapper for the TrID file identifier",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["tridinspect", "tridinspect.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.7.0",
        "click>=8.1.7",
        "psutil>=5.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tridinspect=tridinspect.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
