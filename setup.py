#!/usr/bin/env python
"""The setup.py file."""

import os
import sys

from setuptools import find_packages, setup
from setuptools.command.install import install

VERSION = "0.1.0"

URL = "https://github.com/hassrest/hassrest"

with open("README.md") as fh:
    LONG_DESCRIPTION = fh.read()

with open("requirements.txt") as fh:
    INSTALL_REQUIRES = [val.strip() for val in fh if val.strip()]


class VerifyVersionCommand(install):
    """Custom command to verify that the git tag matches our VERSION."""

    def run(self):
        tag = os.getenv("CIRCLE_TAG")
        if tag != VERSION:
            info = f"The git tag: '{tag}' does not match the package ver: '{VERSION}'"
            sys.exit(info)


setup(
    name="hassrest",
    description="An async client for the Home Assistant REST API.",
    keywords=["home assistant", "hass", "rest api", "asyncio"],
    url=URL,
    download_url=f"{URL}/archive/{VERSION}.tar.gz",
    install_requires=INSTALL_REQUIRES,
    extras_require={
        "cli": ["asyncclick>=8.1.7", "aiofiles>=23.2"],
        "tests": [
            "asyncclick>=8.1.7",
            "aiofiles>=23.2",
            "aioresponses>=0.7.6",
            "pytest>=8.0",
            "pytest-asyncio>=0.24",
        ],
    },
    entry_points={
        "console_scripts": ["hass-client=hassrest_cli.client:main"],
    },
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests", "docs"]),
    version=VERSION,
    license="Apache 2",
    python_requires=">=3.12",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.12",
        "Topic :: Home Automation",
    ],
    cmdclass={
        "verify": VerifyVersionCommand,
    },
)
