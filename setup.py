#!/usr/bin/env python
# pylint: disable=invalid-name

"""Setup file for PyPlatinumRTD"""

import os
import re

from setuptools import setup, find_packages

HERE = os.path.abspath(os.path.dirname(__file__))

###################################################################

NAME = "PyPlatinumRTD"
PACKAGES = find_packages(where=HERE, exclude=["tests", "tests.*"])
META_PATH = os.path.join("PyPlatinumRTD", "__init__.py")
KEYWORDS = ["RTD", "PT100", "PT1000", "Callendar-Van Dusen", "temperature", "sensors"]
CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Scientific/Engineering",
    "Topic :: Scientific/Engineering :: Physics",
]
with open(os.path.join(HERE, 'requirements.txt')) as file_:
    INSTALL_REQUIRES = [r.strip() for r in file_ if r.strip()]
TESTS_REQUIRE = ["pytest", "mock"]

###################################################################


def read(*parts):
    """
    Build an absolute path from *parts* and and return the contents of the
    resulting file.  Assume UTF-8 encoding.
    """
    with open(os.path.join(HERE, *parts), encoding="utf-8") as f:
        return f.read()


META_FILE = read(META_PATH)


def find_meta(meta):
    """
    Extract __*meta*__ from META_FILE.
    """
    meta_match = re.search(
        r"^__{meta}__ = ['\"]([^'\"]*)['\"]".format(meta=meta),
        META_FILE, re.M
    )
    if meta_match:
        return meta_match.group(1)
    raise RuntimeError("Unable to find __{meta}__ string.".format(meta=meta))


if __name__ == "__main__":
    setup(
        name=NAME,
        description=find_meta("description"),
        license=find_meta("license"),
        url=find_meta("uri"),
        version=find_meta("version"),
        author=find_meta("author"),
        author_email=find_meta("email"),
        maintainer=find_meta("author"),
        maintainer_email=find_meta("email"),
        keywords=KEYWORDS,
        long_description=read("README.rst"),
        packages=PACKAGES,
        package_data={"PyPlatinumRTD": ["defaults.yaml"]},
        zip_safe=False,
        classifiers=CLASSIFIERS,
        python_requires=">=3.6",
        install_requires=INSTALL_REQUIRES,
        extras_require={"test": TESTS_REQUIRE},
    )
