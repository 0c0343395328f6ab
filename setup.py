import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aocrun", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="advent-of-code-runner",
    version=version,
    description="Fetch, cache, self-test and time your Advent of Code solutions",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["aocrun"],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "aocrun=aocrun.runner:main",
        ],
        # https://setuptools.readthedocs.io/en/latest/setuptools.html#dynamic-discovery-of-services-and-plugins
        "aocrun.days": [],
    },
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    install_requires=[
        "urllib3>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-freezer",
            "pytest-raisin",
            "pook",
        ],
    },
)
