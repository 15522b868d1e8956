"""Setup configuration for kn CLI."""

from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="kn-serving-cli",
    version="0.1.0",
    description="kn command line tool - describe Knative serving resources",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["kn", "kn.*"]),
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0.0",
        "requests>=2.25.0",
        "PyYAML>=5.4.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kn=kn.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Systems Administration",
    ],
    keywords="knative serving cli kubectl",
)
