#!/usr/bin/env python3
"""
Setup script for DNS Token Broker package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="dns-token-broker",
    version="1.0.0",
    author="DNS Token Broker Team",
    author_email="team@example.com",
    description="Token-authenticated dynamic DNS hostname broker",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/dns-token-broker",
    packages=find_packages(include=["dns_token_broker", "dns_token_broker.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: Name Service (DNS)",
        "Topic :: System :: Systems Administration",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "test": ["behave>=1.2.6", "pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "dns-broker=dns_token_broker.cli.main:main",
        ],
    },
    include_package_data=True,
)
