#!/usr/bin/env python
import setuptools

setuptools.setup(
    name="boxinstaller",
    version="0.0.1",
    description="Installs the box widgets shipped in package XML manifests",
    packages=setuptools.find_packages(exclude=["tests", "*.tests", "*.tests.*"]),
    py_modules=["manage"],
    install_requires=[
        "dj-database-url",
        "django",
        "djangorestframework",
        "lxml",
        "psycopg2-binary",
        "python-dotenv",
        "sentry-sdk",
    ],
    extras_require={
        "test": [
            "factory-boy",
            "pytest",
            "pytest-django",
        ],
    },
)
