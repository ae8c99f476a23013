"""Setup script for endpoint-definitions."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Return the long description, if a README is present."""
    readme = Path(__file__).parent / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="endpoint-definitions",
    version="0.1.0",
    description="Modular endpoint and service registration for Starlette applications",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["endpoint_definitions", "endpoint_definitions.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "starlette>=0.37",
        "uvicorn>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
    entry_points={
        "console_scripts": [
            "endpoint-definitions=endpoint_definitions.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: AsyncIO",
        "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    ],
)
