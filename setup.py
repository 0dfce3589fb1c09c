# SPDX-License-Identifier: MIT
# Copyright (c) 2025 steam-auth contributors

"""Setup configuration for steam-auth package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="steam-auth",
    version="0.1.0",
    author="steam-auth contributors",
    description="Steam OpenID 2.0 sign-in adapter with assertion verification and profile resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["steam_auth", "steam_auth.*", "steam_logging", "steam_logging.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",  # For check_authentication and Steam Web API requests
        "pydantic>=2.4.0",  # For configuration and validation
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
        "examples": [
            "fastapi>=0.109.0",  # For the example host application
            "uvicorn>=0.27.0",
        ],
    },
)
