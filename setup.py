# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Endevor-SCM contributors

"""Setup configuration for the endevor-scm distribution.

Installs the adapter packages under ``adapters/`` and the SCM service
under ``scm/`` as one distribution.
"""

from pathlib import Path

from setuptools import setup

this_directory = Path(__file__).parent
readme = this_directory / "README.md"
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

ADAPTERS = ["endevor_config", "endevor_logging", "endevor_retrieval", "endevor_secrets"]

setup(
    name="endevor-scm",
    version="0.1.0",
    author="Endevor-SCM Contributors",
    description="Endevor source retrieval through the Topaz CLI, with configuration validation and a REST API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=[*ADAPTERS, "endevor_scm"],
    package_dir={
        **{name: f"adapters/{name}/{name}" for name in ADAPTERS},
        "endevor_scm": "scm/endevor_scm",
    },
    package_data={"endevor_config": ["data/*.json"]},
    include_package_data=True,
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
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "hypothesis>=6.0.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "endevor-scm=endevor_scm.cli:main",
            "endevor-scm-service=endevor_scm.main:main",
        ],
    },
)
