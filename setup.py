#!/usr/bin/env python3
# =============================================================================
#  semilattice — setup.py
#
#  For new tooling, prefer:
#      pip install -e ".[dev]"
#      python -m build
#      python -m pytest
# =============================================================================

from __future__ import annotations

import re
from pathlib import Path

from setuptools import setup, find_packages

# ---------------------------------------------------------------------------
#  Read version from the package so we have a single source of truth.
# ---------------------------------------------------------------------------
_HERE = Path(__file__).resolve().parent


def _read_version() -> str:
    """Extract the version string from semilattice/__init__.py."""
    init = _HERE / "semilattice" / "__init__.py"
    text = init.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*"([^"]+)"', text, re.MULTILINE)
    if match:
        return match.group(1)
    return "0.0.0"


def _read_long_description() -> str:
    """Read README.md for the long description."""
    readme = _HERE / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


_TEST_REQUIRES = [
    "pytest>=7.0",
    "hypothesis>=6.0",
]

setup(
    name="semilattice",
    version=_read_version(),
    description=(
        "Join and meet semilattice capabilities, bound witnesses, "
        "and law-preserving adapters for order-independent merging."
    ),
    long_description=_read_long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    author="semilattice contributors",
    python_requires=">=3.11",
    packages=find_packages(
        include=[
            "semilattice",
            "semilattice.*",
        ],
        exclude=[
            "tests",
            "tests.*",
        ],
    ),
    package_data={
        "semilattice": ["py.typed"],
    },
    install_requires=[],
    extras_require={
        "test": _TEST_REQUIRES,
        "dev": _TEST_REQUIRES + [
            "pytest-cov>=4.0",
            "ruff>=0.4",
            "mypy>=1.10",
            "black>=24.0",
            "isort>=5.13",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Typing :: Typed",
    ],
    keywords=[
        "lattice",
        "semilattice",
        "crdt",
        "abstract-interpretation",
        "monoid",
    ],
    zip_safe=False,
)
