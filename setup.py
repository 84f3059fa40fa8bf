"""
Setup script for posbraid.
"""

from setuptools import setup, find_packages

setup(
    name="posbraid",
    version="1.0.0",
    description="Enumeration of prime positive braid knots of a given genus, with DT codes",
    author="posbraid Project",
    packages=find_packages(include=["posbraid", "posbraid.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "posbraid=posbraid.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
