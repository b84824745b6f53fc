#!/usr/bin/env python3

"""Setup script for molecular descriptor and bond property prediction package."""

from setuptools import setup, find_packages

setup(
    name="chemdesc",
    version="0.1.0",
    description="Molecular graph descriptors and classifier-backed bond property prediction",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"chemdesc": ["data/*.csv", "data/arff/*.arff"]},
    include_package_data=True,
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.6.0",
        "pandas>=1.3.0",
        "scipy>=1.7.0",
        "scikit-learn>=1.0",
        "rdkit>=2022.3.1",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "chemdesc-bond-ip=chemdesc.presentation.cli.predict_bond_ip:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
