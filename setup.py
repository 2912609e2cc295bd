# setup.py

from setuptools import setup, find_packages

setup(
    name="segment_sweep",
    version="0.1.0",
    description="Bentley-Ottmann sweep-line intersection of 2-D line segments",
    packages=find_packages(exclude=["tests*", "benchmarks*", "examples*", "scripts*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)
