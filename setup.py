# setup.py - Build the mathsets package
from setuptools import setup, find_packages

setup(
    name="mathsets",
    version="0.1.0",
    description="Set algebra engine with extensional and intensional sets",
    python_requires=">=3.9",
    packages=find_packages(include=["mathsets", "mathsets.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
