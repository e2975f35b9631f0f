"""
Setup script for the webrank package.
"""

from setuptools import setup, find_packages

setup(
    name="webrank",
    version="0.1.0",
    description="Webpage ranking using PageRank and TF-IDF relevance",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=2.0.0",
        "networkx>=3.0",
        "numpy>=1.24",
        "scipy>=1.10",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "plot": [
            "matplotlib>=3.7",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
