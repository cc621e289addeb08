# setup.py
from setuptools import setup, find_packages

setup(
    name="spendlite",
    version="0.1.0",
    description="Categorise bank CSV exports with keyword rules and report category totals",
    author="Your Name",
    author_email="you@example.com",
    url="https://github.com/yourusername/spendlite",
    packages=find_packages(include=["spendlite", "spendlite.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "pandas>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "spendlite=spendlite.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
