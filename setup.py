# setup.py
from setuptools import setup, find_packages

setup(
    name="appcast_scout",
    version="0.1.0",
    description="AppcastScout: finds software update feed URLs embedded in binaries",
    packages=find_packages(include=["appcast_scout", "appcast_scout.*"]),
    package_data={"appcast_scout": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["appcast-scout=appcast_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
