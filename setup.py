"""
This module configures the package for distribution and installation.
"""

from setuptools import setup, find_packages

setup(
    name="pymandel",
    version="0.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=["pygame", "pillow", "numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "pymandel = pymandel.__main__:main",
        ]
    },
)
