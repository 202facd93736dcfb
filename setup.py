# setup.py
from setuptools import setup, find_packages

setup(
    name="scoped_tempdir",
    version="0.1.0",
    description="Collision-resistant temporary directories with scoped cleanup",
    author="Swift Fox",
    packages=find_packages(
        exclude=(
            "tests",
            "tests.*",
            "docs",
            "build",
            "dist",
        )
    ),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
