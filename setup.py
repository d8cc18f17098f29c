"""
setup.py

Установка Marbles Solver.

Использование:
    pip install -e .            # пакет + Flask
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="marbles_solver",
    version="1.0.0",
    description="Marbles (peg solitaire) solver: depth-first search with a dead-end index",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    package_data={"web": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "marbles-solver=main:main",
        ],
    },
    zip_safe=False,
)
