"""
setup.py

Установка пакета.

Использование:
    pip install -e .[test]
    peg-solitaire --auto
"""

from setuptools import setup

setup(
    name="peg_solitaire",
    version="1.0.0",
    description="Cross-shaped Peg Solitaire solver (memoized DFS)",
    packages=["core", "solvers", "solutions", "peg_io", "utils"],
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-solitaire=main:main",
        ],
    },
    zip_safe=False,
)
