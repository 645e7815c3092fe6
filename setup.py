# setup.py
from setuptools import setup, find_packages

setup(
    name="mlisp",
    version="0.1.0",
    description="Lisp interpreter with a numeric tower and numpy-backed matrices",
    packages=find_packages(include=["mlisp", "mlisp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.22",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mlisp=mlisp.__main__:main"],
    },
    zip_safe=False,
)
