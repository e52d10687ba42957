# setup.py
from setuptools import setup, find_packages

setup(
    name="lemon-lisp",
    version="0.1.0",
    description="A small tree-walking evaluator for a Scheme-like language with self-tail-call optimization",
    packages=find_packages(include=["lemon", "lemon.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
