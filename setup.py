# setup.py
from setuptools import setup, find_packages

setup(
    name="flisp",
    version="0.1.0",
    description="A small homoiconic Lisp-like language: lexer, parser, semanter and tree-walking interpreter",
    packages=find_packages(include=["flisp", "flisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
