# setup.py
from setuptools import setup, find_packages

setup(
    name="artlang",
    version="0.1.0",
    description="A small s-expression language for procedural 2D drawing",
    packages=find_packages(include=["artlang", "artlang.*", "artlang_lsp", "artlang_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
