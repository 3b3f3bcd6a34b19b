# setup.py
from setuptools import setup, find_packages

setup(
    name="ok-lang",
    version="0.1.0",
    description="A small Lisp-family expression language with an interactive reader",
    python_requires=">=3.10",
    packages=find_packages(include=["ok", "ok.*", "ok_lsp", "ok_lsp.*"]),
    install_requires=[
        "click>=8.0",
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "ok=ok.cli:main",
            "ok-ls=ok_lsp.server:main",
        ],
    },
    zip_safe=False,
)
