# setup.py
from setuptools import setup, find_packages

setup(
    name="mankai",
    version="0.1.0",
    description="A small Lisp-like interpreter for embedding in host applications",
    packages=find_packages(include=["mankai", "mankai.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mankai-repl=mankai.__main__:main"],
    },
    zip_safe=False,
)
