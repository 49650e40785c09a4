# setup.py
from setuptools import setup, find_packages

setup(
    name="conslisp",
    version="0.4.0",
    description="A small, dynamically scoped LISP interpreter built on cons cells",
    packages=find_packages(include=["conslisp", "conslisp.*"]),
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
