# setup.py
from setuptools import setup, find_packages

setup(
    name="slang",
    version="0.1.0",
    description="A miniature expression-language interpreter with curried application",
    packages=find_packages(include=["slang", "slang.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sl=slang.__main__:main"],
    },
    zip_safe=False,
)
