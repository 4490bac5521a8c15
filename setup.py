# setup.py
from setuptools import setup, find_packages

setup(
    name="wahlberg",
    version="0.1.0",
    description="Expression language core of the Wahlbergdown document templating tool",
    packages=find_packages(include=["wahlberg", "wahlberg.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
