# setup.py
from setuptools import setup

setup(
    name="set_algebra",
    version="0.1.0",
    description="Pure set-algebra operations and relations over Python sets",
    packages=["set_algebra"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
)
