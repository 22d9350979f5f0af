from setuptools import setup, find_packages

from macparse import VERSION

setup(
    name="macparse",
    description="Parse, validate and reformat MAC addresses",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "macinfo = macparse.programs.macinfo:main",
        ],
    },
    version=VERSION,
)
