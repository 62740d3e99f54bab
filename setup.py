from setuptools import setup, find_packages

setup(
    name="nuts-trainer",
    version="1.0.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "click>=8.0",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "nuts=nuts.cli:main",
        ],
    },
    python_requires=">=3.10",
)
