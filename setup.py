from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="0.1.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.20",  # board matrix and sliding-window win detection
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connectfour=connectfour.interfaces.cli:main",
        ],
    },
)
