# setup.py
from setuptools import setup, find_packages

setup(
    name="gexpr",
    version="0.1.0",
    description="G-Expression evaluator: a seven-node homoiconic core with closures, fixed points and pattern matching",
    packages=find_packages(include=["gexpr", "gexpr.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "gexpr=gexpr.cli:main",
        ],
    },
    zip_safe=False,
)
