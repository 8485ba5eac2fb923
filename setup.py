from setuptools import find_packages, setup

setup(
    name="alts",
    version="0.3.0",
    description="Priority-based alternatives manager - resolves link names to symlinks",
    author="William Wieselquist",
    packages=find_packages(include=["alts", "alts.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Record, config and output models
        "typer<0.26",  # CLI (0.26+ vendors click; the CLI catches click exceptions)
        "click",  # CLI context and exceptions (typer backend)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output for CLI
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "alts=alts.cli:main",
        ],
    },
)
