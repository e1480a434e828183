from setuptools import find_packages, setup

setup(
    name="bitdoctor",
    version="0.1.0",
    description="Diagnoses for Bit workspaces - finds broken component links and explains how to fix them",
    packages=find_packages(include=["bitdoctor", "bitdoctor.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code relies on real click)
        "click",  # CLI context and exceptions (typer's base)
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "bitdoctor=bitdoctor.cli:main",
        ],
    },
)
