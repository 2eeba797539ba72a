from setuptools import find_packages, setup

setup(
    name="smokegen",
    version="0.1.0",
    description="Derive smoke tests for command-line utilities from their manual pages",
    packages=find_packages(include=["smokegen", "smokegen.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.16",  # CLI framework
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for generated test scripts
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "click>=8.2",  # Separate stderr in CliRunner on click-based typer releases
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "smokegen=smokegen.cli:main",
        ],
    },
)
