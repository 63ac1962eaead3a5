from setuptools import find_packages, setup

setup(
    name="cargo-nav",
    version="1.3.0",
    description="Navigate directly to crate links from your terminal",
    author="Celeo",
    url="https://github.com/celeo/cargo-nav",
    license="MIT OR Apache-2.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # Command-line interface
        "rich",  # Terminal formatting
        "pydantic>=2",  # Registry payload and config models
        "requests",  # Registry HTTP client
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "cargo-nav=cargo_nav.cli:main",
        ],
    },
)
