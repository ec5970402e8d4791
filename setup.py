from setuptools import find_packages, setup

setup(
    name="mcpctl",
    version="0.1.0",
    description="Install and manage MCP servers for AI clients",
    packages=find_packages(include=["mcpctl", "mcpctl.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI framework; 0.26+ vendors click, breaking shared click contexts/exceptions
        "click",  # Used directly for prompt choices and exceptions
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "requests",  # Registry HTTP client
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a TTY
        "mcp",  # MCP SDK: default stdio server environment
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mcpctl=mcpctl.cli:main",
        ],
    },
)
