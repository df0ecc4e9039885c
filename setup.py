from setuptools import find_packages, setup

setup(
    name="obmd",
    version="0.1.0",
    description="Obsidian wikilinks, embeds and tags for markdown-it-py",
    packages=find_packages(include=["obmd", "obmd.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "markdown-it-py>=3.0",  # Markdown engine
        "mdit-py-plugins>=0.4",  # {.class} attributes and task lists
        "regex",  # Unicode property classes for tags
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ bundles its own click; the CLI uses the click package)
        "click",  # CLI context and exceptions
        "rich",  # Terminal formatting
        "pygments",  # Output highlighting
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "obmd=obmd.cli:main",
        ],
    },
)
