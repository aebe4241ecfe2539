from setuptools import find_packages, setup

setup(
    name="comelit-hub-ctl",
    version="0.1.0",
    description="Comelit HUB HAP service control - lifecycle and log introspection for the HomeKit bridge",
    packages=find_packages(include=["hubctl", "hubctl.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and output schemas
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting on a TTY
        "watchdog",  # File system monitoring for log follow
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "comelit-hub-ctl=hubctl.cli:main",
        ],
    },
)
