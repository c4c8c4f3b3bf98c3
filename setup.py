from setuptools import setup, find_packages

setup(
    name="goessner-json",
    version="0.1.0",
    description="Convert parsed XML trees to JSON following Goessner's mapping rules",
    author="Your Name",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "pyyaml>=6.0",
        "structlog>=23.1",
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "xmltodict>=0.13",
        ]
    },
    entry_points={
        "console_scripts": [
            "goessner-json=goessner_json.cli:app"
        ]
    },
    python_requires=">=3.10",
    include_package_data=True,
)
