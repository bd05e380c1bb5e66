"""
Setup script for graph-schema-designer: derive connection-style schema documents from graph models
"""

from setuptools import setup, find_packages

setup(
    name="graph-schema-designer",
    version="1.0.0",
    description="Derive connection-style schema documents from visually designed graphs",
    long_description="Turns a directed labeled graph of typed nodes and edges into a schema document with node types, paginated connections and CRUD mutations",
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests*", "docs*", "examples*"]),
    python_requires=">=3.9",
    install_requires=[
        # Models and configuration
        "pydantic>=2.11.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=1.0.0",
            "flake8>=4.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "graph-designer=graphdesigner.cli:main",
        ],
    },
    include_package_data=True,
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Code Generators",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="graphql schema graph relay connection code-generation",
)
