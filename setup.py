from setuptools import setup, find_packages

setup(
    name="fishcast",
    version="0.1.0",
    description="Fish species suitability scoring and forecast engine",
    author="fishcast contributors",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"fishcast": ["config/*.yaml", "config/species/*.yaml"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
        "numpy>=1.24",
        "pandas>=2.2",
        "ephem>=4.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
