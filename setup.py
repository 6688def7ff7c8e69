from setuptools import setup, find_packages

setup(
    name="geoanalysis_tool",
    version="1.0.0",
    packages=find_packages(exclude=["geoanalysis_tool.tests"]),
    install_requires=[
        "pandas>=1.3.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "geoanalysis-tool=geoanalysis_tool.cli.main:main",
        ],
    },
    python_requires=">=3.8",
    author="GeoAnalysis Tools",
    description="Command-line front end for running geospatial analysis tools",
)
