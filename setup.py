from setuptools import setup, find_packages

setup(
    name="minnow",
    version="0.0.1",
    description="A boat with a crew, a rated speed and a handful of speed orders",
    author="James Hancock",
    author_email="j.hancock354@gmail.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "matplotlib>=3.7.0",
        "pandas>=2.1.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    python_requires=">=3.9",
)
