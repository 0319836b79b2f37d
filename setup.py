from setuptools import setup, find_packages

setup(
    name="icomesh",
    version="0.1.0",
    packages=find_packages(include=["icomesh", "icomesh.*"]),
    install_requires=[
        "torch>=2.0.0",
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
