from setuptools import find_packages, setup

setup(
    name="faml",
    version="0.1.0",
    description="Fast approximate math: branchless integer tricks and bit-level float approximations",
    author="FAML Authors",
    packages=find_packages(include=["faml", "faml.*"]),
    install_requires=[
        "numpy>=2.0",
        "matplotlib>=3.5.0",  # Used for error profile plots
        "pandas>=1.0.0",  # Used for data export
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="fast math, approximation, bit manipulation, fast inverse square root, branchless",
)
