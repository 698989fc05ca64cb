import os
from setuptools import setup, find_packages

setup(
    name="mnn-prebuilt",
    version="1.0.0",
    description="Prebuilt MNN headers and libraries with build configuration helpers",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "mnn_prebuilt": [
            "lib/*/include/**/*",
            "lib/*/lib/*",
            "lib/*/binding.node",
            "platforms/*/binding.node",
        ],
    },
    include_package_data=True,
    install_requires=[
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mnn-prebuilt=mnn_prebuilt.cli:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
