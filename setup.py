# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="ponderfs",
    version="0.1.0",
    description="Sandboxed workspace introspection: bounded directory trees and guarded text reads",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["ponderfs", "ponderfs.*"]),
    package_data={"ponderfs.interface.locales": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ponderfs=ponderfs.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
)
