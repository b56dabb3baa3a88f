# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="workingdir",
    version="1.0.0",
    description="Lexical directory values: compare, contain and join paths without changing the process working directory",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["workingdir*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'workingdir=workingdir.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
