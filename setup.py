# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description = fh.read()


requirements = ["cxxfilt"]


setup(
    name='pydemangle',
    # note to self: always change this in config as well.
    version='1.0.0',
    description='Turn Z-encoded, C++ and Rust mangled symbol names back into human-readable names. Based on cxxfilt.',
    long_description_content_type="text/markdown",
    long_description=long_description,
    license="BSD 2-Clause",
    packages=find_packages(exclude=('tests', 'docs')),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Debuggers",
    ],
)
