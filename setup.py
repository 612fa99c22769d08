from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name             = "pyisddecoder",
    version          = "0.1.0",
    description      = "Python module to decode NOAA Integrated Surface Database (ISD) observations",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    license          = "Open Government License v3.0",
    packages         = [
        "pyisddecoder",
        "pyisddecoder.isd"
    ],
    extras_require   = {
        "test": ["pytest"]
    },
    classifiers = [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: Other/Proprietary License",
        "Programming Language :: Python :: 3"
    ]
)
