import pathlib
from setuptools import setup

from eccore import __doc__ as docstring

setup(
    name="eccore",
    version="0.1",
    description=docstring.strip(),
    long_description=(pathlib.Path(__file__).parent / "README.rst").read_text(),
    long_description_content_type="text/x-rst",
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
    ],
    packages=[
        "eccore",
        "eccore.ECC",
    ],
    python_requires=">=3.6",
)
