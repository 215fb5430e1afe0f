from setuptools import find_packages, setup
from version import get_version

# fetch the version to use as build version
build_version = get_version()

# use the contents of the README file as the 'long description' for the package
with open("./README.md", "r") as fh:
    long_description = fh.read()

#
# build the package
#
setup(
    name="allen-intervals",
    version=build_version,
    description="Allen's Interval Algebra: interval relations and interval set operations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where=".", include=["allen", "allen.*"]),
    python_requires=">=3.8",
    install_requires=["pandas", "numpy"],
    extras_require=dict(tests=["pytest"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
