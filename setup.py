"""atomtable: Chemical elements, atomic symbols, weights and valences."""

from setuptools import find_packages, setup

#####################################
VERSION = "0.1.0"
ISRELEASED = True
if ISRELEASED:
    __version__ = VERSION
else:
    __version__ = VERSION + ".dev0"
#####################################


setup(
    name="atomtable",
    version=__version__,
    description=__doc__.split("\n")[0],
    long_description=__doc__,
    packages=find_packages(include=["atomtable", "atomtable.*"]),
    package_data={
        "atomtable": [
            "tables/*.xsd",
            "tables/xml/*.xml",
            "tests/files/*.xml",
        ]
    },
    package_dir={"atomtable": "atomtable"},
    include_package_data=True,
    install_requires=["lxml"],
    extras_require={
        "tests": ["pytest", "numpy", "parmed"],
    },
    python_requires=">=3.9",
    license="MIT",
    zip_safe=False,
    keywords="atomtable",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX",
        "Operating System :: Unix",
        "Operating System :: MacOS",
    ],
)
