from setuptools import setup

with open("./README.md") as fp:
    long_description = fp.read()

setup(
    name="spdx2_import",
    description="Extract license & copyright facts from SPDX-2 RDF documents.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=["spdx", "rdf", "license", "copyright"],
    packages=["spdx2_import"],
    include_package_data=True,
    python_requires=">=3.7",
    license="Apache Software License",
    install_requires=[
        "rdflib>=6.0.0",
        "rich>=12.5.1",
        "setuptools>=45",
    ],
    extras_require={
        "dev": [
            "black",
            "mypy",
            "flake8>=3.8.0",
            "isort>=5.0.0",
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
            "coveralls>=3.3.1",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Utilities",
        "Typing :: Typed",
    ],
)
