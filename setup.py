from setuptools import setup, find_packages

setup(
    name="keyedsip",
    version="0.1.0",
    description="Keyed SipHash-2-4 digests for byte strings and columnar data. A pure-Python SipHash with configurable round counts, hash-flooding resistant when the key is secret.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
