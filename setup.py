import setuptools

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setuptools.setup(
    name="pewslib",
    version="0.0.1",
    install_requires=[
        "matplotlib",
        "numpy",
        "bitstruct",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    description="Decoder Library for KMA Public Earthquake Warning System feed",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_namespace_packages(include=["pewslib*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
)
