import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("bignum/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="bignum",
    version=version,
    description="Arbitrary precision integers (base 10**9 limbs) and exact decimal fractions.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires=">=3.6",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
            # arbitrary precision
            # bignum, bigint
            # decimal arithmetic
    ],
)
