from setuptools import setup, find_packages

setup(
    name="exactsolve",
    version="1.0",
    description="Exact integer-ratio solutions of square linear systems",
    long_description=("Gauss-Jordan elimination on bounded sign-magnitude fractions with overflow detection "
                      "and classification of systems without a unique solution"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "scipy", "sympy", "psutil"],
    extras_require={
        "tests": ["pytest"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear equations", "gauss-jordan", "exact arithmetic", "rational numbers"],
    zip_safe=False,
)
