from setuptools import setup, find_packages

setup(
    name="densematrix",
    version="1.0",
    description="Dense matrices with aliasing views, determinants and Gauss-Jordan inversion",
    long_description=("Dense 2-D floating-point matrices addressed by 1-indexed (row, column) pairs. Views alias "
                      "rectangular regions of a matrix for in-place mutation and take part in the same arithmetic "
                      "as ordinary matrices. Includes concatenation, cofactor determinants, Gauss-Jordan inversion, "
                      "a plain text format and a least-squares polynomial fitting tool."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["densematrix", "densematrix.*"]),
    install_requires=["numpy", "matplotlib"],
    extras_require={"test": ["pytest", "scipy"]},
    entry_points={"console_scripts": ["densematrix-polyfit = densematrix.cli:start_from_command_line"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["matrix", "linear algebra", "determinant", "gauss-jordan", "least squares"],
    zip_safe=False,
)
