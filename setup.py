import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="dimcalc",
    version="0.1.0",
    description="Dimensioned quantities for calculators: dimensional "
                "algebra, unit conversion, quantity parsing and an RPN "
                "stack.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest']
    },
    keywords='units dimensional analysis conversion calculator rpn',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['dimcalc', 'dimcalc.*']),
    python_requires='>=3.12',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering"
    ]
)
