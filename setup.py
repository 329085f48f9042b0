import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="barparse",
    version="0.1.0",
    description="Status bar markup and template parsing",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    include_package_data=True,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"barparse": ["*.pyi", "core/*.pyi"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    entry_points={
        "console_scripts": [
            "barparse=barparse.admin:main",
        ],
    },
    install_requires=[
        "attrs>=22.2.0",
        "colorama>=0.4.6",
        "lazy_loader>=0.3",
        "ruamel.yaml>=0.17.2",
        "typing_extensions>=4.5.0",
    ],
    extras_require={
        "test": [
            "hypothesis>=6.82.0",
            "more-itertools>=8",
            "pytest>=7.0.0",
            "pytest-mock>=3.7.0",
        ],
    },
    python_requires=">=3.9",
)
