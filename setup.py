from setuptools import setup, find_packages

main_ns = {}
with open("src/spreadsheet_builder/_version.py") as ver_file:
    exec(ver_file.read(), main_ns)

setup(
    name="spreadsheet-builder",
    version=main_ns["__version__"],
    description="Package to build spreadsheet documents in memory",
    license="MIT",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["pendulum", "sigfig", "enum-tools"],
    extras_require={
        "test": ["pytest", "pytest-check"],
        "docs": ["sphinx", "sphinx-copybutton"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
