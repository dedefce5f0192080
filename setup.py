import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="numerical-integration",
    version="0.0.1",
    author="",
    author_email="",
    description="Rectangle, trapezoidal and Monte Carlo integration of 1D functions.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url=" ",
    packages=setuptools.find_packages(where='src'),
    package_dir={'': 'src'},  # Tell setuptools that packages are under 'src'
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "matplotlib", "numpy", "scipy", "torch", "tqdm",],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "numerical-integration=numerical_integration.cli:main",
        ],
    },
    python_requires=">=3.8",
)
