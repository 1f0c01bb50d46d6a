from setuptools import find_packages, setup

setup(
    name="coaltime",
    version="0.1.0",
    description="Binomial confidence estimates of the coalescence time of aligned sequences.",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.22",
        "pandas>=2.1",
        "scipy>=1.8",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
