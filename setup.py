from setuptools import setup, find_packages

setup(
    name="lottobot",
    version="1.0.0",
    packages=find_packages(include=["lottobot", "lottobot.*", "shared", "shared.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "seaborn>=0.13",
        "scipy",
        "requests",
        "PyYAML",
        "marshmallow>=3.13.0"
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
