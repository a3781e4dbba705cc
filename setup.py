# setup.py
from setuptools import setup, find_packages

setup(
    name="rotalog",
    version="1.0.0",
    description="Priority-filtered logger writing to size- and count-bounded rotating files",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: System :: Logging",
    ],
)
