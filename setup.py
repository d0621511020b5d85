# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dir2src",
    version="0.1.0",
    description="Embed a directory tree of binary assets into generated C++ sources",
    packages=find_namespace_packages(where="src", include=["dir2src", "dir2src.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dir2src=dir2src.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
