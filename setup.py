# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="wixtree",
    version="0.1.0",
    description="Build installer directory trees from flat path manifests",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["wixtree*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wixtree=wixtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
