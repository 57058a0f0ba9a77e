# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="rootzip",
    version="1.0.0",
    description="Archive files and folders sharing one parent folder into a single .zip file",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["rootzip", "rootzip.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rootzip=rootzip.main:main',  # CLI archiver
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
