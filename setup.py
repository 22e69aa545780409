"""
bindgen - naming and caching helpers for data-binding code generation

This setup.py file is the package configuration; `pip install -e .` works
directly against it.
"""

from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="bindgen",
        version="0.1.0",
        description="Naming, memoization and processing-step helpers for data-binding code generation.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        package_dir={"": "src"},
        packages=find_packages("src"),
        python_requires=">=3.11",
        install_requires=[
            "pydantic>=2.0",
            "PyYAML>=6.0",
        ],
        extras_require={
            "test": ["pytest>=7.0"],
        },
        entry_points={
            "console_scripts": ["bindgen=bindgen.cli:main"],
        },
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Code Generators",
        ],
    )
