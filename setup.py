from setuptools import setup, find_packages

setup(
    name="gentzen",
    version="0.1.0",
    description="Proof search and LaTeX derivations for a propositional sequent calculus",
    author="Gentzen Contributors",
    author_email="",

    package_dir={"": "src"},
    packages=find_packages(where="src"),

    zip_safe=False,
    python_requires=">=3.10",

    install_requires=[
        "lark>=1.1",
        "pyyaml",
        "python-dotenv",
        "tqdm",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "gentzen=gentzen.cli.prove:main",
            "gentzen-batch=gentzen.cli.batch:main",
        ],
    },
)
