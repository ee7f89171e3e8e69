from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "typer>=0.9.0",
    "tqdm>=4.65.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="mecabkit",
    version="0.1.0",
    packages=find_packages(include=["mecabkit", "mecabkit.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "mecabkit=mecabkit.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Structured tokens from MeCab morphological analyser output (Japanese and Korean)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Natural Language :: Japanese",
        "Natural Language :: Korean",
    ],
)
