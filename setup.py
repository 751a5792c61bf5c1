import setuptools


setuptools.setup(
    name="stabqec",
    version="0.0.1",
    description="Phase-free Pauli algebra and independence testing for quantum stabilizer codes",
    author="John Ye",
    packages=setuptools.find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "stim",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "furo"],
    },
    zip_safe=False,
)
