from setuptools import setup, find_packages

setup(
    name="wavelib",
    version="0.1.0",
    author="Lucas Logue",
    author_email="llogue@nd.edu",
    description="A library for sampling and animating 1D Gaussian wave packets with a localized phase gate",

    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "matplotlib>=3.5",
        "imageio>=2.28",
        "pillow",
    ],
    extras_require={
        "app": ["streamlit>=1.26"],
        "test": ["pytest>=7"],
    },
    python_requires='>=3.10',
)
