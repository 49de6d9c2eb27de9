from setuptools import setup
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="gesturekit",
    version="0.1.0",
    description="Scripted mouse-gesture tests for pages driven over CDP with zendriver",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["gesturekit", "gesturekit.mouse", "gesturekit.testing"],
    install_requires=[
        "zendriver",
        "Pillow",
        "pydantic>=2.5",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
