from setuptools import setup, find_packages

setup(
    name="hours-hook",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        # Core dependencies
        "pynput",  # For mouse/keyboard monitoring
        "python-dotenv>=1.0.0",  # For .env configuration
    ],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "hours-hook=hours_hook.cli:main",
        ],
    },
    description="Throttled input-activity hook for the record-hours time tracker",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
