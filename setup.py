from setuptools import setup, find_packages

setup(
    name="safetext",
    version="0.1.0",
    author="safetext contributors",
    packages=find_packages(exclude=["tests"]),
    package_dir={"safetext": "safetext"},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # When you use this in production, pin the dependencies!
        "beautifulsoup4>=4.13.4",
        "lxml>=6.0.0",
        "loguru>=0.7.3",
        "click>=8.2.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    zip_safe=False,
    test_suite="tests",
    entry_points={
        "console_scripts": ["safetext = safetext.cli:cli"],
    },
)
