from setuptools import find_packages, setup


def readme():
    with open("README.md") as f:
        return f.read()


setup(
    name="exifgps",
    version="0.1",
    description="Extract GPS coordinates from the EXIF tags of JPEG & PNG images into a CSV or HTML report.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["exifgps", "exifgps.*"]),
    package_data={"exifgps": ["templates/*.html"]},
    python_requires=">=3.9",
    install_requires=[
        "Pillow>=10.0",
        "Jinja2>=3.0",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "rich",
        "structlog",
        "typer>=0.9",
    ],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
    entry_points={"console_scripts": ["exifgps=exifgps.cli.base:cli"]},
)
