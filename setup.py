from setuptools import setup, find_packages

setup(
    name="calcavendas",
    version="1.0.0",
    packages=find_packages(include=["calcavendas", "calcavendas.*"]),
    package_data={
        "calcavendas.presentation": ["templates/pedidos/*.html"],
    },
    install_requires=[
        "django>=4.0",
        "djangorestframework",
        "drf-spectacular",
        "psycopg2-binary",
        "python-decouple",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-django",
        ],
    },
    python_requires=">=3.11",
)
