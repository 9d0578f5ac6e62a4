from setuptools import setup, find_namespace_packages

setup(
    name="tender_search",
    version="0.1",
    packages=find_namespace_packages(include=["app", "app.*", "search", "search.*"]),
    install_requires=[
        "pytest",
        "uvicorn",
        "fastapi",
        "pydantic>=2.0",
        "httpx>=0.27.0",
    ],
    python_requires='>=3.11',
)
