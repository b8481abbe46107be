from setuptools import setup, find_packages

setup(
    name="ohana-calendar-api",
    version="1.0.0",
    packages=find_packages(include=["src", "src.*"]),
    py_modules=["app"],
    python_requires=">=3.10",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic",
        "pydantic-settings",
        "python-dotenv",
        "requests",
        "oauthlib",
        "google-auth",
        "google-auth-oauthlib",
        "google-api-python-client",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
