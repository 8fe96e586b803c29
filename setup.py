from setuptools import setup, find_packages

setup(
    name="fiers",
    version="0.1.0",
    description="Declarative building blocks for fuzzy inference engines: norms, membership functions, universes of discourse and blueprints",
    author="fundthmcalculus",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["numpy", "scipy", "plotly"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
    license="MIT",
)
