from setuptools import setup

setup(
    name='running_median',
    author='Martin Privat',
    version='0.1.0',
    packages=['running_median','running_median.tests'],
    license='Creative Commons Attribution-Noncommercial-Share Alike license',
    description='running median of an integer stream with two heaps',
    long_description=open('README.md').read(),
    install_requires=[
        "numpy", 
        "pandas",
        "seaborn",
        "tqdm",
        "matplotlib",
        "multiprocessing_logger @ git+https://github.com/ElTinmar/multiprocessing_logger.git@main",
    ],
    extras_require={
        "test": ["pytest"],
    }
)
