from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='sexagesimal',
    version='1.0.0',
    packages=find_packages(include=['sexagesimal', 'sexagesimal.*']),
    license='MIT',
    description='Sexagesimal formatting of equatorial coordinates',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['astronomy', 'coordinates', 'sexagesimal', 'IAU names'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Astronomy',
        'License :: OSI Approved :: MIT License',
    ],
    install_requires=['numpy'],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage']},
)
