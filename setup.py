"""Setup script for funcshape."""
from setuptools import setup, find_packages  # type: ignore
import funcshape

setup(
    name='funcshape',
    version=funcshape.version,
    description='Combinators for currying, partial application, argument adapters and composition',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='curry partial compose pipe point-free functional',
    python_requires='>=3.10',
    packages=find_packages(include=['funcshape', 'funcshape.*']),  # type: ignore
    install_requires=[
        'parsy>=2.0,<3',
        'typing-extensions>=4',
    ],
    extras_require={
        'test': [
            'coverage>=6.4.4',
            'hypothesis>=6',
            'pytest>=7',
        ],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
