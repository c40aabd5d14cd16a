from pathlib import Path
from setuptools import setup, find_packages

local_path = Path(__file__).parent.joinpath

metadata = {}
exec(local_path('objtools/__about__.py').read_text(), metadata)

readme = local_path('README.rst').read_text()
history = local_path('HISTORY.rst').read_text()


setup(
    name='objtools',
    version=metadata['__version__'],
    description='currying and method decoration helpers',
    license='MIT',
    long_description=readme + '\n\n' + history,

    author=metadata['__author__'],

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ],
    keywords=['decorators', 'currying', 'mixins'],
    python_requires='>=3.6',
    packages=find_packages(exclude=('tests', 'docs')),
    extras_require={
        'test': ['pytest'],
        'docs': ['sphinx', 'furo'],
    },
)
