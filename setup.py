import setuptools

with open('README.md', 'r', encoding='utf-8') as fh:
    long_description = fh.read()

setuptools.setup(
    name='scaled-decimal',
    version='0.0.1',
    description='Exact decimal numbers as an unscaled integer with a scale',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: OS Independent',
    ],

    packages=setuptools.find_namespace_packages(include=['scaled_decimal', 'scaled_decimal.*']),

    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.22.0'
    ]
)
