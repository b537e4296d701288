import setuptools

setuptools.setup(
    name='lbcase',
    version='0.1',
    license='MIT',
    zip_safe=False,
    packages=setuptools.find_packages(include=['lbcase', 'lbcase.*']),
    package_data={'lbcase': ['templates/*.mako']},
    fullname='lbflow case builder',
    url='https://github.com/gilberto-ribeiro/lbflow',
    python_requires='>=3.8',
    install_requires=[
        'pyyaml',   'rich',     'mako',
        'fastjsonschema',       'rapidfuzz'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['lbcase=lbcase.main:main'],
    },
    description='Generates lbflow lattice Boltzmann cases (Cargo.toml and src/main.rs) from case files.',
)
