from setuptools import find_packages, setup

setup(
    name='usdx-vault-relay',
    version='0.1.0',
    description='HTTP relay for the USDx token and CorporateVault contracts.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'vault_relay.contracts': [
            'abi/*.json',
        ],
    },
    python_requires='>=3.9',

    entry_points={
        'console_scripts': [
            'vault-relay=vault_relay.main:main',
        ],
    },
    install_requires=[
        'click',
        'eth-account>=0.13',
        'eth-utils',
        'flask>=2.2',
        'flask-marshmallow',
        'marshmallow>=3.13',
        'pluggy',
        'prometheus-client',
        'python-dotenv',
        'structlog',
        'waitress',
        'web3>=7',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
