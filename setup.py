from setuptools import setup

setup(
    name='idcodec',
    version='1.0',
    description='Reversible, salted obfuscation of integer IDs into short strings (hashids).',
    python_requires='>=3.10',
    py_modules=[
        'alphabet', 'app', 'codec', 'config', 'core_logic', 'encoding',
        'limiter', 'models', 'mymath', 'obfuscation', 'router', 'schemas',
    ],
    install_requires=[
        'fastapi',
        'pydantic>=2',
        'slowapi',
        'uvicorn',
    ],
    extras_require={
        'test': ['pytest', 'httpx'],
    },
)
