import setuptools

setuptools.setup(
	name='ordmask',
	version='0.1.0',
	packages=[
		'ordmask',
	],
	description='Finite unions of half-open ranges over any ordered domain, with boolean set algebra',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	extras_require={
		'test': ['pytest'],
	},
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Libraries",
		"Development Status :: 3 - Alpha",
	],
)
