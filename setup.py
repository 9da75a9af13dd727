# -*- coding: utf-8 -*-
"""rswebrtc setup script

:copyright: Copyright (c) 2026 RadiaSoft LLC.  All Rights Reserved.
:license: http://www.apache.org/licenses/LICENSE-2.0.html
"""
import setuptools


def _requires():
    return [
        "argh>=0.26",
        "jinja2>=2.7",
        "py>=1.4",
        "pydantic>=2",
        "pykern",
        "python-dateutil>=2.4.2",
        "requests>=2.18",
    ]


setuptools.setup(
    name="rswebrtc",
    version="20261018.0",
    description="Fetch, compile, and package WebRTC",
    author="RadiaSoft LLC",
    author_email="pip@radiasoft.net",
    install_requires=_requires(),
    extras_require={
        "test": [
            "pytest>=2.7",
        ],
    },
    packages=setuptools.find_packages(include=["rswebrtc", "rswebrtc.*"]),
    package_data={"rswebrtc": ["package_data/*"]},
    entry_points={
        "console_scripts": ["rswebrtc=rswebrtc.rswebrtc_console:main"],
    },
    license="http://www.apache.org/licenses/LICENSE-2.0.html",
    url="https://github.com/radiasoft/rswebrtc",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python",
        "Topic :: Software Development :: Build Tools",
        "Topic :: Utilities",
    ],
)
