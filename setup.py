# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

from glob import glob

from setuptools import setup, find_packages

data_files = [
    ('/etc/timesettings', ['timesettings/loggerConfig.json']),
    ('/etc/timesettings', ['timesettings/timesettings.toml']),
    ('/usr/lib/systemd/system', glob('systemd/*.service')),
    ('/usr/share/dbus-1/system.d', glob('dbus/*'))
]

setup(
    name="timesettings",
    version="2022.06.01",
    packages=find_packages(exclude=["timesettings.tests", "timesettings.tests.*"]),
    scripts=['timesettings/main.py'],
    package_data={'timesettings': ['loggerConfig.json', 'timesettings.toml']},
    data_files=data_files,
    install_requires=[
        "pydbus",
        "PyGObject",
        "PySignal",
        "toml",
        "systemd-python",
    ],
    extras_require={
        "test": ["python-dbusmock"],
    },
    url="https://gitlab.com/prusa3d/sl1/sla-fw",
    license="GNU General Public License v3 or later (GPLv3+)",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)'
    ]
)
